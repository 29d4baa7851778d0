"""Pilot Roster API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and notification dispatcher initialized on startup via lifespan
    - Pending notifications drained on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pilot_roster.api.error_handlers import register_error_handlers
from pilot_roster.api.routes import health, pilots
from pilot_roster.config import get_settings
from pilot_roster.infrastructure.database import init_db
from pilot_roster.infrastructure.discord_webhook import DiscordWebhookNotifier
from pilot_roster.infrastructure.observability import setup_logging
from pilot_roster.services.notification_dispatch import init_notifications

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    notifier = None
    if settings.discord_webhook_url.strip():
        notifier = DiscordWebhookNotifier(
            settings.discord_webhook_url,
            timeout_seconds=settings.notification_timeout_seconds,
        )
    else:
        logger.warning("DISCORD_WEBHOOK_URL not set, lifecycle notifications disabled")
    dispatcher = init_notifications(notifier)
    logger.info("Pilot Roster API started")
    yield
    await dispatcher.drain()
    logger.info("Pilot Roster API shutting down")


app = FastAPI(
    title="Pilot Roster API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(pilots.router)

register_error_handlers(app)
