"""Notification Dispatch: fire-and-forget delivery of lifecycle events.

Invariants:
    - emit() never blocks, never raises, and returns before delivery starts
    - Delivery failures are logged only: no retry, no rollback, never caller-visible
    - Pending deliveries are tracked so drain() can await them (shutdown, tests)
    - No notifier configured -> events are logged and dropped

Design Decisions:
    - One asyncio task per event instead of an inline await: the caller's
      success/failure contract is independent of notification delivery
    - Module-level singleton initialized on startup, same lifecycle as db_manager
"""

import asyncio
import logging

from pilot_roster.core.errors import TransportError
from pilot_roster.core.lifecycle_events import LifecycleEvent
from pilot_roster.core.repository_protocols import Notifier

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Hands lifecycle events to a Notifier on background tasks."""

    def __init__(self, notifier: Notifier | None = None):
        self._notifier = notifier
        self._pending: set[asyncio.Task] = set()

    @property
    def enabled(self) -> bool:
        return self._notifier is not None

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def emit(self, event: LifecycleEvent) -> None:
        """Schedule delivery without blocking the caller."""
        extra = {"callsign": event.callsign, "event_kind": event.kind.value}
        if not self.enabled:
            logger.debug("Notifications disabled, dropping event", extra=extra)
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop, dropping event", extra=extra)
            return
        task = loop.create_task(self._deliver(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, event: LifecycleEvent) -> None:
        extra = {"callsign": event.callsign, "event_kind": event.kind.value}
        try:
            await self._notifier.notify(event)
        except TransportError as e:
            logger.warning(f"Notification delivery failed: {e.message}", extra=extra)
        except Exception as e:
            logger.error(
                f"Unexpected notification error: {e}", exc_info=True, extra=extra,
            )

    async def drain(self) -> None:
        """Wait for all in-flight deliveries."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


# Singleton (initialized on startup)
dispatcher: NotificationDispatcher = NotificationDispatcher()


def init_notifications(notifier: Notifier | None) -> NotificationDispatcher:
    global dispatcher
    dispatcher = NotificationDispatcher(notifier)
    return dispatcher


def get_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency for the process-wide dispatcher."""
    return dispatcher
