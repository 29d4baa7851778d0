"""Discord Webhook Notifier: delivers lifecycle events as Discord embeds.

Invariants:
    - One embed per event; title and colour depend on the event kind
    - Reason field only present for suspension events
    - Non-2xx responses and network errors raise TransportError("notification")
    - Never retries; the dispatcher decides what a failure means (it only logs)
"""

import logging
from datetime import datetime, timezone

import httpx

from pilot_roster.core.domain_types import LifecycleEventKind
from pilot_roster.core.errors import TransportError
from pilot_roster.core.lifecycle_events import LifecycleEvent

logger = logging.getLogger(__name__)

EMBED_FOOTER = "Pilot Roster"

_EMBED_STYLE: dict[LifecycleEventKind, tuple[str, int]] = {
    LifecycleEventKind.CREATION: ("New Pilot", 0x3498DB),         # blue
    LifecycleEventKind.REACTIVATION: ("Pilot Reactivated", 0x2ECC71),  # green
    LifecycleEventKind.SUSPENSION: ("Pilot Suspended", 0xFF0000),  # red
}


def build_embed(event: LifecycleEvent, now: datetime | None = None) -> dict:
    """Render a lifecycle event as a Discord embed."""
    title, color = _EMBED_STYLE[event.kind]
    fields = [
        {"name": "Callsign", "value": event.callsign, "inline": True},
        {"name": "Name", "value": f"{event.name} {event.surname}", "inline": True},
    ]
    if event.kind == LifecycleEventKind.SUSPENSION and event.reason:
        fields.append({"name": "Reason", "value": event.reason, "inline": False})
    return {
        "title": title,
        "color": color,
        "fields": fields,
        "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
        "footer": {"text": EMBED_FOOTER},
    }


class DiscordWebhookNotifier:
    """POSTs embeds to a Discord webhook URL."""

    def __init__(
        self,
        webhook_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def notify(self, event: LifecycleEvent) -> None:
        payload = {"embeds": [build_embed(event)]}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                resp = await client.post(self.webhook_url, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, "notification", "post") from e

        if not resp.is_success:
            raise TransportError(
                f"webhook returned {resp.status_code}: {resp.text[:200]}",
                "notification", "post",
            )
        logger.info(
            f"Discord notification sent: {event.kind.value}",
            extra={"callsign": event.callsign, "event_kind": event.kind.value},
        )
