"""Discord Webhook Notifier: embed rendering and transport failures.

Tests cover:
    - Embed title/colour per event kind; Reason only for suspensions
    - Any 2xx accepted; non-2xx and connection errors -> TransportError
"""

import json
from datetime import datetime, timezone

import httpx
import pytest

from pilot_roster.core.domain_types import LifecycleEventKind
from pilot_roster.core.errors import TransportError
from pilot_roster.core.lifecycle_events import LifecycleEvent
from pilot_roster.infrastructure.discord_webhook import (
    DiscordWebhookNotifier, build_embed,
)

WEBHOOK = "https://discord.test/api/webhooks/1/token"
NOW = datetime(2026, 4, 1, 8, 0, tzinfo=timezone.utc)


def _event(kind, reason=None):
    return LifecycleEvent(
        kind=kind, callsign="ASX001", name="Marco", surname="Rossi", reason=reason,
    )


@pytest.mark.parametrize("kind, title, color", [
    (LifecycleEventKind.CREATION, "New Pilot", 0x3498DB),
    (LifecycleEventKind.REACTIVATION, "Pilot Reactivated", 0x2ECC71),
    (LifecycleEventKind.SUSPENSION, "Pilot Suspended", 0xFF0000),
])
def test_embed_style_per_kind(kind, title, color):
    embed = build_embed(_event(kind, reason="x"), now=NOW)
    assert (embed["title"], embed["color"]) == (title, color)
    assert embed["timestamp"] == NOW.isoformat()


def test_reason_only_on_suspension():
    suspended = build_embed(_event(LifecycleEventKind.SUSPENSION, "inactivity"))
    created = build_embed(_event(LifecycleEventKind.CREATION, "ignored"))

    assert {"name": "Reason", "value": "inactivity", "inline": False} in suspended["fields"]
    assert [f["name"] for f in created["fields"]] == ["Callsign", "Name"]
    assert created["fields"][1]["value"] == "Marco Rossi"


async def test_notify_posts_embed():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    notifier = DiscordWebhookNotifier(WEBHOOK, transport=httpx.MockTransport(handler))
    await notifier.notify(_event(LifecycleEventKind.CREATION))

    assert len(seen) == 1
    assert str(seen[0].url) == WEBHOOK
    body = json.loads(seen[0].content)
    assert body["embeds"][0]["title"] == "New Pilot"


@pytest.mark.parametrize("status", [200, 202, 204])
async def test_any_2xx_is_success(status):
    transport = httpx.MockTransport(lambda request: httpx.Response(status))
    notifier = DiscordWebhookNotifier(WEBHOOK, transport=transport)
    await notifier.notify(_event(LifecycleEventKind.CREATION))


async def test_error_status_raises_transport_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="oops"))
    notifier = DiscordWebhookNotifier(WEBHOOK, transport=transport)

    with pytest.raises(TransportError) as exc:
        await notifier.notify(_event(LifecycleEventKind.CREATION))
    assert "500" in exc.value.message


async def test_connection_error_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    notifier = DiscordWebhookNotifier(WEBHOOK, transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError):
        await notifier.notify(_event(LifecycleEventKind.SUSPENSION, "x"))
