"""Notification Dispatch: fire-and-forget delivery semantics.

Tests cover:
    - emit() returns before delivery; drain() waits for it
    - Transport and unexpected failures are swallowed after logging
    - Disabled dispatcher drops events
"""

import logging

from pilot_roster.core.domain_types import LifecycleEventKind
from pilot_roster.core.lifecycle_events import LifecycleEvent
from pilot_roster.services.notification_dispatch import NotificationDispatcher

from tests.services.fakes import ExplodingNotifier, FailingNotifier, RecordingNotifier

EVENT = LifecycleEvent(
    kind=LifecycleEventKind.SUSPENSION,
    callsign="ASX001",
    name="Marco",
    surname="Rossi",
    reason="inactivity",
)


async def test_emit_schedules_and_drain_delivers():
    notifier = RecordingNotifier()
    dispatcher = NotificationDispatcher(notifier)

    dispatcher.emit(EVENT)
    assert notifier.events == []
    assert dispatcher.pending_count == 1

    await dispatcher.drain()
    assert notifier.events == [EVENT]
    assert dispatcher.pending_count == 0


async def test_transport_failure_logged_as_warning(caplog):
    dispatcher = NotificationDispatcher(FailingNotifier())
    with caplog.at_level(logging.WARNING):
        dispatcher.emit(EVENT)
        await dispatcher.drain()
    assert any(
        r.levelno == logging.WARNING and "delivery failed" in r.getMessage()
        for r in caplog.records
    )


async def test_unexpected_failure_logged_as_error(caplog):
    dispatcher = NotificationDispatcher(ExplodingNotifier())
    with caplog.at_level(logging.ERROR):
        dispatcher.emit(EVENT)
        await dispatcher.drain()
    assert any(r.levelno == logging.ERROR for r in caplog.records)
    assert dispatcher.pending_count == 0


async def test_disabled_dispatcher_drops_events():
    dispatcher = NotificationDispatcher()
    assert not dispatcher.enabled
    dispatcher.emit(EVENT)
    assert dispatcher.pending_count == 0
    await dispatcher.drain()


def test_emit_without_running_loop_drops_event():
    dispatcher = NotificationDispatcher(RecordingNotifier())
    dispatcher.emit(EVENT)
    assert dispatcher.pending_count == 0
