"""Lifecycle State Machine: pure transition planning.

Tests cover:
    - suspend requires a non-blank reason and an ACTIVE pilot
    - suspend records reason, date and flight_hours snapshot together
    - reactivate requires a SUSPENDED pilot and clears the whole snapshot
    - suspended <=> reason and date both present, after every transition
    - edit never touches `suspended`; callsign locked for suspended pilots
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from pilot_roster.core.errors import (
    InvalidStateError, InvalidValueError, MissingReasonError,
)
from pilot_roster.core.lifecycle import (
    check_suspension_reason, cleared_suspension_fields,
    plan_edit, plan_reactivation, plan_suspension,
)

NOW = datetime(2026, 5, 4, 18, 0, tzinfo=timezone.utc)


def _apply(pilot, fields):
    return replace(pilot, **fields)


# ─── suspend ─────────────────────────────────────────────────────

@pytest.mark.parametrize("reason", ["", "   ", "\t\n", None])
def test_suspend_without_reason_raises(make_pilot, reason):
    with pytest.raises(MissingReasonError) as exc:
        plan_suspension(make_pilot(), reason, NOW)
    assert exc.value.field == "suspension_reason"


def test_suspend_sets_metadata(make_pilot):
    fields = plan_suspension(make_pilot(), " inactivity ", NOW, flight_hours=12.5)
    assert fields == {
        "suspended": True,
        "suspension_reason": "inactivity",
        "suspension_date": NOW,
        "flight_hours": 12.5,
        "updated_at": NOW,
    }


def test_suspend_flight_hours_optional(make_pilot):
    assert plan_suspension(make_pilot(), "inactivity", NOW)["flight_hours"] is None


def test_suspend_rejects_negative_flight_hours(make_pilot):
    with pytest.raises(InvalidValueError):
        plan_suspension(make_pilot(), "inactivity", NOW, flight_hours=-1)


def test_suspend_already_suspended_raises(make_pilot):
    with pytest.raises(InvalidStateError):
        plan_suspension(make_pilot(suspended=True), "again", NOW)


def test_suspended_record_is_consistent(make_pilot):
    pilot = _apply(make_pilot(), plan_suspension(make_pilot(), "inactivity", NOW))
    assert pilot.suspended
    assert pilot.suspension_metadata_consistent


def test_check_suspension_reason_strips():
    assert check_suspension_reason("  rules violation ") == "rules violation"


# ─── reactivate ──────────────────────────────────────────────────

def test_reactivate_clears_snapshot(make_pilot):
    pilot = make_pilot(suspended=True, flight_hours=40.0)
    fields = plan_reactivation(pilot, NOW)
    assert fields == cleared_suspension_fields(NOW)
    reactivated = _apply(pilot, fields)
    assert not reactivated.suspended
    assert reactivated.suspension_reason is None
    assert reactivated.suspension_date is None
    assert reactivated.suspension_metadata_consistent


def test_reactivate_active_pilot_raises(make_pilot):
    with pytest.raises(InvalidStateError):
        plan_reactivation(make_pilot(), NOW)


def test_suspend_then_reactivate_round_trips(make_pilot):
    original = make_pilot()
    suspended = _apply(original, plan_suspension(original, "inactivity", NOW, 12.5))
    later = NOW + timedelta(days=3)
    restored = _apply(suspended, plan_reactivation(suspended, later))
    assert restored == replace(original, updated_at=later)


# ─── edit ────────────────────────────────────────────────────────

def test_edit_returns_only_changed_fields(make_pilot):
    pilot = make_pilot(name="Marco")
    changes = plan_edit(pilot, {"name": "Marco", "surname": "Verdi"}, NOW)
    assert changes == {"surname": "Verdi", "updated_at": NOW}


def test_edit_without_changes_is_empty(make_pilot):
    pilot = make_pilot(name="Marco")
    assert plan_edit(pilot, {"name": "Marco"}, NOW) == {}


def test_edit_never_changes_suspension_state(make_pilot):
    pilot = make_pilot(suspended=True)
    changes = plan_edit(pilot, {"old_flights": 99}, NOW)
    assert "suspended" not in changes
    assert _apply(pilot, changes).suspension_metadata_consistent


def test_edit_callsign_of_active_pilot(make_pilot):
    changes = plan_edit(make_pilot("ASX001"), {"callsign": "ASX005"}, NOW)
    assert changes["callsign"] == "ASX005"


def test_edit_callsign_of_suspended_pilot_raises(make_pilot):
    with pytest.raises(InvalidStateError) as exc:
        plan_edit(make_pilot("ASX001", suspended=True), {"callsign": "ASX005"}, NOW)
    assert exc.value.field == "callsign"


def test_edit_same_callsign_of_suspended_pilot_is_noop(make_pilot):
    pilot = make_pilot("ASX001", suspended=True)
    assert plan_edit(pilot, {"callsign": "ASX001"}, NOW) == {}
