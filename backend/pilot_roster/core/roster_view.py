"""Roster View: read-side filtering and summary over a roster snapshot.

Invariants:
    - Both functions are PURE and never reorder their input
    - Empty or whitespace-only query returns the roster unchanged
    - Matching is case-insensitive substring on exactly one dimension
    - active_count + suspended_count == total == len(roster)
"""

from collections.abc import Sequence

from pilot_roster.core.domain_types import SearchDimension
from pilot_roster.core.pilot_record import PilotRecord


def _haystack(pilot: PilotRecord, dimension: SearchDimension) -> str:
    if dimension == SearchDimension.CALLSIGN:
        return pilot.callsign
    return pilot.full_name


def filter_roster(
    roster: Sequence[PilotRecord],
    query: str | None,
    dimension: SearchDimension | str = SearchDimension.FULLNAME,
) -> list[PilotRecord]:
    """Filter by callsign or "name surname". Input order is preserved."""
    dimension = SearchDimension(dimension)
    needle = (query or "").strip().lower()
    if not needle:
        return list(roster)
    return [p for p in roster if needle in _haystack(p, dimension).lower()]


def summarize_roster(roster: Sequence[PilotRecord]) -> dict:
    """Active/suspended partition counts."""
    suspended = sum(1 for p in roster if p.suspended)
    return {
        "active_count": len(roster) - suspended,
        "suspended_count": suspended,
        "total": len(roster),
    }
