"""Domain Types: rich types that replace bare primitives across the roster core.

Invariants:
    - PilotId wraps UUID; never use a bare UUID in domain logic
    - Callsign is always the normalized (uppercased) form
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

PilotId = NewType("PilotId", UUID)
Callsign = NewType("Callsign", str)     # ASX + 3 digits, uppercase


# ─── Enums ───────────────────────────────────────────────────────

class PilotStatus(str, Enum):
    """Lifecycle states. Deletion is an operation, not a state."""
    ACTIVE = "active"
    SUSPENDED = "suspended"


class LifecycleEventKind(str, Enum):
    """Notification-worthy lifecycle occurrences."""
    CREATION = "creation"
    REACTIVATION = "reactivation"
    SUSPENSION = "suspension"


class ResolutionOutcome(str, Enum):
    """How a creation request was resolved against the roster."""
    CREATED = "created"
    RECLAIMED = "reclaimed"


class SearchDimension(str, Enum):
    """Field a roster query matches against."""
    CALLSIGN = "callsign"
    FULLNAME = "fullname"


class StatusFilter(str, Enum):
    """Roster listing scope."""
    ACTIVE = "active"
    SUSPENDED = "suspended"
    ALL = "all"

    @property
    def suspended(self) -> bool | None:
        """Store-level suspended filter (None = no filter)."""
        if self is StatusFilter.ACTIVE:
            return False
        if self is StatusFilter.SUSPENDED:
            return True
        return None
