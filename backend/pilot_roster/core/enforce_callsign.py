"""Callsign Grammar Enforcement: normalizes and validates a candidate callsign.

Invariants:
    - PURE: no IO, no store lookups; uniqueness is resolved elsewhere
    - Input is stripped and uppercased before matching
    - Empty input raises RequiredFieldError; grammar mismatch raises FormatError
"""

import re

from pilot_roster.core.domain_types import Callsign
from pilot_roster.core.errors import FormatError, RequiredFieldError


CALLSIGN_PATTERN = re.compile(r"^ASX[0-9]{3}$")


def normalize_callsign(candidate: str | None) -> str:
    """Strip and uppercase. None becomes empty string."""
    return (candidate or "").strip().upper()


def validate_callsign(candidate: str | None) -> Callsign:
    """Return the normalized callsign or raise a field-tagged validation error."""
    value = normalize_callsign(candidate)
    if not value:
        raise RequiredFieldError("callsign")
    if not CALLSIGN_PATTERN.fullmatch(value):
        raise FormatError(value)
    return Callsign(value)
