"""Pilot Roster Service: active/suspended roster with callsign reclaim.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
