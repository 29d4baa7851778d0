"""Services Layer: lifecycle handlers and notification dispatch.

Invariants:
    - Handlers orchestrate store calls around pure core decisions
    - Notification delivery never affects an operation's outcome
"""
