"""Infrastructure Layer: database, roster store, Discord webhook, logging.

Invariants:
    - Implements the Protocols in core/repository_protocols.py
    - All external failures mapped to core/errors.py types
"""
