"""ORM Models: SQLAlchemy declarative models for the roster.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from pilot_roster.models.pilot import Pilot  # noqa: F401
