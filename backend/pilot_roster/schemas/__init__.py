"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate types at the system boundary; domain rules stay in core/
    - Domain enums from core/ used for enum fields
"""
