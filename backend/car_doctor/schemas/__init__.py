"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies)
    - Unknown fields are kept (extra="allow"); documents store what clients send
"""
