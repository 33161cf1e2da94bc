"""Core Layer — pure logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Token codec and identifier parsing are deterministic given their inputs
"""
