"""Infrastructure Layer — document store client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All driver exceptions are mapped to core/errors.py types before leaving this layer
"""
