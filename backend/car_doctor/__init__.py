"""Car Doctor Application Package — service-booking REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
