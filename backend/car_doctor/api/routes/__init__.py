"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Failures are raised as CarDoctorError and translated in error_handlers.py
"""
