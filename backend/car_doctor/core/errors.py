"""Error Hierarchy — typed, categorized exceptions for all Car Doctor failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - AuthError bodies are fixed strings; existing browser clients match on them
    - StorageError carries the driver's message verbatim (echoed back to clients)
    - No error message ever contains the token signing secret

Design Decisions:
    - Single hierarchy with CarDoctorError base: one FastAPI handler per branch
    - to_response() owns the body shape so handlers never build envelopes by hand
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTH = "auth"
    VALIDATION = "validation"
    STORAGE = "storage"
    INTERNAL = "internal"


class CarDoctorError(Exception):
    """Base exception for all Car Doctor errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to REST error body."""
        return {"error": True, "code": self.code, "message": self.message}


# ─── Auth Errors (401) ──────────────────────────────────────────

class AuthError(CarDoctorError):
    """Request lacks a usable identity for a protected route."""
    def __init__(self, message: str, code: str):
        super().__init__(message, code, ErrorCategory.AUTH, 401)

    def to_response(self) -> dict:
        return {"message": self.message}


class MissingTokenError(AuthError):
    """No `token` cookie on the request."""
    def __init__(self):
        super().__init__("Not authorized", "TOKEN_MISSING")

    def to_response(self) -> dict:
        return {"auth": False, "message": self.message}


class InvalidTokenError(AuthError):
    """Token is malformed, badly signed or expired."""
    def __init__(self, reason: str = "invalid"):
        super().__init__("Unauthorized", "TOKEN_INVALID")
        self.reason = reason


class IdentityMismatchError(AuthError):
    """Valid token, but for a different identity than the one requested."""
    def __init__(self):
        super().__init__("Unauthorized Access Forbidden", "IDENTITY_MISMATCH")


# ─── Validation Errors (400) ────────────────────────────────────

class ValidationError(CarDoctorError):
    """Request input failed validation."""
    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code, ErrorCategory.VALIDATION, 400)


class InvalidIdentifierError(ValidationError):
    """Path id is not a valid document identifier."""
    def __init__(self, value: str):
        super().__init__(
            f"'{value}' is not a valid identifier: "
            "expected a 24-character hex string",
            "INVALID_IDENTIFIER",
        )
        self.value = value


# ─── Storage Errors ─────────────────────────────────────────────

class StorageError(CarDoctorError):
    """Document store operation failed."""
    def __init__(self, message: str, operation: str, collection: str | None = None):
        super().__init__(message, "STORAGE_ERROR", ErrorCategory.STORAGE, 503)
        self.operation = operation
        self.collection = collection

    def to_response(self) -> dict:
        return {"error": True, "message": self.message}
