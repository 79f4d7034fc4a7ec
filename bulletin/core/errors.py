"""
Typed access-control and service errors.

Each error carries a stable ErrorKind and the HTTP status it maps to. The API
layer matches on the type (or kind), never on message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_CREDENTIAL = "malformed_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    EXPIRED_CREDENTIAL = "expired_credential"
    AUTHENTICATION_FAILED = "authentication_failed"
    INSUFFICIENT_ROLE = "insufficient_role"
    OWNERSHIP_VIOLATION = "ownership_violation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation_error"


class BulletinError(Exception):
    """Base for errors that map to a client-facing status and message."""

    kind: ErrorKind
    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(BulletinError):
    """Authentication failure (401)."""

    status_code = 401


class MissingCredential(AuthError):
    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = "Authorization token is required"


class MalformedCredential(AuthError):
    kind = ErrorKind.MALFORMED_CREDENTIAL
    default_message = 'Malformed Authorization header. Must be "Bearer <token>"'


class InvalidCredential(AuthError):
    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = "Invalid token"


class ExpiredCredential(AuthError):
    kind = ErrorKind.EXPIRED_CREDENTIAL
    default_message = "Token has expired"


class AuthenticationFailed(AuthError):
    """Login with an unknown email or a wrong password."""

    kind = ErrorKind.AUTHENTICATION_FAILED
    default_message = "Invalid credentials"


class AccessDenied(BulletinError):
    """Authorization failure (403)."""

    status_code = 403


class InsufficientRole(AccessDenied):
    kind = ErrorKind.INSUFFICIENT_ROLE
    default_message = "Forbidden: Insufficient permissions"


class OwnershipViolation(AccessDenied):
    kind = ErrorKind.OWNERSHIP_VIOLATION
    default_message = "Forbidden: You do not have permission to modify this resource."


class ResourceNotFound(BulletinError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Resource not found"


class ConflictError(BulletinError):
    kind = ErrorKind.CONFLICT
    status_code = 409
    default_message = "Resource already exists"


class InputValidationError(BulletinError):
    kind = ErrorKind.VALIDATION
    status_code = 400
    default_message = "Validation failed"
