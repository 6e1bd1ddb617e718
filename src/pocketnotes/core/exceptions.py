"""
Domain error taxonomy.

Every failure the core can report is one of the ``ErrorKind`` members below.
Services raise the typed exceptions; the HTTP boundary turns the kind into a
status code and a short client-safe message. Nothing here carries store or
stack details to the client.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    VALIDATION_FAILED = "validation_failed"
    DUPLICATE = "duplicate"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    STORE_UNAVAILABLE = "store_unavailable"


# Not found and forbidden share 404 so callers can't probe for existence.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.DUPLICATE: 400,
    ErrorKind.INVALID_CREDENTIALS: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_UNAVAILABLE: 500,
}


class PocketNotesError(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})>"


class ValidationFailed(PocketNotesError):
    """Input is malformed or out of range."""

    kind = ErrorKind.VALIDATION_FAILED
    default_message = "Validation failed"


class Duplicate(PocketNotesError):
    """A uniqueness rule would be violated."""

    kind = ErrorKind.DUPLICATE
    default_message = "Resource already exists"


class InvalidCredentials(PocketNotesError):
    """Login failed. Same message for unknown user and wrong password."""

    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid credentials"


class Unauthenticated(PocketNotesError):
    """Missing, invalid or expired session."""

    kind = ErrorKind.UNAUTHENTICATED
    default_message = "Authentication required"


class InvalidToken(Unauthenticated):
    """Session token failed signature, expiry or claim checks."""

    default_message = "Invalid or expired token"


class NotFound(PocketNotesError):
    """Resource is absent or the caller has no rights on it."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class StoreUnavailable(PocketNotesError):
    """The persistence layer failed."""

    kind = ErrorKind.STORE_UNAVAILABLE
    default_message = "Server error"
