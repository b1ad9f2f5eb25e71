from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    default_kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind

    def to_dict(self) -> dict:
        return {"error": self.kind.value, "message": self.message}


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    default_kind = ErrorKind.NOT_AUTHORIZED


class NotFoundError(DomainError):
    default_kind = ErrorKind.NOT_FOUND


class StoreUnavailableError(DomainError):
    """Raised when the attendance store cannot be reached or fails a write."""

    default_kind = ErrorKind.STORE_UNAVAILABLE
