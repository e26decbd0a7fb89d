"""Errors raised by the domain and persistence layers.

Route handlers let these propagate; ``crm_api.interfaces.api.errors`` turns
them into the JSON error envelope with the matching status code.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Input is missing or malformed."""


class AuthError(Exception):
    """The caller could not be authenticated or lacks permissions."""

    def __init__(self, message: str = "Credenciales inválidas", *, status_code: int = 401) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(LookupError):
    """The resource does not exist or is not visible to the caller.

    Rows owned by someone else raise this same error so their existence is
    never disclosed.
    """


class StorageError(RuntimeError):
    """The durable store failed while executing an operation."""


__all__ = ["AuthError", "NotFoundError", "StorageError", "ValidationError"]
