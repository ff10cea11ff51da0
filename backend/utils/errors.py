"""Domain errors raised by repositories and mapped to HTTP responses in main."""
from typing import Any, Optional


class TransitError(Exception):
    """Base error for the transit backend."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class NotFoundError(TransitError):
    """A referenced entity does not exist."""


class ConflictError(TransitError):
    """Primary key already taken (create) or id collision (update)."""


class PersistenceError(TransitError):
    """The store failed while executing a write; the transaction was rolled back."""

    DEFAULT_MESSAGE = "Oops! Não foi possível executar essa ação"

    def __init__(self, error: str, message: str = DEFAULT_MESSAGE):
        super().__init__(message, details={"error": error})
        self.error = error

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.error}
