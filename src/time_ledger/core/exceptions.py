from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a mutation targets a record that does not exist."""


class StoreError(DomainError):
    """Raised when the remote store rejects or fails a request."""

    def __init__(self, message: str, *, operation: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code


class StaleLedgerError(StoreError):
    """The write was committed but reloading the ledger afterwards failed."""
