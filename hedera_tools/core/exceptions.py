"""
Application-level exceptions.

ApiError carries the (status, message, code) triple every error response is
rendered from. Handlers raise MissingFieldError for absent request fields and
OperationError for anything that fails while talking to the ledger.
"""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_STATUS = 500


class ApiError(Exception):
    """Error with an HTTP status and a machine-readable code."""

    def __init__(self, message: str, code: str, status: int = DEFAULT_ERROR_STATUS):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "message": self.message, "code": self.code}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, code={self.code!r}, message={self.message!r})"


class MissingFieldError(ApiError):
    """A required request field is absent. Code is ``<field>-error``; status stays 500."""

    def __init__(self, field: str, message: str):
        super().__init__(message, code=f"{field}-error")
        self.field = field


class OperationError(ApiError):
    """A ledger operation failed; message is the underlying error text."""


class LedgerError(Exception):
    """Raised by the ledger layer when a receipt reports a non-success status."""

    def __init__(self, message: str, status: str | None = None):
        super().__init__(message)
        self.status = status
