"""Typed failures raised by calculators, repositories and forms."""

from __future__ import annotations

from typing import Any


class FinLedgerError(Exception):
    """Base class for domain errors that map onto an HTTP status."""

    status_code = 400
    error_code = "finledger_error"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.details:
            body["details"] = self.details
        return body


class InvalidInputError(FinLedgerError):
    """Negative principal, non-positive term, malformed numbers or bad category pairs."""

    error_code = "invalid_input"


class DivisionByZeroError(FinLedgerError):
    """Raised when an amortization schedule would have zero payments."""

    status_code = 422
    error_code = "division_by_zero"


class ParseError(FinLedgerError):
    """A record amount could not be read as a number."""

    error_code = "parse_error"


class RecordNotFoundError(FinLedgerError):
    """Owner-scoped lookup found nothing."""

    status_code = 404
    error_code = "not_found"


__all__ = [
    "DivisionByZeroError",
    "FinLedgerError",
    "InvalidInputError",
    "ParseError",
    "RecordNotFoundError",
]
