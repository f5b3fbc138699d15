"""Booking risk error hierarchy."""

from typing import Any


class BookingRiskError(Exception):
    """Base exception for booking risk errors."""

    code = "BOOKING_RISK_INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidBookingContextError(BookingRiskError, ValueError):
    """A required booking context field is missing or malformed.

    This is a caller-contract failure, never a risk signal.
    """

    code = "BOOKING_RISK_INVALID_CONTEXT"

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []
