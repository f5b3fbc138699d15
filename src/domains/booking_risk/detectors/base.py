"""Abstract base class for booking risk detectors."""

from abc import ABC, abstractmethod
from datetime import UTC, date, datetime

from ..config import RiskConfig
from ..models import BookingContext, Flag, FlagType, Severity


class RiskDetector(ABC):
    """Base class for all booking risk detectors.

    Detectors are stateless and never see each other's output. Each returns
    at most one Flag; the first matching condition wins.
    """

    detector_id: str
    category: str  # "account" | "payment" | "booking" | "network"
    flag_types: tuple[tuple[FlagType, Severity], ...] = ()

    @abstractmethod
    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        """Evaluate this detector and return a Flag, or None when it does not fire."""
        ...

    def _flag(
        self,
        flag_type: FlagType,
        severity: Severity,
        description: str,
        evidence: dict | None = None,
    ) -> Flag:
        """Convenience: build a flag attributed to this detector."""
        return Flag(
            type=flag_type,
            severity=severity,
            description=description,
            evidence=evidence or {},
            detector=self.detector_id,
        )


def _utc_date(value: datetime) -> date:
    # Naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(UTC).date()


def days_since_registration(context: BookingContext) -> int:
    """Whole UTC calendar days between guest registration and booking creation."""
    delta = _utc_date(context.booking.booking_date) - _utc_date(context.guest.registration_date)
    return abs(delta.days)


def email_domain(email: str) -> str | None:
    _, sep, domain = email.partition("@")
    if not sep:
        return None
    return domain.split("@")[0].lower()
