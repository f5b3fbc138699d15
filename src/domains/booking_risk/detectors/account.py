"""Account-based detectors: guest age, guest behavior and host profile."""

from ..config import RiskConfig
from ..models import BookingContext, Flag, FlagType, Severity, VerificationStatus
from .base import RiskDetector, days_since_registration, email_domain


class NewUserDetector(RiskDetector):
    """Fresh accounts placing high-value or unverified bookings."""

    detector_id = "new_user_risk"
    category = "account"
    flag_types = (
        (FlagType.NEW_USER_HIGH_VALUE, Severity.HIGH),
        (FlagType.NEW_UNVERIFIED_USER, Severity.MEDIUM),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.new_user
        days = days_since_registration(context)
        amount = context.booking.amount

        if days < thresholds.high_value_max_days and amount > thresholds.high_value_min_amount:
            return self._flag(
                FlagType.NEW_USER_HIGH_VALUE,
                Severity.HIGH,
                "New user making high-value booking within 24 hours of registration",
                evidence={"days_since_registration": days, "amount": amount},
            )

        status = context.guest.verification_status
        if days < thresholds.unverified_max_days and status == VerificationStatus.UNVERIFIED:
            return self._flag(
                FlagType.NEW_UNVERIFIED_USER,
                Severity.MEDIUM,
                "New unverified user making booking",
                evidence={"days_since_registration": days, "verification_status": status.value},
            )

        return None


class BehaviorDetector(RiskDetector):
    """First-booking value spikes and throwaway email providers."""

    detector_id = "behavior_risk"
    category = "account"
    flag_types = (
        (FlagType.FIRST_BOOKING_HIGH_VALUE, Severity.MEDIUM),
        (FlagType.DISPOSABLE_EMAIL, Severity.HIGH),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        settings = config.behavior
        amount = context.booking.amount

        if context.guest.previous_bookings == 0 and amount > settings.first_booking_min_amount:
            return self._flag(
                FlagType.FIRST_BOOKING_HIGH_VALUE,
                Severity.MEDIUM,
                "First booking is unusually high value",
                evidence={"amount": amount, "is_first_booking": True},
            )

        domain = email_domain(context.guest.email)
        if domain is not None and domain in settings.disposable_email_domains:
            return self._flag(
                FlagType.DISPOSABLE_EMAIL,
                Severity.HIGH,
                "User registered with disposable email address",
                evidence={"email": context.guest.email, "domain": domain},
            )

        return None


class HostDetector(RiskDetector):
    """Single-listing hosts with poor rating and responsiveness."""

    detector_id = "host_risk"
    category = "account"
    flag_types = ((FlagType.HIGH_RISK_HOST, Severity.MEDIUM),)

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.host
        host = context.host

        if (
            host.property_count == thresholds.single_property_count
            and host.rating < thresholds.rating_min
            and host.response_rate < thresholds.response_rate_min
        ):
            return self._flag(
                FlagType.HIGH_RISK_HOST,
                Severity.MEDIUM,
                "Booking with high-risk host profile",
                evidence={
                    "property_count": host.property_count,
                    "rating": host.rating,
                    "response_rate": host.response_rate,
                },
            )

        return None
