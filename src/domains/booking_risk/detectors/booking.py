"""Booking-shape detectors: stay pattern, pricing and timing."""

from ..config import RiskConfig
from ..models import BookingContext, Flag, FlagType, Severity
from .base import RiskDetector


class BookingPatternDetector(RiskDetector):
    """Unusual stay shapes and cancellation-heavy guests."""

    detector_id = "booking_pattern"
    category = "booking"
    flag_types = (
        (FlagType.HIGH_VALUE_SINGLE_NIGHT, Severity.MEDIUM),
        (FlagType.HIGH_VALUE_SINGLE_GUEST, Severity.MEDIUM),
        (FlagType.HIGH_CANCELLATION_RATE, Severity.HIGH),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.booking_pattern
        booking = context.booking
        guest = context.guest

        if booking.duration == 1 and booking.amount > thresholds.single_night_min_amount:
            return self._flag(
                FlagType.HIGH_VALUE_SINGLE_NIGHT,
                Severity.MEDIUM,
                "High-value booking for single night stay",
                evidence={"duration": booking.duration, "amount": booking.amount},
            )

        # Zero guests disables the per-guest ratio
        if booking.guests > 0:
            value_per_guest = booking.amount / booking.guests
            if (
                value_per_guest > thresholds.single_guest_min_value_per_guest
                and booking.guests == 1
            ):
                return self._flag(
                    FlagType.HIGH_VALUE_SINGLE_GUEST,
                    Severity.MEDIUM,
                    "Very high value booking for single guest",
                    evidence={"value_per_guest": value_per_guest, "guests": booking.guests},
                )

        if (
            guest.cancellation_rate > thresholds.cancellation_rate_max
            and guest.previous_bookings > thresholds.cancellation_min_previous_bookings
        ):
            return self._flag(
                FlagType.HIGH_CANCELLATION_RATE,
                Severity.HIGH,
                "User has high cancellation rate history",
                evidence={
                    "cancellation_rate": guest.cancellation_rate,
                    "previous_bookings": guest.previous_bookings,
                },
            )

        return None


class PricingAnomalyDetector(RiskDetector):
    """Nightly price far above comparable listings, or suspiciously round totals."""

    detector_id = "pricing_anomaly"
    category = "booking"
    flag_types = (
        (FlagType.PRICE_SIGNIFICANTLY_ABOVE_MARKET, Severity.HIGH),
        (FlagType.SUSPICIOUS_ROUND_PRICING, Severity.LOW),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.pricing
        booking = context.booking
        market_price = context.property.average_price

        # Zero market price disables the ratio check
        if market_price > 0:
            ratio = booking.price_per_night / market_price
            if ratio > thresholds.market_ratio_max:
                return self._flag(
                    FlagType.PRICE_SIGNIFICANTLY_ABOVE_MARKET,
                    Severity.HIGH,
                    "Booking price is significantly above market rate",
                    evidence={
                        "booking_price": booking.price_per_night,
                        "market_price": market_price,
                        "ratio": ratio,
                    },
                )

        unit = thresholds.round_amount_unit
        if (
            unit > 0
            and booking.amount % unit == 0
            and booking.amount > thresholds.round_amount_min
        ):
            return self._flag(
                FlagType.SUSPICIOUS_ROUND_PRICING,
                Severity.LOW,
                "Booking amount is a suspicious round number",
                evidence={"amount": booking.amount},
            )

        return None


class TimeRiskDetector(RiskDetector):
    """Imminent check-ins and expensive last-minute bookings."""

    detector_id = "time_risk"
    category = "booking"
    flag_types = (
        (FlagType.IMMEDIATE_CHECKIN, Severity.HIGH),
        (FlagType.LAST_MINUTE_HIGH_VALUE, Severity.MEDIUM),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.time
        booking = context.booking

        if booking.time_to_check_in < thresholds.immediate_checkin_hours:
            return self._flag(
                FlagType.IMMEDIATE_CHECKIN,
                Severity.HIGH,
                "Booking with immediate check-in (potential testing)",
                evidence={"time_to_check_in": booking.time_to_check_in},
            )

        if booking.last_minute and booking.amount > thresholds.last_minute_min_amount:
            return self._flag(
                FlagType.LAST_MINUTE_HIGH_VALUE,
                Severity.MEDIUM,
                "High-value last-minute booking",
                evidence={"amount": booking.amount, "last_minute": booking.last_minute},
            )

        return None
