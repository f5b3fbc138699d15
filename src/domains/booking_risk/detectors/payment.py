"""Payment-based detectors."""

from ..config import RiskConfig
from ..models import BookingContext, Flag, FlagType, Severity
from .base import RiskDetector


class PaymentDetector(RiskDetector):
    """Decline history, retry storms and card/billing country mismatch."""

    detector_id = "payment_risk"
    category = "payment"
    flag_types = (
        (FlagType.MULTIPLE_PAYMENT_DECLINES, Severity.CRITICAL),
        (FlagType.MULTIPLE_PAYMENT_ATTEMPTS, Severity.HIGH),
        (FlagType.COUNTRY_MISMATCH, Severity.MEDIUM),
    )

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        thresholds = config.payment
        payment = context.payment

        if payment.previous_declines > thresholds.max_previous_declines:
            return self._flag(
                FlagType.MULTIPLE_PAYMENT_DECLINES,
                Severity.CRITICAL,
                "Multiple previous payment declines detected",
                evidence={"declines": payment.previous_declines},
            )

        if payment.payment_attempts > thresholds.max_payment_attempts:
            return self._flag(
                FlagType.MULTIPLE_PAYMENT_ATTEMPTS,
                Severity.HIGH,
                "Multiple payment attempts for this booking",
                evidence={"attempts": payment.payment_attempts},
            )

        if (
            payment.card_country
            and payment.billing_country
            and payment.card_country != payment.billing_country
        ):
            return self._flag(
                FlagType.COUNTRY_MISMATCH,
                Severity.MEDIUM,
                "Payment card country differs from billing country",
                evidence={
                    "card_country": payment.card_country,
                    "billing_country": payment.billing_country,
                },
            )

        return None
