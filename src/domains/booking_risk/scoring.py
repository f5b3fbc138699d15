"""Score aggregation, tier classification, recommendation and confidence.

Every function here is pure: it reads the flags (and, for confidence, the
context) and returns a value without touching shared state.
"""

from collections.abc import Sequence

from .config import RiskConfig, default_config
from .models import BookingContext, Flag, Recommendation, RiskTier, Severity, VerificationStatus


def raw_risk_score(flags: Sequence[Flag], config: RiskConfig = default_config) -> int:
    """Uncapped sum of severity scores over all triggered flags."""
    table = config.scoring.severity_scores
    return sum(table.get(flag.severity.value, 0) for flag in flags)


def aggregate_risk_score(flags: Sequence[Flag], config: RiskConfig = default_config) -> int:
    return min(config.scoring.max_score, raw_risk_score(flags, config))


def classify_risk_tier(score: int, config: RiskConfig = default_config) -> RiskTier:
    scoring = config.scoring
    if score >= scoring.critical_threshold:
        return RiskTier.CRITICAL
    if score >= scoring.high_threshold:
        return RiskTier.HIGH
    if score >= scoring.medium_threshold:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def recommend_action(
    score: int,
    flags: Sequence[Flag],
    config: RiskConfig = default_config,
) -> Recommendation:
    """Map score and flags to a recommendation.

    A single critical flag forces ``reject`` regardless of the score, so a
    medium-tier booking can still be rejected.
    """
    scoring = config.scoring
    has_critical = any(flag.severity == Severity.CRITICAL for flag in flags)

    if has_critical or score >= scoring.critical_threshold:
        return Recommendation.REJECT
    if score >= scoring.high_threshold:
        return Recommendation.HOLD
    if score >= scoring.medium_threshold:
        return Recommendation.REVIEW
    return Recommendation.APPROVE


def estimate_confidence(
    context: BookingContext,
    flags: Sequence[Flag],
    config: RiskConfig = default_config,
) -> float:
    """Confidence from data completeness, reduced when low and critical flags coexist."""
    settings = config.confidence
    confidence = settings.base

    if context.guest.previous_bookings > 0:
        confidence += settings.history_bonus
    if context.guest.verification_status == VerificationStatus.VERIFIED:
        confidence += settings.verified_bonus
    if context.payment.card_type:
        confidence += settings.card_type_bonus
    if context.guest.ip_address:
        confidence += settings.ip_address_bonus

    severities = {flag.severity for flag in flags}
    if Severity.LOW in severities and Severity.CRITICAL in severities:
        confidence -= settings.conflict_penalty

    confidence = max(settings.floor, min(settings.ceiling, confidence))
    return round(confidence, 2)
