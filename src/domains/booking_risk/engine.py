"""Booking risk engine: detectors -> score -> tier -> recommendation."""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from .config import RiskConfig, default_config
from .detectors import ALL_DETECTORS, RiskDetector
from .errors import InvalidBookingContextError
from .models import (
    ENGINE_VERSION,
    AnalysisResult,
    BatchAnalysis,
    BatchSummary,
    BookingContext,
    Flag,
    Recommendation,
)
from .scoring import aggregate_risk_score, classify_risk_tier, estimate_confidence, recommend_action

logger = structlog.get_logger()

_FLAGGED_RECOMMENDATIONS = (Recommendation.HOLD, Recommendation.REJECT)


def coerce_context(context: BookingContext | Mapping[str, Any]) -> BookingContext:
    """Return a validated BookingContext, raising InvalidBookingContextError otherwise."""
    if isinstance(context, BookingContext):
        return context
    if not isinstance(context, Mapping):
        raise InvalidBookingContextError(
            f"Booking context must be a mapping, got {type(context).__name__}"
        )
    try:
        return BookingContext.model_validate(context)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        fields = ", ".join(".".join(str(p) for p in e["loc"]) for e in errors)
        raise InvalidBookingContextError(
            f"Invalid booking context: {fields}",
            errors=[{**e, "loc": list(e["loc"])} for e in errors],
        ) from exc


class RiskEngine:
    """Evaluates booking snapshots against the risk detectors.

    Pipeline per booking:
    1. Run every detector -> ordered list of flags
    2. Score = sum of severity scores, capped at 100
    3. Tier from score thresholds
    4. Recommendation from score, with critical-flag override
    5. Confidence from data completeness and flag consistency

    The engine keeps no state between calls; the only instance attributes
    are the detector list and the config.
    """

    def __init__(
        self,
        config: RiskConfig | None = None,
        detectors: Iterable[RiskDetector] | None = None,
    ) -> None:
        self._config = config or default_config
        self._detectors = tuple(detectors if detectors is not None else ALL_DETECTORS)
        logger.debug(
            "risk_engine_initialized",
            detector_count=len(self._detectors),
            version=ENGINE_VERSION,
        )

    @property
    def config(self) -> RiskConfig:
        return self._config

    @property
    def detectors(self) -> tuple[RiskDetector, ...]:
        return self._detectors

    def detect(self, context: BookingContext) -> tuple[Flag, ...]:
        """Run all detectors and collect their flags in evaluation order."""
        flags: list[Flag] = []
        for detector in self._detectors:
            flag = detector.evaluate(context, self._config)
            if flag is not None:
                flags.append(flag)
        return tuple(flags)

    def analyze(self, context: BookingContext | Mapping[str, Any]) -> AnalysisResult:
        """Analyze one booking and return its immutable result."""
        ctx = coerce_context(context)
        cfg = self._config

        flags = self.detect(ctx)
        score = aggregate_risk_score(flags, cfg)
        tier = classify_risk_tier(score, cfg)
        recommendation = recommend_action(score, flags, cfg)
        confidence = estimate_confidence(ctx, flags, cfg)

        result = AnalysisResult(
            booking_id=ctx.booking_id,
            risk_score=score,
            risk_tier=tier,
            flags=flags,
            recommendation=recommendation,
            confidence=confidence,
        )

        logger.info(
            "booking_analyzed",
            booking_id=ctx.booking_id,
            risk_score=score,
            risk_tier=tier.value,
            recommendation=recommendation.value,
            confidence=confidence,
            flags=[f.type.value for f in flags],
        )

        return result

    def analyze_batch(
        self,
        contexts: Iterable[BookingContext | Mapping[str, Any]],
    ) -> BatchAnalysis:
        """Analyze independent bookings and summarize tiers and recommendations."""
        results = tuple(self.analyze(context) for context in contexts)
        summary = summarize(results)

        logger.info(
            "batch_analyzed",
            total=summary.total,
            by_tier=summary.by_tier,
            by_recommendation=summary.by_recommendation,
            flagged_count=len(summary.flagged_booking_ids),
        )

        return BatchAnalysis(results=results, summary=summary)

    def describe(self) -> dict:
        """Return the detector catalog with scoring tables and thresholds."""
        scoring = self._config.scoring
        return {
            "engine_version": ENGINE_VERSION,
            "detector_count": len(self._detectors),
            "detectors": [
                {
                    "detector_id": d.detector_id,
                    "category": d.category,
                    "flags": [
                        {"type": flag_type.value, "severity": severity.value}
                        for flag_type, severity in d.flag_types
                    ],
                }
                for d in self._detectors
            ],
            "severity_scores": dict(scoring.severity_scores),
            "max_score": scoring.max_score,
            "tier_thresholds": {
                "medium": scoring.medium_threshold,
                "high": scoring.high_threshold,
                "critical": scoring.critical_threshold,
            },
        }


def summarize(results: Iterable[AnalysisResult]) -> BatchSummary:
    results = list(results)
    by_tier = Counter(r.risk_tier.value for r in results)
    by_recommendation = Counter(r.recommendation.value for r in results)
    flagged = tuple(
        r.booking_id
        for r in results
        if r.booking_id is not None and r.recommendation in _FLAGGED_RECOMMENDATIONS
    )
    return BatchSummary(
        total=len(results),
        by_tier=dict(by_tier),
        by_recommendation=dict(by_recommendation),
        flagged_booking_ids=flagged,
    )


def analyze_booking(
    context: BookingContext | Mapping[str, Any],
    config: RiskConfig | None = None,
) -> AnalysisResult:
    return RiskEngine(config=config).analyze(context)


def analyze_batch(
    contexts: Iterable[BookingContext | Mapping[str, Any]],
    config: RiskConfig | None = None,
) -> BatchAnalysis:
    return RiskEngine(config=config).analyze_batch(contexts)


def describe_detectors(config: RiskConfig | None = None) -> dict:
    return RiskEngine(config=config).describe()
