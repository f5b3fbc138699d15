"""Booking transaction risk domain."""

from .config import RiskConfig, default_config
from .detectors import ALL_DETECTORS
from .engine import RiskEngine, analyze_batch, analyze_booking, describe_detectors
from .errors import BookingRiskError, InvalidBookingContextError
from .models import (
    AnalysisResult,
    BatchAnalysis,
    BatchSummary,
    BookingContext,
    Flag,
    FlagType,
    Recommendation,
    RiskTier,
    Severity,
    VerificationStatus,
)

__all__ = [
    "ALL_DETECTORS",
    "AnalysisResult",
    "BatchAnalysis",
    "BatchSummary",
    "BookingContext",
    "BookingRiskError",
    "Flag",
    "FlagType",
    "InvalidBookingContextError",
    "Recommendation",
    "RiskConfig",
    "RiskEngine",
    "RiskTier",
    "Severity",
    "VerificationStatus",
    "analyze_batch",
    "analyze_booking",
    "default_config",
    "describe_detectors",
]
