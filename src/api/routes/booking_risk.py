"""Booking risk analysis endpoints."""

import structlog
from fastapi import APIRouter

from src.config import settings
from src.domains.booking_risk.config import RiskConfig
from src.domains.booking_risk.engine import RiskEngine
from src.domains.booking_risk.models import (
    AnalysisResult,
    BatchAnalysis,
    BatchAnalysisRequest,
    BookingContext,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/booking-risk", tags=["booking-risk"])

_engine = RiskEngine(config=RiskConfig.from_env())


@router.post("/analyze")
async def analyze(context: BookingContext) -> AnalysisResult:
    return _engine.analyze(context)


@router.post("/analyze/batch")
async def analyze_batch(request: BatchAnalysisRequest) -> BatchAnalysis:
    if len(request.bookings) > settings.max_batch_size:
        logger.warning(
            "batch_too_large",
            size=len(request.bookings),
            limit=settings.max_batch_size,
        )
        raise ValueError(
            f"Batch of {len(request.bookings)} bookings exceeds limit of {settings.max_batch_size}"
        )
    return _engine.analyze_batch(request.bookings)


@router.get("/detectors")
async def list_detectors() -> dict:
    """Return detector catalog, severity scores and tier thresholds."""
    return _engine.describe()
