"""Pydantic models for the booking risk domain."""

from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_serializer

ENGINE_VERSION = "booking-rules-v1"


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
    Severity.CRITICAL: 4,
}


class RiskTier(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Recommendation(StrEnum):
    APPROVE = "approve"
    REVIEW = "review"
    HOLD = "hold"
    REJECT = "reject"


class VerificationStatus(StrEnum):
    VERIFIED = "verified"
    PENDING = "pending"
    UNVERIFIED = "unverified"


class FlagType(StrEnum):
    NEW_USER_HIGH_VALUE = "new_user_high_value"
    NEW_UNVERIFIED_USER = "new_unverified_user"
    MULTIPLE_PAYMENT_DECLINES = "multiple_payment_declines"
    MULTIPLE_PAYMENT_ATTEMPTS = "multiple_payment_attempts"
    COUNTRY_MISMATCH = "country_mismatch"
    HIGH_VALUE_SINGLE_NIGHT = "high_value_single_night"
    HIGH_VALUE_SINGLE_GUEST = "high_value_single_guest"
    HIGH_CANCELLATION_RATE = "high_cancellation_rate"
    PRICE_SIGNIFICANTLY_ABOVE_MARKET = "price_significantly_above_market"
    SUSPICIOUS_ROUND_PRICING = "suspicious_round_pricing"
    IMMEDIATE_CHECKIN = "immediate_checkin"
    LAST_MINUTE_HIGH_VALUE = "last_minute_high_value"
    HIGH_RISK_IP = "high_risk_ip"
    FIRST_BOOKING_HIGH_VALUE = "first_booking_high_value"
    DISPOSABLE_EMAIL = "disposable_email"
    HIGH_RISK_HOST = "high_risk_host"
    HIGH_RISK_DEVICE = "high_risk_device"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Input snapshot
# ---------------------------------------------------------------------------


class GuestProfile(_Snapshot):
    name: str
    email: str
    phone: str | None
    registration_date: datetime
    previous_bookings: int = Field(ge=0)
    cancellation_rate: float = Field(ge=0.0, le=1.0)
    verification_status: VerificationStatus
    payment_methods: int = Field(ge=0)
    ip_address: str | None
    device_fingerprint: str | None


class HostProfile(_Snapshot):
    name: str
    email: str
    property_count: int = Field(ge=0)
    rating: float = Field(ge=0.0, le=5.0)
    response_rate: float = Field(ge=0.0, le=1.0)


class BookingDetails(_Snapshot):
    check_in: datetime
    check_out: datetime
    booking_date: datetime
    amount: float = Field(ge=0.0, allow_inf_nan=False)
    currency: str
    payment_method: str
    guests: int = Field(ge=0)
    duration: int = Field(ge=0, description="Stay length in nights")
    price_per_night: float = Field(ge=0.0, allow_inf_nan=False)
    last_minute: bool = Field(description="Booked within 24 hours of check-in")
    time_to_check_in: float = Field(allow_inf_nan=False, description="Hours until check-in")


class PropertyProfile(_Snapshot):
    id: str
    average_price: float = Field(ge=0.0, allow_inf_nan=False)
    location: str
    rating: float = Field(ge=0.0, le=5.0)
    review_count: int = Field(ge=0)


class PaymentDetails(_Snapshot):
    card_type: str | None
    card_country: str | None
    billing_country: str | None
    payment_attempts: int = Field(ge=0)
    previous_declines: int = Field(ge=0)


class BookingContext(_Snapshot):
    """Complete snapshot of one booking transaction, resolved by the caller."""

    booking_id: str | None = None
    guest: GuestProfile
    host: HostProfile
    booking: BookingDetails
    property: PropertyProfile
    payment: PaymentDetails


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

# Read-only view over a private copy of the evidence values
Evidence = Annotated[
    Mapping[str, Any], AfterValidator(lambda value: MappingProxyType(dict(value)))
]


class Flag(_Snapshot):
    type: FlagType
    severity: Severity
    description: str
    evidence: Evidence = Field(default_factory=dict, validate_default=True)
    detector: str = ""

    @field_serializer("evidence")
    def _serialize_evidence(self, evidence: Mapping[str, Any]) -> dict[str, Any]:
        return dict(evidence)


class AnalysisResult(_Snapshot):
    booking_id: str | None = None
    risk_score: int = Field(ge=0, le=100)
    risk_tier: RiskTier
    flags: tuple[Flag, ...] = ()
    recommendation: Recommendation
    confidence: float = Field(ge=0.1, le=1.0)
    engine_version: str = ENGINE_VERSION


class BatchSummary(_Snapshot):
    total: int = 0
    by_tier: dict[str, int] = Field(default_factory=dict)
    by_recommendation: dict[str, int] = Field(default_factory=dict)
    flagged_booking_ids: tuple[str, ...] = ()


class BatchAnalysis(_Snapshot):
    results: tuple[AnalysisResult, ...] = ()
    summary: BatchSummary


class BatchAnalysisRequest(BaseModel):
    bookings: list[BookingContext] = Field(min_length=1)
