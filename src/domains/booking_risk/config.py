"""Booking risk configuration with sensible defaults."""

import os
from dataclasses import dataclass, field


@dataclass
class NewUserThresholds:
    high_value_max_days: int = 1
    high_value_min_amount: float = 500.0
    unverified_max_days: int = 7


@dataclass
class PaymentThresholds:
    max_previous_declines: int = 2
    max_payment_attempts: int = 3


@dataclass
class BookingPatternThresholds:
    single_night_min_amount: float = 1_000.0
    single_guest_min_value_per_guest: float = 500.0
    cancellation_rate_max: float = 0.5
    cancellation_min_previous_bookings: int = 3


@dataclass
class PricingThresholds:
    market_ratio_max: float = 3.0
    round_amount_unit: float = 100.0
    round_amount_min: float = 1_000.0


@dataclass
class TimeThresholds:
    immediate_checkin_hours: float = 2.0
    last_minute_min_amount: float = 2_000.0


@dataclass
class LocationSettings:
    # Private and loopback ranges; not real proxy/VPN signals, flagged for review
    high_risk_ip_prefixes: tuple[str, ...] = ("10.0.", "192.168.", "127.0.")


@dataclass
class BehaviorSettings:
    first_booking_min_amount: float = 1_500.0
    disposable_email_domains: frozenset[str] = frozenset(
        {
            "10minutemail.com",
            "tempmail.org",
            "guerrillamail.com",
            "mailinator.com",
            "throwaway.email",
            "temp-mail.org",
        }
    )


@dataclass
class HostThresholds:
    single_property_count: int = 1
    rating_min: float = 3.0
    response_rate_min: float = 0.5


@dataclass
class DeviceSettings:
    suspicious_marker: str = "suspicious"
    min_fingerprint_length: int = 10


@dataclass
class ScoringSettings:
    severity_scores: dict[str, int] = field(
        default_factory=lambda: {"low": 10, "medium": 25, "high": 40, "critical": 60}
    )
    max_score: int = 100
    medium_threshold: int = 60
    high_threshold: int = 80
    critical_threshold: int = 95


@dataclass
class ConfidenceSettings:
    base: float = 0.70
    history_bonus: float = 0.10
    verified_bonus: float = 0.10
    card_type_bonus: float = 0.05
    ip_address_bonus: float = 0.05
    conflict_penalty: float = 0.20
    floor: float = 0.10
    ceiling: float = 1.00


@dataclass
class RiskConfig:
    new_user: NewUserThresholds = field(default_factory=NewUserThresholds)
    payment: PaymentThresholds = field(default_factory=PaymentThresholds)
    booking_pattern: BookingPatternThresholds = field(default_factory=BookingPatternThresholds)
    pricing: PricingThresholds = field(default_factory=PricingThresholds)
    time: TimeThresholds = field(default_factory=TimeThresholds)
    location: LocationSettings = field(default_factory=LocationSettings)
    behavior: BehaviorSettings = field(default_factory=BehaviorSettings)
    host: HostThresholds = field(default_factory=HostThresholds)
    device: DeviceSettings = field(default_factory=DeviceSettings)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    confidence: ConfidenceSettings = field(default_factory=ConfidenceSettings)

    @classmethod
    def from_env(cls) -> "RiskConfig":
        """Load config with env var overrides. Env vars use BOOKING_RISK_ prefix."""
        config = cls()

        # New user overrides
        if v := os.getenv("BOOKING_RISK_NEW_USER_MIN_AMOUNT"):
            config.new_user.high_value_min_amount = float(v)
        if v := os.getenv("BOOKING_RISK_UNVERIFIED_MAX_DAYS"):
            config.new_user.unverified_max_days = int(v)

        # Payment overrides
        if v := os.getenv("BOOKING_RISK_MAX_PREVIOUS_DECLINES"):
            config.payment.max_previous_declines = int(v)
        if v := os.getenv("BOOKING_RISK_MAX_PAYMENT_ATTEMPTS"):
            config.payment.max_payment_attempts = int(v)

        # Pricing / time overrides
        if v := os.getenv("BOOKING_RISK_MARKET_RATIO_MAX"):
            config.pricing.market_ratio_max = float(v)
        if v := os.getenv("BOOKING_RISK_IMMEDIATE_CHECKIN_HOURS"):
            config.time.immediate_checkin_hours = float(v)

        # Location / behavior lists (comma separated)
        if v := os.getenv("BOOKING_RISK_HIGH_RISK_IP_PREFIXES"):
            config.location.high_risk_ip_prefixes = tuple(
                p.strip() for p in v.split(",") if p.strip()
            )
        if v := os.getenv("BOOKING_RISK_DISPOSABLE_EMAIL_DOMAINS"):
            config.behavior.disposable_email_domains = frozenset(
                d.strip().lower() for d in v.split(",") if d.strip()
            )

        # Tier overrides
        if v := os.getenv("BOOKING_RISK_MEDIUM_THRESHOLD"):
            config.scoring.medium_threshold = int(v)
        if v := os.getenv("BOOKING_RISK_HIGH_THRESHOLD"):
            config.scoring.high_threshold = int(v)
        if v := os.getenv("BOOKING_RISK_CRITICAL_THRESHOLD"):
            config.scoring.critical_threshold = int(v)

        return config


# Module-level default instance
default_config = RiskConfig()
