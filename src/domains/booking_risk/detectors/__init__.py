"""Booking risk detectors package.

Exports ALL_DETECTORS (list of all detector instances) and individual
detector classes for direct use.
"""

from .account import BehaviorDetector, HostDetector, NewUserDetector
from .base import RiskDetector, days_since_registration, email_domain
from .booking import BookingPatternDetector, PricingAnomalyDetector, TimeRiskDetector
from .network import DeviceDetector, LocationDetector, VelocityDetector
from .payment import PaymentDetector

# All detector instances in evaluation order; flags are reported in this order
ALL_DETECTORS: list[RiskDetector] = [
    NewUserDetector(),
    PaymentDetector(),
    BookingPatternDetector(),
    PricingAnomalyDetector(),
    TimeRiskDetector(),
    LocationDetector(),
    BehaviorDetector(),
    HostDetector(),
    VelocityDetector(),
    DeviceDetector(),
]

__all__ = [
    "ALL_DETECTORS",
    "RiskDetector",
    "days_since_registration",
    "email_domain",
    # Account
    "NewUserDetector",
    "BehaviorDetector",
    "HostDetector",
    # Payment
    "PaymentDetector",
    # Booking
    "BookingPatternDetector",
    "PricingAnomalyDetector",
    "TimeRiskDetector",
    # Network
    "LocationDetector",
    "VelocityDetector",
    "DeviceDetector",
]
