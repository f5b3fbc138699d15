"""Network and device detectors."""

from ..config import RiskConfig
from ..models import BookingContext, Flag, FlagType, Severity
from .base import RiskDetector


class LocationDetector(RiskDetector):
    """IP addresses matching configured high-risk prefixes.

    The default prefixes are private and loopback ranges. They are not real
    proxy/VPN indicators on the public internet; the list needs review.
    """

    detector_id = "location_risk"
    category = "network"
    flag_types = ((FlagType.HIGH_RISK_IP, Severity.MEDIUM),)

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        ip_address = context.guest.ip_address
        if not ip_address:
            return None

        prefixes = config.location.high_risk_ip_prefixes
        matched = next((p for p in prefixes if ip_address.startswith(p)), None)
        if matched is None:
            return None

        return self._flag(
            FlagType.HIGH_RISK_IP,
            Severity.MEDIUM,
            "Booking from high-risk IP address or VPN",
            evidence={"ip_address": ip_address, "matched_prefix": matched},
        )


class VelocityDetector(RiskDetector):
    """Rapid booking bursts across the platform.

    Never fires: the snapshot carries no recent booking history, so bursts
    cannot be measured from a single context.
    """

    detector_id = "velocity_risk"
    category = "network"

    # TODO: implement once the context carries the guest's recent booking timestamps
    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        return None


class DeviceDetector(RiskDetector):
    """Device fingerprints that are tagged suspicious or implausibly short."""

    detector_id = "device_risk"
    category = "network"
    flag_types = ((FlagType.HIGH_RISK_DEVICE, Severity.MEDIUM),)

    def evaluate(self, context: BookingContext, config: RiskConfig) -> Flag | None:
        fingerprint = context.guest.device_fingerprint
        if not fingerprint:
            return None

        settings = config.device
        has_marker = settings.suspicious_marker in fingerprint
        too_short = len(fingerprint) < settings.min_fingerprint_length
        if not (has_marker or too_short):
            return None

        return self._flag(
            FlagType.HIGH_RISK_DEVICE,
            Severity.MEDIUM,
            "Booking from device with suspicious characteristics",
            evidence={
                "device_fingerprint": fingerprint,
                "contains_marker": has_marker,
                "too_short": too_short,
            },
        )
