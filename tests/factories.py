"""Booking context builders shared by the test suite.

The defaults describe a clean, established, verified guest: no detector
fires on them and confidence is at its ceiling.
"""

from copy import deepcopy

from src.domains.booking_risk.models import BookingContext

CLEAN_PAYLOAD: dict = {
    "booking_id": "bk-1001",
    "guest": {
        "name": "Ana Pierre",
        "email": "ana.pierre@example.com",
        "phone": "+15555550100",
        "registration_date": "2025-06-01T09:00:00+00:00",
        "previous_bookings": 2,
        "cancellation_rate": 0.1,
        "verification_status": "verified",
        "payment_methods": 1,
        "ip_address": "203.0.113.7",
        "device_fingerprint": "fp_9a8b7c6d5e4f",
    },
    "host": {
        "name": "Jean Louis",
        "email": "jean.louis@example.com",
        "property_count": 3,
        "rating": 4.8,
        "response_rate": 0.95,
    },
    "booking": {
        "check_in": "2026-01-20T15:00:00+00:00",
        "check_out": "2026-01-23T11:00:00+00:00",
        "booking_date": "2026-01-10T12:00:00+00:00",
        "amount": 450.0,
        "currency": "USD",
        "payment_method": "credit_card",
        "guests": 2,
        "duration": 3,
        "price_per_night": 150.0,
        "last_minute": False,
        "time_to_check_in": 240.0,
    },
    "property": {
        "id": "prop-77",
        "average_price": 140.0,
        "location": "Miami, FL",
        "rating": 4.6,
        "review_count": 58,
    },
    "payment": {
        "card_type": "Visa",
        "card_country": "US",
        "billing_country": "US",
        "payment_attempts": 1,
        "previous_declines": 0,
    },
}


def make_payload(**sections) -> dict:
    """Return a JSON-ready payload with per-section overrides merged in.

    ``make_payload(guest={"email": "x@mailinator.com"}, booking_id="bk-2")``
    """
    payload = deepcopy(CLEAN_PAYLOAD)
    for key, value in sections.items():
        if isinstance(value, dict):
            payload[key].update(value)
        else:
            payload[key] = value
    return payload


def make_context(**sections) -> BookingContext:
    return BookingContext.model_validate(make_payload(**sections))
