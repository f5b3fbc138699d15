"""API contract tests for the booking risk endpoints.

Validates HTTP methods, request schemas, response schemas and the error
mapping for malformed booking contexts.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from src.config import settings
from src.main import app
from tests.factories import make_payload

pytestmark = pytest.mark.integration

BASE_URL = "http://test"


def _client():
    """Return an AsyncClient bound to the test app."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url=BASE_URL)


# =========================================================================
# ANALYZE
# =========================================================================


class TestAnalyze:
    """POST /api/v1/booking-risk/analyze"""

    endpoint = "/api/v1/booking-risk/analyze"

    @pytest.mark.asyncio
    async def test_clean_booking(self):
        async with _client() as client:
            response = await client.post(self.endpoint, json=make_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["booking_id"] == "bk-1001"
        assert data["risk_score"] == 0
        assert data["risk_tier"] == "low"
        assert data["recommendation"] == "approve"
        assert data["confidence"] == 1.0
        assert data["flags"] == []
        assert data["engine_version"] == "booking-rules-v1"

    @pytest.mark.asyncio
    async def test_critical_flag_response_shape(self):
        payload = make_payload(payment={"previous_declines": 3})
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["recommendation"] == "reject"
        assert data["risk_tier"] == "medium"
        flag = data["flags"][0]
        assert flag == {
            "type": "multiple_payment_declines",
            "severity": "critical",
            "description": "Multiple previous payment declines detected",
            "evidence": {"declines": 3},
            "detector": "payment_risk",
        }

    @pytest.mark.asyncio
    async def test_missing_amount_rejected(self):
        payload = make_payload()
        del payload["booking"]["amount"]
        async with _client() as client:
            response = await client.post(self.endpoint, json=payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_request_id_header(self):
        async with _client() as client:
            response = await client.post(
                self.endpoint, json=make_payload(), headers={"X-Request-ID": "req-123"}
            )

        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_identical_requests_identical_bodies(self):
        payload = make_payload(guest={"email": "x@mailinator.com"})
        async with _client() as client:
            first = await client.post(self.endpoint, json=payload)
            second = await client.post(self.endpoint, json=payload)

        assert first.content == second.content


# =========================================================================
# BATCH
# =========================================================================


class TestAnalyzeBatch:
    """POST /api/v1/booking-risk/analyze/batch"""

    endpoint = "/api/v1/booking-risk/analyze/batch"

    @pytest.mark.asyncio
    async def test_batch_summary(self):
        body = {
            "bookings": [
                make_payload(booking_id="a"),
                make_payload(booking_id="b", payment={"previous_declines": 4}),
            ]
        }
        async with _client() as client:
            response = await client.post(self.endpoint, json=body)

        assert response.status_code == 200
        data = response.json()
        assert len(data["results"]) == 2
        assert data["summary"]["total"] == 2
        assert data["summary"]["flagged_booking_ids"] == ["b"]
        assert data["summary"]["by_recommendation"] == {"approve": 1, "reject": 1}

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self):
        async with _client() as client:
            response = await client.post(self.endpoint, json={"bookings": []})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_oversized_batch_is_bad_request(self, monkeypatch):
        monkeypatch.setattr(settings, "max_batch_size", 1)
        body = {"bookings": [make_payload(), make_payload()]}
        async with _client() as client:
            response = await client.post(self.endpoint, json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "bad_request"
        assert "request_id" in data


# =========================================================================
# CATALOG / HEALTH
# =========================================================================


class TestDetectors:
    """GET /api/v1/booking-risk/detectors"""

    @pytest.mark.asyncio
    async def test_catalog(self):
        async with _client() as client:
            response = await client.get("/api/v1/booking-risk/detectors")

        assert response.status_code == 200
        data = response.json()
        assert data["detector_count"] == 10
        assert data["tier_thresholds"]["critical"] == 95


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self):
        async with _client() as client:
            response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == settings.app_version
