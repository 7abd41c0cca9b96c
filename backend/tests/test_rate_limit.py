from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

from realip.rate_limit import get_client_ip, limiter


@pytest.fixture(autouse=True)
def _enable_rate_limiter():
    """Enable the rate limiter for this module and reset storage after each test."""
    limiter.enabled = True
    yield
    limiter.reset()


class TestGetClientIp:
    def test_uses_resolved_address(self):
        request = MagicMock()
        request.headers = {"X-Forwarded-For": "10.0.0.1, 203.0.113.1"}
        request.client.host = "10.0.0.5"
        assert get_client_ip(request) == "203.0.113.1"

    def test_returns_unknown_when_nothing_resolves(self):
        request = MagicMock()
        request.headers = {}
        request.client = None
        assert get_client_ip(request) == "unknown"


@pytest.mark.asyncio
class TestRateLimit:
    async def test_returns_429_after_limit_exceeded(self, client: AsyncClient):
        """Endpoint should return 429 after 3 requests in a minute."""
        for i in range(3):
            resp = await client.get("/limited")
            assert resp.status_code == 200, f"Request {i + 1} should return 200"

        resp = await client.get("/limited")
        assert resp.status_code == 429

    async def test_rate_limit_is_per_resolved_ip(self, client: AsyncClient):
        """Different forwarded clients should have independent buckets."""
        first = {"X-Forwarded-For": "203.0.113.1, 10.0.0.1"}
        for _ in range(3):
            resp = await client.get("/limited", headers=first)
            assert resp.status_code == 200
            assert resp.json()["ip"] == "203.0.113.1"

        resp = await client.get("/limited", headers=first)
        assert resp.status_code == 429

        # 203.0.113.2 should still be allowed
        resp = await client.get(
            "/limited", headers={"Forwarded": "for=203.0.113.2"}
        )
        assert resp.status_code == 200
        assert resp.json()["ip"] == "203.0.113.2"
