"""Tests for the opt-in retry transport."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import httpx
import pytest

from twilio_client_core.transport.retry import IdempotentRetryTransport


@pytest.fixture
def sleeps(monkeypatch):
    """Record requested sleep durations instead of sleeping."""
    recorded = []
    monkeypatch.setattr("twilio_client_core.transport.retry.time.sleep", recorded.append)
    return recorded


def _counting_transport(statuses, headers=None):
    """MockTransport answering with ``statuses`` in turn (last one repeats)."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        status = statuses[min(len(calls) - 1, len(statuses) - 1)]
        return httpx.Response(status, headers=headers or {})

    return httpx.MockTransport(handler), calls


class TestIdempotentRetryTransport:
    """Only read-only requests are retried, and only on retryable statuses."""

    @pytest.mark.unit
    @pytest.mark.parametrize("status_code", [429, 502, 503, 504])
    def test_retries_get_on_retryable_status(self, sleeps, status_code):
        mock_transport, calls = _counting_transport([status_code, status_code, 200])
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport, max_retries=5)

        with httpx.Client(transport=transport) as client:
            response = client.get("https://pricing.twilio.com/v1/Messaging/Countries")

        assert response.status_code == 200
        assert len(calls) == 3
        assert sleeps == [1.0, 2.0]

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ["POST", "DELETE"])
    def test_does_not_retry_non_idempotent_methods(self, sleeps, method):
        mock_transport, calls = _counting_transport([503])
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport)

        with httpx.Client(transport=transport) as client:
            response = client.request(method, "https://api.twilio.com/2010-04-01/Accounts.json")

        assert response.status_code == 503
        assert len(calls) == 1
        assert sleeps == []

    @pytest.mark.unit
    @pytest.mark.parametrize("status_code", [400, 404, 500])
    def test_does_not_retry_other_statuses(self, sleeps, status_code):
        mock_transport, calls = _counting_transport([status_code])
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport)

        with httpx.Client(transport=transport) as client:
            response = client.get("https://api.twilio.com/x")

        assert response.status_code == status_code
        assert len(calls) == 1

    @pytest.mark.unit
    def test_max_retries_limit(self, sleeps):
        mock_transport, calls = _counting_transport([503])
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport, max_retries=3)

        with httpx.Client(transport=transport) as client:
            response = client.get("https://api.twilio.com/x")

        assert response.status_code == 503
        assert len(calls) == 4
        assert sleeps == [1.0, 2.0, 4.0]

    @pytest.mark.unit
    def test_backoff_is_capped(self, sleeps):
        mock_transport, _ = _counting_transport([503])
        transport = IdempotentRetryTransport(
            wrapped_transport=mock_transport, max_retries=4, backoff_factor=2.0, max_backoff=5.0
        )

        with httpx.Client(transport=transport) as client:
            client.get("https://api.twilio.com/x")

        assert sleeps == [2.0, 4.0, 5.0, 5.0]

    @pytest.mark.unit
    def test_respects_retry_after_seconds(self, sleeps):
        mock_transport, calls = _counting_transport([429, 200], headers={"Retry-After": "7"})
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport)

        with httpx.Client(transport=transport) as client:
            response = client.get("https://api.twilio.com/x")

        assert response.status_code == 200
        assert sleeps == [7.0]

    @pytest.mark.unit
    def test_respects_retry_after_http_date(self, sleeps):
        retry_at = format_datetime(datetime.now(UTC) + timedelta(seconds=30), usegmt=True)
        mock_transport, _ = _counting_transport([503, 200], headers={"Retry-After": retry_at})
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport)

        with httpx.Client(transport=transport) as client:
            client.get("https://api.twilio.com/x")

        assert len(sleeps) == 1
        assert 25.0 < sleeps[0] <= 30.0

    @pytest.mark.unit
    def test_invalid_retry_after_falls_back_to_backoff(self, sleeps):
        mock_transport, _ = _counting_transport([429, 200], headers={"Retry-After": "-5"})
        transport = IdempotentRetryTransport(wrapped_transport=mock_transport)

        with httpx.Client(transport=transport) as client:
            client.get("https://api.twilio.com/x")

        assert sleeps == [1.0]

    @pytest.mark.unit
    def test_transport_errors_are_not_retried(self, sleeps):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        transport = IdempotentRetryTransport(wrapped_transport=httpx.MockTransport(handler))

        with httpx.Client(transport=transport) as client, pytest.raises(httpx.ConnectError):
            client.get("https://api.twilio.com/x")

        assert len(calls) == 1
        assert sleeps == []
