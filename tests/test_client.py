"""Tests for the HTTP client."""

import base64

import httpx
import pytest

from twilio_client_core.auth import CredentialNotFoundError, CredentialResolver
from twilio_client_core.client import Transport, TwilioRestClient
from twilio_client_core.errors import ApiConnectionError
from twilio_client_core.resources import notification
from twilio_client_core.testing import TEST_ACCOUNT_SID, TEST_AUTH_TOKEN, RecordingHandler, mock_client, page_body
from twilio_client_core.transport import Domain, HttpMethod, Request


@pytest.mark.unit
def test_client_satisfies_transport_protocol(client):
    assert isinstance(client, Transport)


@pytest.mark.unit
def test_request_sends_query_and_auth(client, handler):
    handler.enqueue(200, {"ok": True})
    request = Request(HttpMethod.GET, Domain.LOOKUPS, "/v1/PhoneNumbers/%2B15108675310")
    request.add_query_param("Type", "carrier")
    request.add_query_param("Type", "caller-name")

    response = client.request(request)

    assert response.status_code == 200
    sent = handler.requests[0]
    assert sent.method == "GET"
    assert sent.url.host == "lookups.twilio.com"
    assert sent.url.query == b"Type=carrier&Type=caller-name"
    expected = base64.b64encode(f"{TEST_ACCOUNT_SID}:{TEST_AUTH_TOKEN}".encode()).decode()
    assert sent.headers["Authorization"] == f"Basic {expected}"
    assert sent.headers["Accept"] == "application/json"
    assert sent.headers["User-Agent"].startswith("twilio-client-core/")


@pytest.mark.unit
def test_cursor_url_query_is_preserved(client, handler):
    handler.enqueue(200, {})
    cursor = "https://pricing.twilio.com/v1/Messaging/Countries?PageSize=50&Page=1&PageToken=PAUS"

    client.request(Request(HttpMethod.GET, Domain.PRICING, url=cursor))

    assert str(handler.requests[0].url) == cursor


@pytest.mark.unit
def test_base_url_override(handler):
    handler.enqueue(200, {})
    client = mock_client(handler, base_urls={Domain.API: "http://localhost:8080"})

    client.request(Request(HttpMethod.GET, Domain.API, "/2010-04-01/Accounts.json"))

    assert str(handler.requests[0].url) == "http://localhost:8080/2010-04-01/Accounts.json"


@pytest.mark.unit
def test_base_url_override_keeps_path_prefix(handler):
    handler.enqueue(200, page_body("notifications", []))
    client = mock_client(handler, base_urls={Domain.API: "http://localhost:8080/mock"})

    notification.read("AC1", "CA1").first_page(client)

    assert handler.requests[0].url.path == "/mock/2010-04-01/Accounts/AC1/Calls/CA1/Notifications.json"


@pytest.mark.unit
def test_transport_failure_raises_connection_error(client, handler):
    handler.enqueue_error(httpx.ConnectError("Connection refused"))

    with pytest.raises(ApiConnectionError) as exc_info:
        client.request(Request(HttpMethod.GET, Domain.API, "/x"))

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.unit
def test_timeout_raises_connection_error(client, handler):
    handler.enqueue_error(httpx.ReadTimeout("timed out"))

    with pytest.raises(ApiConnectionError):
        client.request(Request(HttpMethod.GET, Domain.API, "/x"))


@pytest.mark.unit
def test_default_success_predicate(client):
    assert client.is_success(Domain.API, 200)
    assert client.is_success(Domain.API, 204)
    assert not client.is_success(Domain.API, 302)


@pytest.mark.unit
def test_per_domain_success_predicate(handler):
    client = mock_client(handler, success_predicates={Domain.LOOKUPS: lambda code: code in (200, 302)})

    assert client.is_success(Domain.LOOKUPS, 302)
    assert not client.is_success(Domain.API, 302)


@pytest.mark.unit
def test_max_retries_enables_retry_transport(monkeypatch):
    monkeypatch.setattr("twilio_client_core.transport.retry.time.sleep", lambda _: None)
    handler = RecordingHandler()
    handler.enqueue(503)
    handler.enqueue(200, {})

    with mock_client(handler, max_retries=2) as client:
        response = client.request(Request(HttpMethod.GET, Domain.API, "/x"))

    assert response.status_code == 200
    assert len(handler.requests) == 2


@pytest.mark.unit
def test_no_retry_by_default(client, handler):
    handler.enqueue(503)

    response = client.request(Request(HttpMethod.GET, Domain.API, "/x"))

    assert response.status_code == 503
    assert len(handler.requests) == 1


@pytest.mark.unit
def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC_env")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "token_env")

    with TwilioRestClient(credential_resolver=CredentialResolver(load_dotenv=False)) as client:
        assert client.account_sid == "AC_env"


@pytest.mark.unit
def test_missing_credentials_raise():
    with pytest.raises(CredentialNotFoundError):
        TwilioRestClient(credential_resolver=CredentialResolver(load_dotenv=False))
