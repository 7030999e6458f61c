"""HTTP client that sends ``Request`` objects to the API.

``TwilioRestClient`` is the default transport every fetcher and reader talks
to. Anything implementing the ``Transport`` protocol can stand in for it.

Example:
    ```python
    from twilio_client_core.client import TwilioRestClient
    from twilio_client_core.resources import notification

    with TwilioRestClient() as client:  # credentials from env / .env
        reader = notification.read(client.account_sid, "CA123").configure(log=3)
        for record in reader.execute(client, limit=20):
            print(record.sid, record.error_code)
    ```
"""

import logging
from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

import httpx

from twilio_client_core import __version__
from twilio_client_core.auth import CredentialResolver
from twilio_client_core.errors import ApiConnectionError, default_success
from twilio_client_core.transport.request import DEFAULT_BASE_URLS, Domain, Request
from twilio_client_core.transport.retry import IdempotentRetryTransport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"twilio-client-core/{__version__}"


@runtime_checkable
class Transport(Protocol):
    """What fetchers and readers need from a client.

    ``request`` may return None to signal that no response was obtained.
    """

    account_sid: str | None

    def request(self, request: Request) -> httpx.Response | None: ...

    def is_success(self, domain: Domain, status_code: int) -> bool: ...


class TwilioRestClient:
    """Synchronous API client built on ``httpx.Client``.

    Args:
        account_sid: Account SID; resolved from ``TWILIO_ACCOUNT_SID`` when omitted.
        auth_token: Auth token; resolved from ``TWILIO_AUTH_TOKEN`` when omitted.
        timeout: Request timeout in seconds.
        base_urls: Per-domain base URL overrides.
        success_predicates: Per-domain overrides of which status codes count
            as success (default: 200-299).
        max_retries: When > 0, retry idempotent requests on 429/502/503/504.
        transport: Underlying httpx transport (mainly for tests).
        user_agent: Value of the User-Agent header.
        credential_resolver: Resolver used for missing credentials.
    """

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        base_urls: Mapping[Domain, str] | None = None,
        success_predicates: Mapping[Domain, Callable[[int], bool]] | None = None,
        max_retries: int = 0,
        transport: httpx.BaseTransport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        credential_resolver: CredentialResolver | None = None,
    ):
        resolver = credential_resolver or CredentialResolver()
        credentials = resolver.resolve_account(account_sid=account_sid, auth_token=auth_token)
        self.account_sid = credentials.account_sid
        self._auth_token = credentials.auth_token

        self.base_urls: dict[Domain, str] = {**DEFAULT_BASE_URLS, **(base_urls or {})}
        self._success_predicates: dict[Domain, Callable[[int], bool]] = dict(success_predicates or {})

        if max_retries > 0:
            transport = IdempotentRetryTransport(
                wrapped_transport=transport or httpx.HTTPTransport(),
                max_retries=max_retries,
            )

        self._http = httpx.Client(
            auth=(self.account_sid, self._auth_token),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json", "User-Agent": user_agent},
        )

    def __enter__(self) -> "TwilioRestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def is_success(self, domain: Domain, status_code: int) -> bool:
        """Apply the success predicate configured for ``domain``."""
        predicate = self._success_predicates.get(domain, default_success)
        return predicate(status_code)

    def request(self, request: Request) -> httpx.Response:
        """Send a request and return the response, whatever its status.

        Raises:
            ApiConnectionError: The transport failed before a response arrived.
        """
        url = request.resolve_url(self.base_urls)
        params = list(request.query_params) or None
        logger.debug(f"Sending {request.method.value} {url} params={params}")

        try:
            return self._http.request(request.method.value, url, params=params)
        except httpx.TransportError as e:
            logger.warning(f"Request {request.method.value} {url} failed: {e}")
            raise ApiConnectionError(f"Unable to connect to server: {e}") from e
