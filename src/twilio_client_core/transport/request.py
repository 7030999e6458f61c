"""Transport-ready request description.

A ``Request`` names a target (a domain plus a path, or an absolute cursor URL)
and carries the ordered query parameters. It performs no I/O; the client turns
it into an ``httpx.Request`` when it is sent.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from twilio_client_core.converters import serialize_value


class HttpMethod(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Domain(str, Enum):
    """API domains, each served from its own base URL."""

    API = "api"
    LOOKUPS = "lookups"
    PRICING = "pricing"


DEFAULT_BASE_URLS: dict[Domain, str] = {
    Domain.API: "https://api.twilio.com",
    Domain.LOOKUPS: "https://lookups.twilio.com",
    Domain.PRICING: "https://pricing.twilio.com",
}


class Request:
    """A single API request.

    Attributes:
        method: HTTP method
        domain: Domain the request belongs to; selects the base URL and the
            success predicate
        path: Path below the domain's base URL (ignored when ``url`` is set)
        url: Absolute URL, or a path starting with ``/``, taken verbatim from
            a page cursor
        account_sid: Account on whose behalf the request is made

    Example:
        ```python
        request = Request(HttpMethod.GET, Domain.LOOKUPS, "/v1/PhoneNumbers/+15558675310")
        request.add_query_param("Type", "carrier")
        request.add_query_param("Type", "caller-name")
        ```
    """

    def __init__(
        self,
        method: HttpMethod,
        domain: Domain,
        path: str | None = None,
        *,
        url: str | None = None,
        account_sid: str | None = None,
    ):
        if path is None and url is None:
            raise ValueError("Request needs either a path or a url")
        self.method = HttpMethod(method)
        self.domain = Domain(domain)
        self.path = path
        self.url = url
        self.account_sid = account_sid
        self._query_params: list[tuple[str, str]] = []

    @property
    def query_params(self) -> tuple[tuple[str, str], ...]:
        """Query parameters in the order they were added."""
        return tuple(self._query_params)

    def add_query_param(self, name: str, value: Any) -> None:
        """Append a parameter; repeating a name sends it several times."""
        self._query_params.append((name, serialize_value(value)))

    def add_query_params(self, params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> None:
        """Append several parameters, keeping their order."""
        items = params.items() if isinstance(params, Mapping) else params
        for name, value in items:
            self.add_query_param(name, value)

    def resolve_url(self, base_urls: Mapping[Domain, str] | None = None) -> str:
        """Return the absolute URL this request targets.

        An absolute cursor URL is used as is. Paths and relative cursors are
        appended to the domain base URL, keeping any path prefix it has. A
        cursor URL keeps the query string it came with; query parameters added
        with :meth:`add_query_param` are not included here.
        """
        base_url = (base_urls or DEFAULT_BASE_URLS)[self.domain]
        target = self.url if self.url is not None else self.path
        if urlsplit(target).scheme:
            return target
        return base_url.rstrip("/") + "/" + target.lstrip("/")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Request):
            return NotImplemented
        return (
            self.method == other.method
            and self.domain == other.domain
            and self.path == other.path
            and self.url == other.url
            and self.account_sid == other.account_sid
            and self._query_params == other._query_params
        )

    def __repr__(self) -> str:
        target = self.url if self.url is not None else self.path
        return f"Request({self.method.value} {self.domain.value}:{target} params={self._query_params!r})"
