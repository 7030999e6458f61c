"""Request building and HTTP transport components.

Modules:
    request: Transport-ready request description (method, domain, path, query)
    retry: Opt-in retry transport for rate limiting and gateway errors

Example:
    ```python
    from twilio_client_core.transport import Domain, HttpMethod, Request

    request = Request(HttpMethod.GET, Domain.PRICING, "/v1/Messaging/Countries")
    request.add_query_param("PageSize", 50)
    ```
"""

from twilio_client_core.transport.request import DEFAULT_BASE_URLS, Domain, HttpMethod, Request
from twilio_client_core.transport.retry import IdempotentRetryTransport

__all__ = [
    "DEFAULT_BASE_URLS",
    "Domain",
    "HttpMethod",
    "IdempotentRetryTransport",
    "Request",
]
