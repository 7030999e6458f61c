"""Opt-in retry transport for the synchronous HTTP client.

The error mapping layer never retries; callers who want the client to ride out
rate limiting and gateway hiccups can enable this transport through
``TwilioRestClient(max_retries=...)``.

| Condition | Retried? |
|-----------|----------|
| 429, 502, 503, 504 on GET/HEAD/OPTIONS | Yes, with backoff |
| Same statuses on POST/DELETE | No |
| Other statuses | No |
| Connection failures | No (surface as ``ApiConnectionError``) |

Example:

```python
import httpx

from twilio_client_core.transport.retry import IdempotentRetryTransport

transport = IdempotentRetryTransport(
    wrapped_transport=httpx.HTTPTransport(),
    max_retries=3,
    max_backoff=30,
)

with httpx.Client(transport=transport) as client:
    response = client.get("https://pricing.twilio.com/v1/Messaging/Countries")
```
"""

import logging
import time
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)


class IdempotentRetryTransport(httpx.BaseTransport):
    """Retry read-only requests on rate limiting and gateway errors.

    Respects ``Retry-After`` headers (delay-seconds or HTTP-date) and falls back
    to exponential backoff when they're absent.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_retries: Maximum number of retry attempts (default: 3)
        backoff_factor: Multiplier for exponential backoff (default: 1.0)
        max_backoff: Maximum backoff time in seconds (default: 60)
        retry_status_codes: Status codes that trigger retries (default: 429, 502, 503, 504)
    """

    IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "OPTIONS"])

    DEFAULT_RETRY_STATUS_CODES: frozenset[int] = frozenset([429, 502, 503, 504])

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        max_backoff: float = 60.0,
        retry_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff
        self.retry_status_codes = retry_status_codes or self.DEFAULT_RETRY_STATUS_CODES

    def __enter__(self):
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        self._wrapped_transport.close()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request, retrying retryable responses.

        Args:
            request: The HTTP request to send

        Returns:
            HTTP response (the last one received once retries run out)
        """
        retries = 0
        while True:
            response = self._wrapped_transport.handle_request(request)
            if not self._should_retry(request, response, retries):
                return response

            retries += 1
            delay = self._parse_retry_after(response)
            if delay is None:
                delay = self._calculate_backoff_delay(retries)

            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
            )
            response.close()
            time.sleep(delay)

    def _should_retry(self, request: httpx.Request, response: httpx.Response, current_retries: int) -> bool:
        if current_retries >= self.max_retries:
            return False
        if request.method not in self.IDEMPOTENT_METHODS:
            return False
        return response.status_code in self.retry_status_codes

    def _parse_retry_after(self, response: httpx.Response) -> float | None:
        """Parse the Retry-After header, or None if missing or invalid."""
        retry_after = response.headers.get("Retry-After")
        if not retry_after:
            return None

        try:
            delay = int(retry_after)
            if delay < 0:
                return None
            return float(min(delay, self.max_backoff))
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(retry_after)
            delay = (retry_date - datetime.now(UTC)).total_seconds()
            # Clock skew can put the date in the past
            if delay < 0:
                return None
            return float(min(delay, self.max_backoff))
        except (ValueError, TypeError):
            return None

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        """Exponential backoff: 1, 2, 4, 8... seconds, capped at max_backoff."""
        delay = self.backoff_factor * (2 ** (retry_number - 1))
        return min(delay, self.max_backoff)
