"""Testing utilities for code built on the client core.

Example:
    ```python
    from twilio_client_core.testing import RecordingHandler, mock_client, page_body

    handler = RecordingHandler()
    handler.enqueue(200, page_body("countries", [{"iso_country": "US"}]))
    client = mock_client(handler)
    ```
"""

from collections import deque
from collections.abc import Callable
from typing import Any

import httpx

from twilio_client_core.client import TwilioRestClient

TEST_ACCOUNT_SID = "ACXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX"
TEST_AUTH_TOKEN = "test-auth-token"


def mock_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> TwilioRestClient:
    """Build a client whose requests are answered by ``handler``."""
    kwargs.setdefault("account_sid", TEST_ACCOUNT_SID)
    kwargs.setdefault("auth_token", TEST_AUTH_TOKEN)
    return TwilioRestClient(transport=httpx.MockTransport(handler), **kwargs)


def page_body(
    key: str,
    records: list[dict[str, Any]],
    *,
    next_page_url: str | None = None,
    previous_page_url: str | None = None,
    page_size: int = 50,
    url: str = "https://api.example.com/page",
) -> dict[str, Any]:
    """Build a page payload in the ``meta`` envelope."""
    return {
        key: records,
        "meta": {
            "key": key,
            "page_size": page_size,
            "url": url,
            "first_page_url": url,
            "next_page_url": next_page_url,
            "previous_page_url": previous_page_url,
        },
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays queued responses.

    Queue entries are ``(status, json_body)`` tuples, ``httpx.Response``
    objects, or exceptions to raise. An empty queue fails the test loudly.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: deque[Any] = deque()

    def enqueue(self, status: int, body: Any = None, *, content: bytes | None = None) -> None:
        if content is not None:
            self._queue.append(httpx.Response(status, content=content))
        elif body is None:
            self._queue.append(httpx.Response(status))
        else:
            self._queue.append(httpx.Response(status, json=body))

    def enqueue_error(self, error: Exception) -> None:
        self._queue.append(error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        item = self._queue.popleft()
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def query_strings(self) -> list[str]:
        return [request.url.query.decode() for request in self.requests]
