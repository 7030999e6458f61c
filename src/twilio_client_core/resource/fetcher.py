"""Single-record fetch."""

import logging
from typing import TYPE_CHECKING, TypeVar

from twilio_client_core.resource.base import Operation, record_from_json
from twilio_client_core.transport.request import HttpMethod, Request

if TYPE_CHECKING:
    from twilio_client_core.client import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Fetcher(Operation[T]):
    """Fetch exactly one record.

    Example:
        ```python
        fetcher = Fetcher(PHONE_NUMBER, phone_number="+15108675310").configure(type=["carrier"])
        record = fetcher.execute(client)
        ```
    """

    verb = "fetch"

    def build_request(self, client: "Transport") -> Request:
        request = Request(HttpMethod.GET, self.definition.domain, self.path, account_sid=client.account_sid)
        self._add_query_params(request)
        return request

    def execute(self, client: "Transport") -> T:
        """Send the request and deserialize the record.

        Raises:
            ApiConnectionError: No response was obtained.
            ApiError: The API returned an error payload (ParseError when the
                record body is malformed).
            ServerError: The API failed without an error payload.
        """
        response = self._send(client, self.build_request(client))
        logger.debug(f"{self.operation_name} succeeded with HTTP {response.status_code}")
        return record_from_json(response.content, self.definition.parse)
