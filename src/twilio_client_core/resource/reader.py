"""Paginated collection read."""

import logging
from typing import TYPE_CHECKING, Any, Self, TypeVar

from twilio_client_core.pagination.page import Page
from twilio_client_core.pagination.resource_set import ResourceSet
from twilio_client_core.resource.base import Operation
from twilio_client_core.resource.definition import ResourceDefinition
from twilio_client_core.transport.request import HttpMethod, Request

if TYPE_CHECKING:
    from twilio_client_core.client import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000


class Reader(Operation[T]):
    """Read a collection page by page.

    The first page request carries the configured filters and ``PageSize``.
    Later pages are requested from the cursor URL the previous page returned,
    which already encodes the filters.

    Example:
        ```python
        reader = Reader(NOTIFICATIONS, account_sid="AC123", call_sid="CA123").configure(log=3)
        for notification in reader.execute(client, limit=100):
            ...
        ```
    """

    verb = "read"

    def __init__(self, definition: ResourceDefinition[T], **path_params: Any):
        super().__init__(definition, **path_params)
        if not definition.records_key:
            raise ValueError(f"{definition.name} has no records key and cannot be read")
        self._page_size: int | None = None

    def page_size(self, page_size: int) -> Self:
        """Set the number of records requested per page (1-1000)."""
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
        self._page_size = page_size
        return self

    @property
    def effective_page_size(self) -> int:
        return self._page_size or DEFAULT_PAGE_SIZE

    def build_request(self, client: "Transport", page_size: int | None = None) -> Request:
        """Build the first-page request from the current filters."""
        request = Request(HttpMethod.GET, self.definition.domain, self.path, account_sid=client.account_sid)
        self._add_query_params(request)
        request.add_query_param("PageSize", page_size or self.effective_page_size)
        return request

    def first_page(self, client: "Transport") -> Page[T]:
        return self._page_for_request(client, self.build_request(client))

    def next_page(self, page: Page[T], client: "Transport") -> Page[T] | None:
        """Fetch the page after ``page``, or return None without a request on the last page."""
        if not page.has_next_page:
            return None
        return self.get_page(page.next_page_url, client)

    def previous_page(self, page: Page[T], client: "Transport") -> Page[T] | None:
        """Fetch the page before ``page``, or return None without a request on the first page."""
        if not page.has_previous_page:
            return None
        return self.get_page(page.previous_page_url, client)

    def get_page(self, url: str, client: "Transport") -> Page[T]:
        """Fetch the page at a cursor URL (absolute, or a path on this resource's domain)."""
        request = Request(HttpMethod.GET, self.definition.domain, url=url, account_sid=client.account_sid)
        return self._page_for_request(client, request)

    def execute(self, client: "Transport", limit: int | None = None) -> ResourceSet[T]:
        """Fetch the first page and return a lazy iterator over every record.

        Args:
            client: Transport to send requests through
            limit: Stop after this many records; no request is made once it is
                reached, so ``limit=0`` makes no request at all

        When ``limit`` is smaller than the default page size and no page size
        was set explicitly, the first page asks for only ``limit`` records.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        if limit == 0:
            return ResourceSet(self, client, limit=0)

        page_size = self._page_size
        if page_size is None and limit is not None:
            page_size = min(limit, DEFAULT_PAGE_SIZE)

        first_page = self._page_for_request(client, self.build_request(client, page_size))
        return ResourceSet(self, client, first_page=first_page, limit=limit)

    def read(self, client: "Transport", limit: int | None = None) -> list[T]:
        """Eagerly collect up to ``limit`` records into a list."""
        return list(self.execute(client, limit=limit))

    def _page_for_request(self, client: "Transport", request: Request) -> Page[T]:
        response = self._send(client, request)
        page = Page.from_json(response.content, self.definition.records_key, self.definition.parse)
        logger.debug(f"{self.operation_name} fetched {len(page)} records")
        return page
