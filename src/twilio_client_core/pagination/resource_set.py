"""Lazy, forward-only iteration over a paginated collection.

``ResourceSet`` presents every record of a collection as one sequence while
holding a single page in memory. The next page is requested only when the
current one is used up and the consumer asks for another record.

State transitions::

    AWAITING_FIRST_PAGE --fetch--> HAS_BUFFERED_RECORDS --last record--> AWAITING_NEXT_PAGE
                                          |                                   |
                                          +--last record, no cursor--+  fetch |
                                                                     v        |
    (limit reached from any state) ---------------------------> EXHAUSTED <---+ (no records, no cursor)
"""

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from twilio_client_core.pagination.page import Page

if TYPE_CHECKING:
    from twilio_client_core.client import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PageSource(Protocol[T]):
    """Anything that can fetch the first page and follow a page's cursor."""

    def first_page(self, client: "Transport") -> Page[T]: ...

    def next_page(self, page: Page[T], client: "Transport") -> Page[T] | None: ...


class ResultSetState(Enum):
    AWAITING_FIRST_PAGE = "awaiting_first_page"
    HAS_BUFFERED_RECORDS = "has_buffered_records"
    AWAITING_NEXT_PAGE = "awaiting_next_page"
    EXHAUSTED = "exhausted"


class ResourceSet(Iterator[T], Generic[T]):
    """Iterator over all records of a collection, fetching pages on demand.

    Args:
        source: Page source that fetches pages (usually a ``Reader``)
        client: Transport the source sends its requests through
        first_page: Already-fetched first page; when None it is fetched on
            first demand
        limit: Maximum number of records to yield; None means no limit

    Records come out in API order, page after page. Once ``limit`` records
    have been yielded no further request is made, even if a cursor remains.
    An error raised while fetching a page surfaces from the ``next()`` call
    that needed it; records yielded before it stay valid.

    Not safe to share between consumers: it is one cursor over the collection.
    """

    def __init__(
        self,
        source: PageSource[T],
        client: "Transport",
        first_page: Page[T] | None = None,
        limit: int | None = None,
    ):
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        self._source = source
        self._client = client
        self.limit = limit
        self.records_yielded = 0
        self.page_count = 0
        self._page: Page[T] | None = None
        self._index = 0
        self.state = ResultSetState.AWAITING_FIRST_PAGE
        if first_page is not None:
            self._load(first_page)

    @property
    def current_page(self) -> Page[T] | None:
        return self._page

    def __iter__(self) -> "ResourceSet[T]":
        return self

    def __next__(self) -> T:
        while True:
            if self._limit_reached():
                self.state = ResultSetState.EXHAUSTED

            if self.state is ResultSetState.EXHAUSTED:
                raise StopIteration

            if self.state is ResultSetState.HAS_BUFFERED_RECORDS:
                return self._take()

            if self.state is ResultSetState.AWAITING_FIRST_PAGE:
                self._load(self._source.first_page(self._client))
            else:
                next_page = self._source.next_page(self._page, self._client)
                if next_page is None:
                    self.state = ResultSetState.EXHAUSTED
                else:
                    self._load(next_page)

    def _take(self) -> T:
        record = self._page.records[self._index]
        self._index += 1
        self.records_yielded += 1
        if self._index >= len(self._page.records):
            self.state = self._state_after_buffer()
        return record

    def _load(self, page: Page[T]) -> None:
        self._page = page
        self._index = 0
        self.page_count += 1
        logger.debug(
            f"Loaded page {self.page_count} with {len(page.records)} records "
            f"(next page: {'yes' if page.has_next_page else 'no'})"
        )
        if page.records:
            self.state = ResultSetState.HAS_BUFFERED_RECORDS
        else:
            # Empty page: follow its cursor without surfacing an empty batch
            self.state = self._state_after_buffer()

    def _state_after_buffer(self) -> ResultSetState:
        if self._page is not None and self._page.has_next_page:
            return ResultSetState.AWAITING_NEXT_PAGE
        return ResultSetState.EXHAUSTED

    def _limit_reached(self) -> bool:
        return self.limit is not None and self.records_yielded >= self.limit
