"""One fetched batch of records plus its cursor metadata."""

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import IO, Any, Generic, TypeVar

import httpx

from twilio_client_core.errors import ApiConnectionError, ParseError

T = TypeVar("T")

RecordParser = Callable[[Mapping[str, Any]], T]


@dataclass(frozen=True)
class Page(Generic[T]):
    """A single page of a collection.

    Pages are plain values: building one parses a response body, and nothing
    about a page ever touches the network again.

    Attributes:
        records: Records in the order the API returned them
        page_size: Requested page size, as echoed by the API
        next_page_url: Cursor for the following page, or None on the last page
        previous_page_url: Cursor for the preceding page, or None on the first page
        first_page_url: Cursor for the first page of the collection
        url: URL this page was fetched from
        key: Name of the array holding the records
        total: Total number of records in the collection, when the API reports it
    """

    records: tuple[T, ...]
    page_size: int | None = None
    next_page_url: str | None = None
    previous_page_url: str | None = None
    first_page_url: str | None = None
    url: str | None = None
    key: str | None = None
    total: int | None = None

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_url)

    @property
    def has_previous_page(self) -> bool:
        return bool(self.previous_page_url)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    @classmethod
    def from_json(
        cls,
        body: str | bytes | IO[Any],
        records_key: str | None,
        parse: RecordParser[T],
    ) -> "Page[T]":
        """Parse a page body.

        Two envelopes are understood. The current one nests cursor metadata in
        a ``meta`` object (``page_size``, ``first_page_url``, ``next_page_url``,
        ``previous_page_url``, ``url``, ``key``). The older flat one keeps it at
        the top level (``next_page_uri``, ``previous_page_uri``,
        ``first_page_uri``, ``uri``, ``page_size``, ``total``).

        Args:
            body: Raw JSON, or a readable stream of it
            records_key: Name of the array of records; when None, the ``key``
                announced in ``meta`` is used
            parse: Callable turning one record object into a T

        Raises:
            ParseError: The body is not JSON or not shaped like a page
            ApiConnectionError: Reading the body stream failed
        """
        data = _load(body)
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object for a page, got {type(data).__name__}")

        meta = data.get("meta")
        if isinstance(meta, dict):
            key = records_key or meta.get("key")
            envelope = {
                "page_size": meta.get("page_size"),
                "next_page_url": meta.get("next_page_url"),
                "previous_page_url": meta.get("previous_page_url"),
                "first_page_url": meta.get("first_page_url"),
                "url": meta.get("url"),
                "total": meta.get("total", data.get("total")),
            }
        else:
            key = records_key
            envelope = {
                "page_size": data.get("page_size"),
                "next_page_url": data.get("next_page_uri"),
                "previous_page_url": data.get("previous_page_uri"),
                "first_page_url": data.get("first_page_uri"),
                "url": data.get("uri"),
                "total": data.get("total"),
            }

        if not key:
            raise ParseError("Page has no records key")
        raw_records = data.get(key)
        if not isinstance(raw_records, list):
            raise ParseError(f"Page has no '{key}' array of records")

        try:
            records = tuple(parse(raw) for raw in raw_records)
            page_size = _optional_int(envelope.pop("page_size"))
            total = _optional_int(envelope.pop("total"))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Unable to parse '{key}' page: {e}") from e

        return cls(records=records, page_size=page_size, total=total, key=key, **envelope)


def _load(body: str | bytes | IO[Any]) -> Any:
    if hasattr(body, "read"):
        try:
            body = body.read()
        except (OSError, httpx.TransportError) as e:
            raise ApiConnectionError(f"Unable to read response body: {e}") from e
    try:
        return json.loads(body)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Unable to decode JSON: {e}") from e


def _optional_int(value: Any) -> int | None:
    return int(value) if value is not None else None
