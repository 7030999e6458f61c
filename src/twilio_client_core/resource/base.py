"""Behaviour shared by fetchers and readers."""

import json
from functools import partial
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

import httpx

from twilio_client_core.errors import ParseError, raise_for_status
from twilio_client_core.pagination.page import RecordParser
from twilio_client_core.resource.definition import ResourceDefinition
from twilio_client_core.transport.request import Request

if TYPE_CHECKING:
    from twilio_client_core.client import Transport

T = TypeVar("T")


class Operation(Generic[T]):
    """A configurable call against one resource.

    Holds the rendered path and the filter values set so far. Filters that
    were never set, or were set to None, are left out of the query string.
    """

    verb = "request"

    def __init__(self, definition: ResourceDefinition[T], **path_params: Any):
        self.definition = definition
        self.path = definition.render_path(**path_params)
        self._filters: dict[str, Any] = {}

    @property
    def filters(self) -> dict[str, Any]:
        """Copy of the filter values currently set."""
        return dict(self._filters)

    @property
    def operation_name(self) -> str:
        return f"{self.definition.name} {self.verb}"

    def configure(self, **filters: Any) -> Self:
        """Set filter values by keyword; returns self for chaining.

        Setting a filter again replaces its value; None unsets it.

        Raises:
            ValueError: A keyword is not a filter of this resource.
        """
        for name, value in filters.items():
            self.definition.get_filter(name)
            if value is None:
                self._filters.pop(name, None)
            else:
                self._filters[name] = value
        return self

    def _add_query_params(self, request: Request) -> None:
        for query_filter in self.definition.filters:
            request.add_query_params(query_filter.to_query_params(self._filters.get(query_filter.name)))

    def _send(self, client: "Transport", request: Request) -> httpx.Response:
        response = client.request(request)
        return raise_for_status(
            response,
            operation=self.operation_name,
            is_success=partial(client.is_success, request.domain),
        )


def record_from_json(body: str | bytes, parse: RecordParser[T]) -> T:
    """Decode a single-record body.

    Raises:
        ParseError: The body is not a JSON object the parser accepts.
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Unable to decode JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return parse(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ParseError(f"Unable to parse record: {e}") from e
