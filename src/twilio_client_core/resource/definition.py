"""Data describing one API resource: where it lives and which filters it takes.

Fetchers and readers are not subclassed per resource. Each generated resource
module declares a ``ResourceDefinition`` and the generic ``Fetcher``/``Reader``
do the rest.

Example:
    ```python
    COUNTRIES = ResourceDefinition(
        name="Country",
        domain=Domain.PRICING,
        path="/v1/Messaging/Countries",
        records_key="countries",
        parse=Country.from_dict,
    )
    ```
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from twilio_client_core.converters import prefixed_collapsible_map, promote_list
from twilio_client_core.pagination.page import RecordParser
from twilio_client_core.transport.request import Domain

T = TypeVar("T")


class FilterKind(Enum):
    """How a filter value is written to the query string."""

    SCALAR = "scalar"  # Name=value
    LIST = "list"  # Name=a&Name=b
    PREFIXED_MAP = "prefixed_map"  # Prefix.key.subkey=value


@dataclass(frozen=True)
class QueryFilter:
    """An optional query parameter a fetcher or reader can be configured with.

    Attributes:
        name: Keyword used with ``configure()``, e.g. ``message_date``
        param: Parameter name on the wire, e.g. ``MessageDate``
        kind: Shape of the value
        prefix: Prefix of the flattened names for ``PREFIXED_MAP`` filters;
            defaults to ``param``
    """

    name: str
    param: str
    kind: FilterKind = FilterKind.SCALAR
    prefix: str | None = None

    def to_query_params(self, value: Any) -> list[tuple[str, Any]]:
        """Expand a configured value into query parameters (none for None)."""
        if value is None:
            return []
        if self.kind is FilterKind.LIST:
            return [(self.param, item) for item in promote_list(value) if item is not None]
        if self.kind is FilterKind.PREFIXED_MAP:
            if not isinstance(value, Mapping):
                raise TypeError(f"Filter '{self.name}' expects a mapping, got {type(value).__name__}")
            return list(prefixed_collapsible_map(value, self.prefix or self.param).items())
        return [(self.param, value)]


@dataclass(frozen=True)
class ResourceDefinition(Generic[T]):
    """Everything the generic fetcher/reader need to know about a resource.

    Attributes:
        name: Resource name used in error messages, e.g. ``Notification``
        domain: API domain serving the resource
        path: Path template, placeholders in ``str.format`` syntax
        parse: Turns one decoded JSON object into a record
        records_key: Name of the records array in list responses
        filters: Optional query filters, in the order they are sent
    """

    name: str
    domain: Domain
    path: str
    parse: RecordParser[T]
    records_key: str | None = None
    filters: tuple[QueryFilter, ...] = ()

    def get_filter(self, name: str) -> QueryFilter:
        for query_filter in self.filters:
            if query_filter.name == name:
                return query_filter
        known = ", ".join(f.name for f in self.filters) or "none"
        raise ValueError(f"{self.name} has no filter '{name}' (known filters: {known})")

    def render_path(self, **path_params: Any) -> str:
        """Substitute URL-quoted path parameters into the path template."""
        quoted = {key: quote(str(value), safe="") for key, value in path_params.items()}
        try:
            return self.path.format(**quoted)
        except KeyError as e:
            raise ValueError(f"{self.name} path is missing parameter {e}") from None
