"""Conversion of filter values into query string parameters.

Query parameters are always sent as strings. Three shapes need converting:

- scalars (``Log=3``, ``Beta=true``, ``MessageDate=2024-01-31``)
- lists, sent as a repeated parameter (``AddOns=a&AddOns=b``)
- nested mappings, flattened into dotted parameter names under a prefix
  (``AddOns.twilio_sentiment.mode=fast``)

Example:
    ```python
    from twilio_client_core.converters import prefixed_collapsible_map

    prefixed_collapsible_map({"twilio_sentiment": {"mode": "fast"}}, "AddOns")
    # {"AddOns.twilio_sentiment.mode": "fast"}
    ```
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

SEPARATOR = "."


def serialize_value(value: Any) -> str:
    """Render a single filter value as it appears on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def promote_list(value: Any) -> list[Any]:
    """Return ``value`` as a list, wrapping a scalar into a one-element list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def prefixed_collapsible_map(data: Mapping[str, Any] | None, prefix: str) -> dict[str, str]:
    """Flatten a nested mapping into dotted query parameter names.

    Every leaf becomes one entry named ``prefix.key1.key2...``. Keys are visited
    in mapping order so the result is deterministic. Leaves set to None are
    skipped, the same as an unset filter.

    Args:
        data: Arbitrarily nested mapping of string keys
        prefix: Name of the top-level parameter, e.g. ``"AddOns"``

    Returns:
        Ordered mapping of parameter name to serialized value
    """
    flattened: dict[str, str] = {}
    if not data:
        return flattened

    def _flatten(node: Mapping[str, Any], path: list[str]) -> None:
        for key, value in node.items():
            current_path = [*path, str(key)]
            if isinstance(value, Mapping):
                _flatten(value, current_path)
            elif value is not None:
                flattened[SEPARATOR.join(current_path)] = serialize_value(value)

    _flatten(data, [prefix] if prefix else [])
    return flattened
