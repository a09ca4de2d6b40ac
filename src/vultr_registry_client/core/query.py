"""Query string encoding for option dataclasses."""

import dataclasses
from typing import Any
from urllib.parse import urlencode

from ..exceptions import RequestConstructionError


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(options: Any) -> list[tuple[str, str]]:
    """Turn an options dataclass into query parameter pairs.

    Fields are visited in declaration order. Fields set to None are left out,
    the wire name comes from the field's ``query`` metadata when present, and
    list values repeat the key once per element.

    Args:
        options: Options dataclass instance, or None

    Returns:
        List of (key, value) pairs

    Raises:
        RequestConstructionError: If options is not a dataclass instance
    """
    if options is None:
        return []
    if not dataclasses.is_dataclass(options) or isinstance(options, type):
        raise RequestConstructionError(
            f"Query options must be a dataclass instance, got {type(options).__name__}"
        )

    pairs: list[tuple[str, str]] = []
    for f in dataclasses.fields(options):
        value = getattr(options, f.name)
        if value is None:
            continue
        key = f.metadata.get("query", f.name)
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_value(item)) for item in value)
        else:
            pairs.append((key, _format_value(value)))
    return pairs


def encode_query_string(options: Any) -> str:
    """Encode options as a URL query string (without the leading '?')."""
    return urlencode(encode_query(options))
