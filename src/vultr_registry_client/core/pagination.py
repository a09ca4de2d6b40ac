"""Cursor pagination types and list envelope decoding."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from ..exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Links:
    """Opaque cursors for neighbouring pages; None means no page that way."""

    next: Optional[str] = None
    prev: Optional[str] = None


@dataclass(frozen=True)
class Meta:
    """Pagination metadata returned with every list response."""

    total: int = 0
    links: Links = field(default_factory=Links)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Meta":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise DecodeError(f"meta must be an object, got {type(data).__name__}")
        links = data.get("links") or {}
        if not isinstance(links, dict):
            raise DecodeError("meta.links must be an object")
        try:
            total = int(data.get("total") or 0)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"meta.total is not an integer: {data.get('total')!r}") from e
        return cls(
            total=total,
            links=Links(
                next=links.get("next") or None,
                prev=links.get("prev") or None,
            ),
        )


@dataclass
class ListOptions:
    """Pagination options sent as query parameters.

    Attributes:
        cursor: Cursor taken from a previous Meta.links
        per_page: Number of items per page
    """

    cursor: Optional[str] = None
    per_page: Optional[int] = None


def parse_envelope(
    payload: Any, key: str, factory: Callable[[dict[str, Any]], T]
) -> tuple[list[T], Meta]:
    """Split a list response into its items and pagination metadata.

    List endpoints wrap their items under a resource-specific key, e.g.
    ``{"registries": [...], "meta": {...}}``.

    Args:
        payload: Decoded JSON response body
        key: Name of the collection key in the envelope
        factory: Callable building one item from its JSON object

    Returns:
        Tuple of (items, meta)

    Raises:
        DecodeError: If the envelope or any item is malformed
    """
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object envelope, got {type(payload).__name__}")
    if key not in payload:
        raise DecodeError(f"Response envelope has no '{key}' key")

    raw_items = payload[key]
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise DecodeError(f"'{key}' must be a list, got {type(raw_items).__name__}")

    items = [factory(item) for item in raw_items]
    return items, Meta.from_dict(payload.get("meta"))
