"""Shared pieces of the resource handlers."""

from typing import Any, Optional, Protocol, TypeVar
from urllib.parse import quote

from ..core.pagination import ListOptions, Meta
from ..exceptions import RequestConstructionError

REGISTRY_PATH = "/v2/registry"
REGISTRY_LIST_PATH = "/v2/registries"

T = TypeVar("T", covariant=True)


class ListHandler(Protocol[T]):
    """Handler able to list a top-level collection page by page."""

    async def list(
        self, options: Optional[ListOptions] = None, /
    ) -> tuple[list[T], Meta]: ...


class ResourceHandler(ListHandler[T], Protocol[T]):
    """Handler exposing CRUD operations for one top-level resource type."""

    async def get(self, resource_id: str, /) -> T: ...

    async def create(self, payload: Any, /) -> T: ...

    async def update(self, resource_id: str, patch: Any, /) -> T: ...

    async def delete(self, resource_id: str, /) -> None: ...


def path_segment(value: str, name: str, allow_slash: bool = False) -> str:
    """Validate and percent-encode one path segment.

    Args:
        value: Identifier to place in the path
        name: Argument name used in the error message
        allow_slash: Keep '/' unescaped (image names like "team/app")

    Returns:
        Encoded segment

    Raises:
        RequestConstructionError: If the value is empty, not a string, or
            contains "." / ".." parts that would leave the resource's path
    """
    if not isinstance(value, str) or not value.strip():
        raise RequestConstructionError(f"{name} must be a non-empty string")
    parts = value.split("/") if allow_slash else [value]
    if any(part in ("", ".", "..") for part in parts):
        raise RequestConstructionError(f"{name} has an invalid path part: {value!r}")
    return quote(value, safe="/" if allow_slash else "")
