"""Container registry CRUD operations."""

from typing import Optional

from ..core.client import Client
from ..core.pagination import ListOptions, Meta, parse_envelope
from ..core.query import encode_query
from ..models import ContainerRegistry, CreateRegistryRequest, UpdateRegistryRequest
from .base import REGISTRY_LIST_PATH, REGISTRY_PATH, path_segment


class RegistryHandler:
    """Create, read, update and delete container registries."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def get(self, registry_id: str) -> ContainerRegistry:
        """Get a registry by ID.

        Raises:
            RequestConstructionError: If registry_id is empty
            NotFoundError: If the registry does not exist
        """
        path = f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}"
        resp = await self.client.do(self.client.new_request("GET", path))
        return ContainerRegistry.from_dict(resp.data)

    async def list(
        self, options: Optional[ListOptions] = None
    ) -> tuple[list[ContainerRegistry], Meta]:
        """List one page of registries.

        Follow ``meta.links.next`` with ``ListOptions(cursor=...)`` to fetch
        the next page.
        """
        req = self.client.new_request(
            "GET", REGISTRY_LIST_PATH, query=encode_query(options)
        )
        resp = await self.client.do(req)
        return parse_envelope(resp.data, "registries", ContainerRegistry.from_dict)

    async def create(self, payload: CreateRegistryRequest) -> ContainerRegistry:
        """Create a registry and return it with its server-assigned fields."""
        req = self.client.new_request("POST", REGISTRY_PATH, body=payload)
        resp = await self.client.do(req)
        return ContainerRegistry.from_dict(resp.data)

    async def update(
        self, registry_id: str, patch: UpdateRegistryRequest
    ) -> ContainerRegistry:
        """Update the fields set in patch and return the updated registry."""
        path = f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}"
        resp = await self.client.do(self.client.new_request("PUT", path, body=patch))
        return ContainerRegistry.from_dict(resp.data)

    async def delete(self, registry_id: str) -> None:
        path = f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}"
        await self.client.do(self.client.new_request("DELETE", path), raw=True)
