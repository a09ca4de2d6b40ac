"""Operations on repositories nested under a registry."""

from typing import Optional

from ..core.client import Client
from ..core.pagination import ListOptions, Meta, parse_envelope
from ..core.query import encode_query
from ..models import ContainerRegistryRepo, UpdateRepositoryRequest
from .base import REGISTRY_PATH, path_segment


def _repository_path(registry_id: str, image_name: str) -> str:
    return (
        f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}"
        f"/repository/{path_segment(image_name, 'image_name', allow_slash=True)}"
    )


class RepositoryHandler:
    """Read, update and delete the repositories of a registry."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def get(self, registry_id: str, image_name: str) -> ContainerRegistryRepo:
        """Get a repository by registry ID and image name.

        Raises:
            RequestConstructionError: If either identifier is empty
            NotFoundError: If the repository does not exist
        """
        path = _repository_path(registry_id, image_name)
        resp = await self.client.do(self.client.new_request("GET", path))
        return ContainerRegistryRepo.from_dict(resp.data)

    async def list(
        self, registry_id: str, options: Optional[ListOptions] = None
    ) -> tuple[list[ContainerRegistryRepo], Meta]:
        """List one page of repositories in a registry."""
        path = f"{REGISTRY_PATH}/{path_segment(registry_id, 'registry_id')}/repositories"
        req = self.client.new_request("GET", path, query=encode_query(options))
        resp = await self.client.do(req)
        return parse_envelope(
            resp.data, "repositories", ContainerRegistryRepo.from_dict
        )

    async def update(
        self, registry_id: str, image_name: str, patch: UpdateRepositoryRequest
    ) -> ContainerRegistryRepo:
        path = _repository_path(registry_id, image_name)
        resp = await self.client.do(self.client.new_request("PUT", path, body=patch))
        return ContainerRegistryRepo.from_dict(resp.data)

    async def delete(self, registry_id: str, image_name: str) -> None:
        path = _repository_path(registry_id, image_name)
        await self.client.do(self.client.new_request("DELETE", path), raw=True)
