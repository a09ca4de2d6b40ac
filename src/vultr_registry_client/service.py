"""Container registry service facade."""

from typing import List, Optional, Tuple

from .core.client import Client
from .core.pagination import ListOptions, Meta
from .core.types import RegistryConfig
from .models import (
    ContainerRegistry,
    ContainerRegistryPlans,
    ContainerRegistryRegion,
    ContainerRegistryRepo,
    CreateRegistryRequest,
    DockerCredentials,
    DockerCredentialsOptions,
    UpdateRegistryRequest,
    UpdateRepositoryRequest,
)
from .operations import (
    CredentialsHandler,
    ListHandler,
    PlanHandler,
    RegionHandler,
    RegistryHandler,
    RepositoryHandler,
    ResourceHandler,
)


class ContainerRegistryService:
    """All container registry operations behind a single object.

    Example:
        async with ContainerRegistryService(RegistryConfig(api_key=key)) as vcr:
            registries, meta = await vcr.list(ListOptions(per_page=25))
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        client: Optional[Client] = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Registry configuration, used when no client is given
            client: Shared client; the caller keeps ownership of it
        """
        self._owns_client = client is None
        self.client = client or Client(config)
        self.registries: ResourceHandler[ContainerRegistry] = RegistryHandler(self.client)
        self.repositories = RepositoryHandler(self.client)
        self.credentials = CredentialsHandler(self.client)
        self.regions: ListHandler[ContainerRegistryRegion] = RegionHandler(self.client)
        self.plans = PlanHandler(self.client)

    async def __aenter__(self) -> "ContainerRegistryService":
        if self._owns_client:
            await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self.client.close()

    async def create(self, create_req: CreateRegistryRequest) -> ContainerRegistry:
        return await self.registries.create(create_req)

    async def get(self, registry_id: str) -> ContainerRegistry:
        return await self.registries.get(registry_id)

    async def update(
        self, registry_id: str, update_req: UpdateRegistryRequest
    ) -> ContainerRegistry:
        return await self.registries.update(registry_id, update_req)

    async def delete(self, registry_id: str) -> None:
        await self.registries.delete(registry_id)

    async def list(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[ContainerRegistry], Meta]:
        return await self.registries.list(options)

    async def list_repositories(
        self, registry_id: str, options: Optional[ListOptions] = None
    ) -> Tuple[List[ContainerRegistryRepo], Meta]:
        return await self.repositories.list(registry_id, options)

    async def get_repository(
        self, registry_id: str, image_name: str
    ) -> ContainerRegistryRepo:
        return await self.repositories.get(registry_id, image_name)

    async def update_repository(
        self,
        registry_id: str,
        image_name: str,
        update_req: UpdateRepositoryRequest,
    ) -> ContainerRegistryRepo:
        return await self.repositories.update(registry_id, image_name, update_req)

    async def delete_repository(self, registry_id: str, image_name: str) -> None:
        await self.repositories.delete(registry_id, image_name)

    async def create_docker_credentials(
        self,
        registry_id: str,
        options: Optional[DockerCredentialsOptions] = None,
    ) -> DockerCredentials:
        return await self.credentials.create_docker_credentials(registry_id, options)

    async def list_regions(
        self, options: Optional[ListOptions] = None
    ) -> Tuple[List[ContainerRegistryRegion], Meta]:
        return await self.regions.list(options)

    async def list_plans(self) -> ContainerRegistryPlans:
        return await self.plans.list()
