"""Registry plan listing."""

from ..core.client import Client
from ..models import ContainerRegistryPlans
from .base import REGISTRY_PATH


class PlanHandler:
    """List the plans registries can subscribe to."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def list(self) -> ContainerRegistryPlans:
        resp = await self.client.do(
            self.client.new_request("GET", f"{REGISTRY_PATH}/plan/list")
        )
        return ContainerRegistryPlans.from_dict(resp.data)
