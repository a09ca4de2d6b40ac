"""Registry region listing."""

from typing import Optional

from ..core.client import Client
from ..core.pagination import ListOptions, Meta, parse_envelope
from ..core.query import encode_query
from ..models import ContainerRegistryRegion
from .base import REGISTRY_PATH


class RegionHandler:
    """List regions where registries can be created."""

    def __init__(self, client: Client) -> None:
        self.client = client

    async def list(
        self, options: Optional[ListOptions] = None
    ) -> tuple[list[ContainerRegistryRegion], Meta]:
        req = self.client.new_request(
            "GET", f"{REGISTRY_PATH}/region/list", query=encode_query(options)
        )
        resp = await self.client.do(req)
        return parse_envelope(resp.data, "regions", ContainerRegistryRegion.from_dict)
