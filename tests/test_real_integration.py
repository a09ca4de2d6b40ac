"""Real integration tests against the live API.

Read-only calls only; set VULTR_API_KEY to run them.
"""

import pytest

from vultr_registry_client import (
    ContainerRegistryService,
    ListOptions,
    NotFoundError,
    RegistryConfig,
)

pytestmark = pytest.mark.integration  # Mark all tests in this file as integration


@pytest.fixture
def live_config():
    return RegistryConfig.from_env()


@pytest.mark.asyncio
async def test_list_plans(live_config):
    async with ContainerRegistryService(live_config) as vcr:
        plans = await vcr.list_plans()

    assert plans.start_up.vanity_name


@pytest.mark.asyncio
async def test_list_regions(live_config):
    async with ContainerRegistryService(live_config) as vcr:
        regions, meta = await vcr.list_regions(ListOptions(per_page=10))

    assert len(regions) <= 10
    assert meta.total >= len(regions)


@pytest.mark.asyncio
async def test_walk_registry_pages(live_config):
    seen = []
    async with ContainerRegistryService(live_config) as vcr:
        options = ListOptions(per_page=1)
        while True:
            registries, meta = await vcr.list(options)
            seen.extend(r.id for r in registries)
            if meta.links.next is None:
                break
            options = ListOptions(cursor=meta.links.next, per_page=1)

    assert len(seen) == len(set(seen))


@pytest.mark.asyncio
async def test_get_unknown_registry(live_config):
    async with ContainerRegistryService(live_config) as vcr:
        with pytest.raises(NotFoundError):
            await vcr.get("00000000-0000-0000-0000-000000000000")
