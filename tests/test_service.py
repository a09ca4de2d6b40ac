"""Tests for the service facade and the functional API."""

import asyncio
import inspect

import pytest

from tests.helpers import meta_json, registry_json, repository_json
from vultr_registry_client import (
    Client,
    ContainerRegistryService,
    CreateRegistryRequest,
    DockerCredentialsOptions,
    ListOptions,
    NotFoundError,
    UpdateRegistryRequest,
    UpdateRepositoryRequest,
    create_docker_credentials,
    get_registry,
    list_registries,
    update_registry,
)


class TestService:
    """Test ContainerRegistryService delegation."""

    @pytest.mark.asyncio
    async def test_registry_lifecycle(self, service, fake_api):
        fake_api.add("POST", "/v2/registry", json=registry_json("r1"))
        fake_api.add("GET", "/v2/registry/r1", json=registry_json("r1"))
        fake_api.add("PUT", "/v2/registry/r1", json={**registry_json("r1"), "public": True})
        fake_api.add("DELETE", "/v2/registry/r1", status=204)

        created = await service.create(
            CreateRegistryRequest(name="myregistry", region="sjc", plan="start_up")
        )
        fetched = await service.get(created.id)
        updated = await service.update(created.id, UpdateRegistryRequest(public=True))
        await service.delete(created.id)

        assert fetched.id == "r1"
        assert updated.public is True
        assert [r.method for r in fake_api.requests] == ["POST", "GET", "PUT", "DELETE"]

    @pytest.mark.asyncio
    async def test_repository_methods(self, service, fake_api):
        base = "/v2/registry/r1"
        fake_api.add(
            "GET",
            f"{base}/repositories",
            json={"repositories": [repository_json()], "meta": meta_json(1)},
        )
        fake_api.add("GET", f"{base}/repository/app", json=repository_json())
        fake_api.add("PUT", f"{base}/repository/app", json=repository_json())
        fake_api.add("DELETE", f"{base}/repository/app", status=204)

        repos, meta = await service.list_repositories("r1")
        await service.get_repository("r1", "app")
        await service.update_repository("r1", "app", UpdateRepositoryRequest(description="d"))
        await service.delete_repository("r1", "app")

        assert len(repos) == 1
        assert meta.total == 1
        assert len(fake_api.requests) == 4

    @pytest.mark.asyncio
    async def test_credentials_regions_plans(self, service, fake_api):
        fake_api.add("OPTIONS", "/v2/registry/r1/docker-credentials", body=b"{}")
        fake_api.add("GET", "/v2/registry/region/list", json={"regions": [], "meta": meta_json(0)})
        fake_api.add("GET", "/v2/registry/plan/list", json={"plans": {}})

        creds = await service.create_docker_credentials(
            "r1", DockerCredentialsOptions(write_access=True)
        )
        regions, _ = await service.list_regions(ListOptions(per_page=10))
        plans = await service.list_plans()

        assert bytes(creds) == b"{}"
        assert regions == []
        assert plans.start_up.vanity_name == ""

    @pytest.mark.asyncio
    async def test_shared_client_is_not_closed(self, config, fake_api):
        fake_api.add("GET", "/v2/registry/plan/list", json={"plans": {}})

        async with Client(config) as client:
            async with ContainerRegistryService(client=client) as vcr:
                await vcr.list_plans()
            assert client.session is not None
            assert not client.session.closed

    @pytest.mark.asyncio
    async def test_handlers_share_client_across_tasks(self, service, fake_api):
        for registry_id in ("a", "b", "c"):
            fake_api.add("GET", f"/v2/registry/{registry_id}", json=registry_json(registry_id))

        results = await asyncio.gather(*(service.get(i) for i in ("a", "b", "c")))

        assert [r.id for r in results] == ["a", "b", "c"]


class TestFunctionalAPI:
    """Test one-shot module-level coroutines."""

    @pytest.mark.asyncio
    async def test_list_registries(self, fake_api):
        fake_api.add(
            "GET",
            "/v2/registries",
            json={"registries": [registry_json()], "meta": meta_json(1, next_cursor="n")},
        )

        items, meta = await list_registries("key", per_page=1, api_url=fake_api.url)

        assert len(items) == 1
        assert meta.links.next == "n"
        assert fake_api.last.query == [("per_page", "1")]
        assert fake_api.last.headers["Authorization"] == "Bearer key"

    @pytest.mark.asyncio
    async def test_get_registry_not_found(self, fake_api):
        with pytest.raises(NotFoundError):
            await get_registry("key", "missing", api_url=fake_api.url)

    @pytest.mark.asyncio
    async def test_update_registry_partial(self, fake_api):
        fake_api.add("PUT", "/v2/registry/r1", json=registry_json("r1"))

        await update_registry("key", "r1", plan="premium", api_url=fake_api.url)

        assert fake_api.last.json == {"plan": "premium"}

    @pytest.mark.asyncio
    async def test_create_docker_credentials(self, fake_api):
        fake_api.add("OPTIONS", "/v2/registry/r1/docker-credentials", body=b'{"auths":{}}')

        creds = await create_docker_credentials(
            "key", "r1", expiry_seconds=60, api_url=fake_api.url
        )

        assert str(creds) == '{"auths":{}}'
        assert fake_api.last.query == [("expiry_seconds", "60")]

    def test_operations_are_async(self):
        import vultr_registry_client as vcr

        for name in (
            "create_docker_credentials",
            "create_registry",
            "delete_registry",
            "delete_repository",
            "get_registry",
            "get_repository",
            "list_plans",
            "list_regions",
            "list_registries",
            "list_repositories",
            "update_registry",
            "update_repository",
        ):
            assert inspect.iscoroutinefunction(getattr(vcr, name)), name
