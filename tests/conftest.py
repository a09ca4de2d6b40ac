"""Test configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from tests.helpers import FakeRegistryAPI
from vultr_registry_client import Client, ContainerRegistryService, RegistryConfig


@pytest_asyncio.fixture
async def fake_api():
    """Start a fake API server for a single test."""
    api = FakeRegistryAPI()
    server = TestServer(api.make_app())
    await server.start_server()
    api.url = f"http://{server.host}:{server.port}"
    yield api
    await server.close()


@pytest.fixture
def config(fake_api):
    """Client configuration pointing at the fake API, without backoff delays."""
    return RegistryConfig(
        url=fake_api.url,
        api_key="test-api-key",
        timeout=5,
        max_retries=2,
        retry_wait=0,
        retry_max_wait=0,
    )


@pytest_asyncio.fixture
async def client(config):
    """Open client bound to the fake API."""
    async with Client(config) as c:
        yield c


@pytest_asyncio.fixture
async def service(config):
    """Service facade bound to the fake API."""
    async with ContainerRegistryService(config) as vcr:
        yield vcr


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring the live API"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless an API key is configured."""
    skip_integration = pytest.mark.skip(reason="VULTR_API_KEY not set")

    for item in items:
        if "integration" in item.keywords and not os.getenv("VULTR_API_KEY"):
            item.add_marker(skip_integration)
