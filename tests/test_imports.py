"""Test that the package and its public API import cleanly."""

import importlib


def test_imports_work():
    """Test that all our main imports work."""
    from vultr_registry_client import (
        ContainerRegistryService,
        list_regions,
        list_registries,
        list_repositories,
    )

    assert callable(list_registries)
    assert callable(list_repositories)
    assert callable(list_regions)
    assert callable(ContainerRegistryService.list_repositories)


def test_submodules_import():
    for name in (
        "vultr_registry_client.service",
        "vultr_registry_client.registry",
        "vultr_registry_client.operations",
        "vultr_registry_client.core.client",
    ):
        assert importlib.import_module(name) is not None


def test_service_annotations_resolve():
    from vultr_registry_client import ContainerRegistryService

    annotations = ContainerRegistryService.list_regions.__annotations__
    assert "return" in annotations
