"""Vultr Registry Client - Async Python client for the container registry API."""

__version__ = "0.1.0"

from .core.client import Client
from .core.pagination import Links, ListOptions, Meta
from .core.query import encode_query, encode_query_string
from .core.types import RegistryConfig
from .exceptions import (
    APIError,
    DecodeError,
    NotFoundError,
    RegistryError,
    RequestConstructionError,
    TransportError,
    ValidationError,
)
from .models import (
    ContainerRegistry,
    ContainerRegistryPlan,
    ContainerRegistryPlans,
    ContainerRegistryRegion,
    ContainerRegistryRepo,
    ContainerRegistryStorage,
    ContainerRegistryUser,
    CreateRegistryRequest,
    DockerCredentials,
    DockerCredentialsOptions,
    StorageCount,
    UpdateRegistryRequest,
    UpdateRepositoryRequest,
)
from .registry import (
    create_docker_credentials,
    create_registry,
    delete_registry,
    delete_repository,
    get_registry,
    get_repository,
    list_plans,
    list_regions,
    list_registries,
    list_repositories,
    update_registry,
    update_repository,
)
from .service import ContainerRegistryService

__all__ = [
    # Client
    "Client",
    "ContainerRegistryService",
    "RegistryConfig",
    # Pagination
    "Links",
    "ListOptions",
    "Meta",
    "encode_query",
    "encode_query_string",
    # Models
    "ContainerRegistry",
    "ContainerRegistryPlan",
    "ContainerRegistryPlans",
    "ContainerRegistryRegion",
    "ContainerRegistryRepo",
    "ContainerRegistryStorage",
    "ContainerRegistryUser",
    "CreateRegistryRequest",
    "DockerCredentials",
    "DockerCredentialsOptions",
    "StorageCount",
    "UpdateRegistryRequest",
    "UpdateRepositoryRequest",
    # Functional API
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
    # Exceptions
    "RegistryError",
    "APIError",
    "DecodeError",
    "NotFoundError",
    "RequestConstructionError",
    "TransportError",
    "ValidationError",
]
