"""Resource handlers for the container registry API."""

from .base import ListHandler, ResourceHandler
from .credentials import CredentialsHandler
from .plans import PlanHandler
from .regions import RegionHandler
from .registries import RegistryHandler
from .repositories import RepositoryHandler

__all__ = [
    "CredentialsHandler",
    "ListHandler",
    "PlanHandler",
    "RegionHandler",
    "RegistryHandler",
    "RepositoryHandler",
    "ResourceHandler",
]
