"""Data models for container registry resources."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import aiofiles

from .exceptions import DecodeError


def _object(data: Any, name: str) -> dict[str, Any]:
    """Return data as a dict; null decodes to an empty object."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass
class StorageCount:
    """Storage figure expressed in several units."""

    bytes: float = 0.0
    mb: float = 0.0
    gb: float = 0.0
    tb: float = 0.0
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "StorageCount":
        data = _object(data, "storage count")
        return cls(
            bytes=data.get("bytes", 0.0),
            mb=data.get("mb", 0.0),
            gb=data.get("gb", 0.0),
            tb=data.get("tb", 0.0),
            updated_at=data.get("updated_at", ""),
        )


@dataclass
class ContainerRegistryStorage:
    """Storage used by a registry and the limit of its plan."""

    used: StorageCount = field(default_factory=StorageCount)
    allowed: StorageCount = field(default_factory=StorageCount)

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryStorage":
        data = _object(data, "storage")
        return cls(
            used=StorageCount.from_dict(data.get("used")),
            allowed=StorageCount.from_dict(data.get("allowed")),
        )


@dataclass
class ContainerRegistryUser:
    """Root user of a registry."""

    id: int = 0
    username: str = ""
    password: str = field(default="", repr=False)
    root: bool = False
    added_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryUser":
        data = _object(data, "root_user")
        return cls(
            id=data.get("id", 0),
            username=data.get("username", ""),
            password=data.get("password", ""),
            root=data.get("root", False),
            added_at=data.get("added_at", ""),
            updated_at=data.get("updated_at", ""),
        )


@dataclass
class ContainerRegistry:
    """A container registry subscription."""

    id: str = ""
    name: str = ""
    urn: str = ""
    storage: ContainerRegistryStorage = field(default_factory=ContainerRegistryStorage)
    date_created: str = ""
    public: bool = False
    root_user: ContainerRegistryUser = field(default_factory=ContainerRegistryUser)

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistry":
        data = _object(data, "registry")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            urn=data.get("urn", ""),
            storage=ContainerRegistryStorage.from_dict(data.get("storage")),
            date_created=data.get("date_created", ""),
            public=data.get("public", False),
            root_user=ContainerRegistryUser.from_dict(data.get("root_user")),
        )


@dataclass
class CreateRegistryRequest:
    """Payload used to create a registry."""

    name: str
    region: str
    plan: str
    public: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "public": self.public,
            "region": self.region,
            "plan": self.plan,
        }


@dataclass
class UpdateRegistryRequest:
    """Partial update of a registry; fields left as None are not sent."""

    public: Optional[bool] = None
    plan: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.public is not None:
            body["public"] = self.public
        if self.plan is not None:
            body["plan"] = self.plan
        return body


@dataclass
class ContainerRegistryRepo:
    """An image repository inside a registry."""

    name: str = ""
    image: str = ""
    description: str = ""
    added_at: str = ""
    updated_at: str = ""
    pull_count: int = 0
    artifact_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryRepo":
        data = _object(data, "repository")
        return cls(
            name=data.get("name", ""),
            image=data.get("image", ""),
            description=data.get("description", ""),
            added_at=data.get("added_at", ""),
            updated_at=data.get("updated_at", ""),
            pull_count=data.get("pull_count", 0),
            artifact_count=data.get("artifact_count", 0),
        )


@dataclass
class UpdateRepositoryRequest:
    """Partial update of a repository; None leaves the description as is."""

    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        if self.description is None:
            return {}
        return {"description": self.description}


@dataclass
class ContainerRegistryRegion:
    """A region where registries can be created."""

    id: int = 0
    name: str = ""
    urn: str = ""
    base_url: str = ""
    public: bool = False
    added_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryRegion":
        data = _object(data, "region")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            urn=data.get("urn", ""),
            base_url=data.get("base_url", ""),
            public=data.get("public", False),
            added_at=data.get("added_at", ""),
            updated_at=data.get("updated_at", ""),
        )


@dataclass
class ContainerRegistryPlan:
    """Pricing and storage limit of one plan."""

    vanity_name: str = ""
    max_storage_mb: int = 0
    monthly_price: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryPlan":
        data = _object(data, "plan")
        return cls(
            vanity_name=data.get("vanity_name", ""),
            max_storage_mb=data.get("max_storage_mb", 0),
            monthly_price=data.get("monthly_price", 0),
        )


@dataclass
class ContainerRegistryPlans:
    """All registry plans offered by the API."""

    start_up: ContainerRegistryPlan = field(default_factory=ContainerRegistryPlan)
    business: ContainerRegistryPlan = field(default_factory=ContainerRegistryPlan)
    premium: ContainerRegistryPlan = field(default_factory=ContainerRegistryPlan)
    enterprise: ContainerRegistryPlan = field(default_factory=ContainerRegistryPlan)

    @classmethod
    def from_dict(cls, data: Any) -> "ContainerRegistryPlans":
        plans = _object(_object(data, "plans response").get("plans"), "plans")
        return cls(
            start_up=ContainerRegistryPlan.from_dict(plans.get("start_up")),
            business=ContainerRegistryPlan.from_dict(plans.get("business")),
            premium=ContainerRegistryPlan.from_dict(plans.get("premium")),
            enterprise=ContainerRegistryPlan.from_dict(plans.get("enterprise")),
        )


@dataclass
class DockerCredentialsOptions:
    """Options for issuing Docker credentials; None fields are not sent.

    Attributes:
        expiry_seconds: Lifetime of the credentials
        write_access: Grant push access in addition to pull
    """

    expiry_seconds: Optional[int] = None
    write_access: Optional[bool] = field(default=None, metadata={"query": "read_write"})


class DockerCredentials:
    """Docker credentials exactly as returned by the API.

    The payload is kept as raw bytes (a Docker config.json document) and is
    never re-encoded, so it can be written to disk or printed verbatim.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        self._raw = bytes(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self._raw.decode("utf-8", errors="surrogateescape")

    def __len__(self) -> int:
        return len(self._raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DockerCredentials):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"DockerCredentials(<{len(self._raw)} bytes>)"

    async def save(self, path: Union[str, Path]) -> Path:
        """Write the credentials to a file, e.g. ~/.docker/config.json.

        Args:
            path: Destination file; parent directories are created

        Returns:
            Path that was written
        """
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "wb") as f:
            await f.write(self._raw)
        return path
