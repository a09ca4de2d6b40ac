"""Core data types for the registry API client."""

import os
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import ValidationError

DEFAULT_API_URL = "https://api.vultr.com"
DEFAULT_USER_AGENT = "vultr-registry-client/0.1.0"


@dataclass
class RegistryConfig:
    """Connection settings shared by every request a client makes.

    Attributes:
        url: API base URL (e.g., "https://api.vultr.com")
        api_key: API key sent as a bearer token
        timeout: Total request timeout in seconds
        max_retries: Retries for 429/5xx responses and connection errors
        retry_wait: Initial backoff in seconds, doubled after each retry
        retry_max_wait: Upper bound for a single backoff in seconds
        user_agent: User-Agent header value
    """

    url: str = DEFAULT_API_URL
    api_key: str = field(default="", repr=False)
    timeout: float = 30
    max_retries: int = 3
    retry_wait: float = 1.0
    retry_max_wait: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.url or not self.url.startswith(("http://", "https://")):
            raise ValidationError(f"Invalid API URL: {self.url!r}")
        if self.timeout <= 0:
            raise ValidationError(f"Timeout must be positive: {self.timeout}")
        if self.max_retries < 0:
            raise ValidationError(f"max_retries must be >= 0: {self.max_retries}")
        if self.retry_wait < 0 or self.retry_max_wait < self.retry_wait:
            raise ValidationError(
                f"Invalid retry window: {self.retry_wait}..{self.retry_max_wait}"
            )

    @property
    def base_url(self) -> str:
        """API URL without trailing slashes."""
        return self.url.rstrip("/")

    @classmethod
    def from_env(cls, **overrides: Any) -> "RegistryConfig":
        """Build a config from VULTR_API_KEY, VULTR_API_URL and VULTR_TIMEOUT.

        Keyword arguments override values found in the environment.
        """
        values: dict[str, Any] = {}
        if "VULTR_API_KEY" in os.environ:
            values["api_key"] = os.environ["VULTR_API_KEY"]
        if "VULTR_API_URL" in os.environ:
            values["url"] = os.environ["VULTR_API_URL"]
        if "VULTR_TIMEOUT" in os.environ:
            try:
                values["timeout"] = float(os.environ["VULTR_TIMEOUT"])
            except ValueError as e:
                raise ValidationError(
                    f"VULTR_TIMEOUT is not a number: {os.environ['VULTR_TIMEOUT']}"
                ) from e
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class Request:
    """A request ready to be sent by the client."""

    method: str
    path: str
    url: str
    query: tuple[tuple[str, str], ...] = ()
    json: Any = None


@dataclass(frozen=True)
class Response:
    """Outcome of a successful (2xx) request.

    Attributes:
        status: HTTP status code
        headers: Response headers
        body: Raw response body
        data: Decoded JSON body, None for empty or raw responses
    """

    status: int
    headers: dict[str, str]
    body: bytes
    data: Any = None
