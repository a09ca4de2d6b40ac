"""HTTP session helpers."""

import json
from typing import Any

import aiohttp

from ..exceptions import DecodeError
from .types import RegistryConfig


def default_headers(config: RegistryConfig) -> dict[str, str]:
    """Headers sent with every request: JSON accept, user agent and API key."""
    headers = {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    if config.api_key:
        headers["Authorization"] = f"Bearer {config.api_key}"
    return headers


async def create_session(config: RegistryConfig | None = None) -> aiohttp.ClientSession:
    """Create an aiohttp session carrying the client's default headers.

    Args:
        config: Registry configuration (defaults apply when omitted)

    Returns:
        New client session; the caller owns it and must close it
    """
    config = config or RegistryConfig()
    return aiohttp.ClientSession(
        headers=default_headers(config),
        timeout=aiohttp.ClientTimeout(total=config.timeout),
    )


def parse_json_response(body: bytes) -> Any:
    """Decode a JSON response body.

    Args:
        body: Raw response bytes

    Returns:
        Decoded JSON value, or None for an empty body

    Raises:
        DecodeError: If the body is not valid JSON
    """
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON response: {e}") from e
