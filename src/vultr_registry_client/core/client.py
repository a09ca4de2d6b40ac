"""Async HTTP transport for the container registry API."""

import asyncio
import logging
import time
from typing import Any, Optional, Sequence

import aiohttp

from ..exceptions import (
    APIError,
    DecodeError,
    NotFoundError,
    RequestConstructionError,
    TransportError,
)
from .session import create_session, default_headers, parse_json_response
from .types import RegistryConfig, Request, Response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})
RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})
IDEMPOTENT_METHODS = frozenset({"GET", "PUT", "DELETE"})


def _serialize_body(body: Any) -> Any:
    if body is None or isinstance(body, dict):
        return body
    to_dict = getattr(body, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise RequestConstructionError(
        f"Unsupported request body type: {type(body).__name__}"
    )


def _error_message(reason: Optional[str], body: bytes) -> tuple[str, Any]:
    try:
        data = parse_json_response(body)
    except DecodeError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"]), data
    text = body.decode("utf-8", errors="replace").strip()
    return text or reason or "Unknown error", data


class Client:
    """Async client that builds and sends API requests.

    The client owns a single aiohttp session. Use it as an async context
    manager, or call close() when done. Handlers keep a reference to the
    client and never mutate it, so one client can serve many tasks.
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Registry configuration (defaults apply when omitted)
            session: Existing aiohttp session to reuse; the caller keeps
                ownership and must close it
        """
        self.config = config or RegistryConfig()
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "Client":
        """Enter async context manager."""
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client session if this client created it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
        if self._owns_session:
            self.session = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            if not self._owns_session:
                raise TransportError("Client session is closed")
            self.session = await create_session(self.config)
        return self.session

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Sequence[tuple[str, str]]] = None,
    ) -> Request:
        """Build a request for an API path.

        Args:
            method: HTTP method
            path: Absolute API path (e.g., "/v2/registry")
            body: Request payload; dataclasses are serialized with to_dict()
            query: Query parameter pairs

        Returns:
            Request ready to pass to do()

        Raises:
            RequestConstructionError: If method, path or body are invalid
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise RequestConstructionError(f"Unsupported HTTP method: {method}")
        if not path.startswith("/") or "?" in path:
            raise RequestConstructionError(f"Invalid API path: {path!r}")

        return Request(
            method=method,
            path=path,
            url=f"{self.config.base_url}{path}",
            query=tuple(query or ()),
            json=_serialize_body(body),
        )

    async def do(self, request: Request, raw: bool = False) -> Response:
        """Send a request and return the successful response.

        GET, PUT and DELETE are retried on 429/5xx responses and connection
        errors with exponential backoff, up to config.max_retries times.
        POST, PATCH and OPTIONS are only retried on 429.

        Args:
            request: Request built by new_request()
            raw: Skip JSON decoding of the body

        Returns:
            Response with the raw body and, unless raw, the decoded JSON

        Raises:
            TransportError: If the API cannot be reached
            NotFoundError: If the API answers 404
            APIError: If the API answers with any other non-2xx status
            DecodeError: If the body is not valid JSON
        """
        session = await self._get_session()
        headers = default_headers(self.config)
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        idempotent = request.method in IDEMPOTENT_METHODS
        attempt = 0

        while True:
            logger.debug(
                "%s %s query=%s attempt=%d",
                request.method,
                request.path,
                list(request.query),
                attempt,
            )
            started = time.monotonic()
            try:
                async with session.request(
                    request.method,
                    request.url,
                    params=request.query or None,
                    json=request.json,
                    headers=headers,
                    timeout=timeout,
                ) as resp:
                    body = await resp.read()
                    status = resp.status
                    reason = resp.reason
                    resp_headers = dict(resp.headers)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if idempotent and attempt < self.config.max_retries:
                    logger.warning(
                        "%s %s failed (%s), retrying (%d/%d)",
                        request.method,
                        request.path,
                        e,
                        attempt + 1,
                        self.config.max_retries,
                    )
                    await asyncio.sleep(self._backoff(attempt))
                    attempt += 1
                    continue
                raise TransportError(
                    f"{request.method} {request.path} failed: {e}"
                ) from e

            logger.debug(
                "%s %s -> %d in %.3fs",
                request.method,
                request.path,
                status,
                time.monotonic() - started,
            )

            if self._should_retry(status, idempotent, attempt):
                logger.warning(
                    "%s %s returned %d, retrying (%d/%d)",
                    request.method,
                    request.path,
                    status,
                    attempt + 1,
                    self.config.max_retries,
                )
                await asyncio.sleep(self._backoff(attempt))
                attempt += 1
                continue

            if not 200 <= status < 300:
                message, data = _error_message(reason, body)
                error_cls = NotFoundError if status == 404 else APIError
                raise error_cls(status, message, data)

            data = None if raw else parse_json_response(body)
            return Response(status=status, headers=resp_headers, body=body, data=data)

    def _should_retry(self, status: int, idempotent: bool, attempt: int) -> bool:
        if attempt >= self.config.max_retries:
            return False
        if status == 429:
            return True
        return idempotent and status in RETRY_STATUSES

    def _backoff(self, attempt: int) -> float:
        return min(self.config.retry_wait * 2**attempt, self.config.retry_max_wait)
