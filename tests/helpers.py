"""Fake container registry API for tests."""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from aiohttp import web


@dataclass
class RecordedRequest:
    """A request received by the fake API."""

    method: str
    path: str
    query: list[tuple[str, str]]
    headers: dict[str, str]
    body: bytes
    json: Any = None


@dataclass
class CannedResponse:
    status: int = 200
    json: Any = None
    body: Optional[bytes] = None
    content_type: str = "application/json"


@dataclass
class FakeRegistryAPI:
    """Serves canned responses keyed by (method, path) and records requests.

    Responses queued for the same route are returned in order; the last one
    keeps being returned once the queue is down to a single entry.
    """

    url: str = ""
    requests: list[RecordedRequest] = field(default_factory=list)
    routes: dict[tuple[str, str], list[CannedResponse]] = field(default_factory=dict)

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        body: Optional[bytes] = None,
        content_type: str = "application/json",
    ) -> None:
        """Queue a response for a route."""
        self.routes.setdefault((method.upper(), path), []).append(
            CannedResponse(status=status, json=json, body=body, content_type=content_type)
        )

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        try:
            payload = json.loads(body) if body else None
        except json.JSONDecodeError:
            payload = None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=list(request.query.items()),
                headers=dict(request.headers),
                body=body,
                json=payload,
            )
        )

        queue = self.routes.get((request.method, request.path))
        if not queue:
            return web.json_response(
                {"error": f"no route for {request.method} {request.path}", "status": 404},
                status=404,
            )
        canned = queue.pop(0) if len(queue) > 1 else queue[0]

        if canned.body is not None:
            return web.Response(
                status=canned.status,
                body=canned.body,
                content_type=canned.content_type,
            )
        if canned.json is None:
            return web.Response(status=canned.status)
        return web.json_response(canned.json, status=canned.status)

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handle)
        return app


def registry_json(registry_id: str = "abc123", name: str = "myregistry") -> dict:
    """Build a registry object as returned by the API."""
    return {
        "id": registry_id,
        "name": name,
        "urn": f"vcr.example.com/{name}",
        "storage": {
            "used": {
                "bytes": 0,
                "mb": 0,
                "gb": 0,
                "tb": 0,
                "updated_at": "2024-01-01 00:00:00",
            },
            "allowed": {
                "bytes": 21474836480,
                "mb": 20480,
                "gb": 20,
                "tb": 0.02,
                "updated_at": "2024-01-01 00:00:00",
            },
        },
        "date_created": "2024-01-01 00:00:00",
        "public": False,
        "root_user": {
            "id": 1,
            "username": "root",
            "password": "secret",
            "root": True,
            "added_at": "2024-01-01 00:00:00",
            "updated_at": "2024-01-01 00:00:00",
        },
    }


def repository_json(name: str = "myregistry/app", image: str = "app") -> dict:
    """Build a repository object as returned by the API."""
    return {
        "name": name,
        "image": image,
        "description": "",
        "added_at": "2024-01-01 00:00:00",
        "updated_at": "2024-01-02 00:00:00",
        "pull_count": 3,
        "artifact_count": 1,
    }


def region_json(region_id: int = 1, name: str = "sjc") -> dict:
    """Build a region object as returned by the API."""
    return {
        "id": region_id,
        "name": name,
        "urn": f"{name}.vultrcr.com",
        "base_url": f"https://{name}.vultrcr.com",
        "public": True,
        "added_at": "2023-01-01 00:00:00",
        "updated_at": "2023-01-01 00:00:00",
    }


def meta_json(total: int, next_cursor: str = "", prev_cursor: str = "") -> dict:
    """Build a pagination meta object as returned by the API."""
    return {"total": total, "links": {"next": next_cursor, "prev": prev_cursor}}
