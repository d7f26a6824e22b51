"""Shared fixtures: a recording fake of Cloudinary's list endpoints."""

from __future__ import annotations

from typing import Callable, Dict, List

import httpx
import pytest

BASE = "http://res.cloudinary.com"


def list_url(cloud_name: str, media_type: str, board_name: str) -> str:
    return f"{BASE}/{cloud_name}/{media_type}/list/{board_name}.json"


def resources_body(*public_ids: str) -> dict:
    return {
        "resources": [
            {"public_id": pid, "version": 1700000000, "format": "jpg", "type": "upload"}
            for pid in public_ids
        ],
        "updated_at": "2024-01-01T00:00:00Z",
    }


class FakeCloudinary:
    """Routes list requests to canned bodies and records every requested URL in order.

    A route value may be a dict (JSON body, 200), an int (empty body with that
    status), a str (raw text body, 200), an exception instance (raised by the
    transport) or any other JSON value.
    """

    def __init__(self, routes: Dict[str, object] | None = None):
        self.routes: Dict[str, object] = dict(routes or {})
        self.calls: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        if url not in self.routes:
            return httpx.Response(404, json={"error": {"message": "Resource not found"}})
        result = self.routes[url]
        if isinstance(result, Exception):
            raise result
        if isinstance(result, str):
            return httpx.Response(200, text=result)
        if isinstance(result, int):
            return httpx.Response(result)
        return httpx.Response(200, json=result)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_cloudinary() -> FakeCloudinary:
    return FakeCloudinary()


@pytest.fixture
def demo_routes() -> Callable[..., Dict[str, object]]:
    """Builds routes for the given boards in cloud 'demo': images <board>-img-N, videos <board>-vid-N."""

    def _build(*boards: str, cloud_name: str = "demo") -> Dict[str, object]:
        routes: Dict[str, object] = {}
        for board in boards:
            routes[list_url(cloud_name, "image", board)] = resources_body(f"{board}-img-1", f"{board}-img-2")
            routes[list_url(cloud_name, "video", board)] = resources_body(f"{board}-vid-1")
        return routes

    return _build
