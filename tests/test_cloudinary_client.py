"""Tests for the Cloudinary list client."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from boards_backend.services.cloudinary_client import (
    CloudinaryClient,
    MalformedResponseError,
    extract_resources,
)


@pytest.fixture
def http():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"resources": []})))
    yield client
    asyncio.run(client.aclose())


class TestListUrls:
    def test_image_and_video_urls(self, http):
        client = CloudinaryClient("demo", http)

        assert client.image_list_url("cars") == "http://res.cloudinary.com/demo/image/list/cars.json"
        assert client.video_list_url("cars") == "http://res.cloudinary.com/demo/video/list/cars.json"

    def test_custom_base_url_trailing_slash(self, http):
        client = CloudinaryClient("acme", http, base_url="https://res.cloudinary.com/")

        assert client.image_list_url("houses") == "https://res.cloudinary.com/acme/image/list/houses.json"

    @pytest.mark.parametrize("cloud_name", [None, ""])
    def test_missing_cloud_name(self, http, cloud_name):
        with pytest.raises(ValueError):
            CloudinaryClient(cloud_name, http)


class TestGetJson:
    @pytest.mark.asyncio
    async def test_decodes_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"resources": [{"public_id": "x"}]}))
        async with httpx.AsyncClient(transport=transport) as http:
            body = await CloudinaryClient("demo", http).get_json("http://res.cloudinary.com/demo/image/list/cars.json")

        assert body == {"resources": [{"public_id": "x"}]}

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await CloudinaryClient("demo", http).get_json("http://res.cloudinary.com/demo/image/list/cars.json")

        assert exc_info.value.response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>Bad gateway</html>"))
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(MalformedResponseError) as exc_info:
                await CloudinaryClient("demo", http).get_json("http://res.cloudinary.com/demo/image/list/cars.json")

        assert "not valid JSON" in str(exc_info.value)


class TestExtractResources:
    def test_passes_resources_through_unmodified(self):
        resources = [{"public_id": "a", "custom": {"nested": [1, 2]}}]

        assert extract_resources("u", {"resources": resources, "updated_at": "x"}) is resources

    @pytest.mark.parametrize("body", [[], "text", None, {"resources": None}, {"other": []}])
    def test_malformed(self, body):
        with pytest.raises(MalformedResponseError) as exc_info:
            extract_resources("http://example/list.json", body)

        assert exc_info.value.url == "http://example/list.json"
        assert isinstance(exc_info.value, ValueError)
