"""HTTP-level tests for the FAAS service routes."""

from __future__ import annotations

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_root_returns_identity(async_client: AsyncClient) -> None:
    response = await async_client.get("/")

    assert response.status_code == 200
    assert response.text == "FAAS Service Running on L1NE Infrastructure"


@pytest.mark.asyncio
async def test_health_endpoint(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"] == {"database": "ok", "memory": "ok", "disk": "ok"}
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_status_endpoint(async_client: AsyncClient) -> None:
    await async_client.get("/health")
    response = await async_client.get("/api/status")

    assert response.status_code == 200
    assert response.json() == {
        "service": "faas-service",
        "version": "1.0.0",
        "instance_id": "test-instance",
        "port": 9090,
        "uptime": "0d 0h 0m",
        "request_count": 1,
    }


@pytest.mark.asyncio
async def test_put_get_delete_roundtrip(async_client: AsyncClient) -> None:
    created = await async_client.post("/api/data", json={"name": "a"})
    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Data stored successfully"
    key = body["key"]

    fetched = await async_client.get(f"/api/data/{key}")
    assert fetched.status_code == 200
    assert fetched.json() == {"name": "a"}

    deleted = await async_client.delete(f"/api/data/{key}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = await async_client.get(f"/api/data/{key}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Data not found"


@pytest.mark.asyncio
async def test_delete_missing_key_returns_404(async_client: AsyncClient) -> None:
    response = await async_client.delete("/api/data/does-not-exist")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_pagination_returns_stable_slice(async_client: AsyncClient) -> None:
    keys = []
    for name in ("first", "second", "third"):
        response = await async_client.post("/api/data", json={"name": name})
        keys.append(response.json()["key"])

    response = await async_client.get("/api/data", params={"limit": 2, "offset": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["limit"] == 2
    assert body["offset"] == 1
    assert body["data"] == [
        {"key": keys[1], "value": {"name": "second"}},
        {"key": keys[2], "value": {"name": "third"}},
    ]


@pytest.mark.asyncio
async def test_list_defaults_and_empty_pages(async_client: AsyncClient) -> None:
    for i in range(12):
        await async_client.post("/api/data", json={"i": i})

    default_page = (await async_client.get("/api/data")).json()
    assert default_page["limit"] == 10
    assert default_page["offset"] == 0
    assert len(default_page["data"]) == 10
    assert default_page["total"] == 12

    beyond = (await async_client.get("/api/data", params={"offset": 50})).json()
    assert beyond["data"] == []
    assert beyond["total"] == 12

    zero = (await async_client.get("/api/data", params={"limit": 0})).json()
    assert zero["data"] == []
    assert zero["total"] == 12


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"limit": -1}, {"offset": -5}, {"limit": "ten"}])
async def test_invalid_pagination_rejected(async_client: AsyncClient, params: dict) -> None:
    response = await async_client.get("/api/data", params=params)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_malformed_body_rejected(async_client: AsyncClient) -> None:
    response = await async_client.post(
        "/api/data",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/data", "/api/echo"])
@pytest.mark.parametrize(
    "content,content_type",
    [
        (b"hello", "text/plain"),
        (b'{"x": 1}', "text/plain"),
        (b'{"x": 1}', None),
        (b"\xff\xfe", "application/octet-stream"),
    ],
)
async def test_non_json_content_type_rejected(
    async_client: AsyncClient, path: str, content: bytes, content_type: str | None
) -> None:
    headers = {"content-type": content_type} if content_type else {}
    response = await async_client.post(path, content=content, headers=headers)

    assert response.status_code == 415
    assert (await async_client.get("/api/data")).json()["total"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/data", "/api/echo"])
@pytest.mark.parametrize(
    "content",
    [
        b"{not json",
        b"",
        b"\xff\xfe",
        b'{"x": NaN}',
        b'{"x": Infinity}',
        b"[-Infinity]",
        b'{"x": 1e999}',
    ],
)
async def test_malformed_or_non_finite_json_rejected(
    async_client: AsyncClient, path: str, content: bytes
) -> None:
    response = await async_client.post(path, content=content, headers={"content-type": "application/json"})

    assert response.status_code == 422
    assert (await async_client.get("/api/data")).json()["total"] == 0


@pytest.mark.asyncio
async def test_json_null_is_a_valid_document(async_client: AsyncClient) -> None:
    headers = {"content-type": "application/json"}
    created = await async_client.post("/api/data", content=b"null", headers=headers)
    assert created.status_code == 201
    key = created.json()["key"]

    fetched = await async_client.get(f"/api/data/{key}")
    assert fetched.status_code == 200
    assert fetched.json() is None

    listing = (await async_client.get("/api/data")).json()
    assert listing["data"] == [{"key": key, "value": None}]

    echoed = await async_client.post("/api/echo", content=b"null", headers=headers)
    assert echoed.status_code == 200
    assert echoed.json()["echo"] is None


@pytest.mark.asyncio
async def test_json_media_type_variants_accepted(async_client: AsyncClient) -> None:
    for content_type in ("application/json; charset=utf-8", "application/vnd.api+json"):
        response = await async_client.post(
            "/api/data", content=b'{"v": 1}', headers={"content-type": content_type}
        )
        assert response.status_code == 201


@pytest.mark.asyncio
async def test_single_key_and_listing_render_values_alike(async_client: AsyncClient) -> None:
    document = {"price": 1.5, "tags": ["a", "b"], "big": 12345678901234567890, "none": None}
    key = (await async_client.post("/api/data", json=document)).json()["key"]

    fetched = (await async_client.get(f"/api/data/{key}")).json()
    listed = (await async_client.get("/api/data")).json()["data"][0]["value"]
    assert fetched == listed == document


@pytest.mark.asyncio
async def test_arbitrary_json_documents_are_stored(async_client: AsyncClient) -> None:
    document = {"nested": {"list": [1, 2.5, "three", None, True]}, "empty": {}}
    key = (await async_client.post("/api/data", json=document)).json()["key"]

    assert (await async_client.get(f"/api/data/{key}")).json() == document

    scalar_key = (await async_client.post("/api/data", json=[1, 2, 3])).json()["key"]
    assert (await async_client.get(f"/api/data/{scalar_key}")).json() == [1, 2, 3]


@pytest.mark.asyncio
async def test_echo_reflects_body(async_client: AsyncClient) -> None:
    response = await async_client.post("/api/echo", json={"x": 1})

    assert response.status_code == 200
    body = response.json()
    assert body["echo"] == {"x": 1}
    assert body["instance"] == "test-instance"
    assert "timestamp" in body
