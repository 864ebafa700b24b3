"""
Tests for the PostgREST origin client.
"""

import json

import httpx
import pytest

from article_cache.errors import OriginError
from article_cache.repositories import PostgrestOriginRepository

BASE_URL = "http://origin.test/rest/v1"


def make_repo(handler) -> PostgrestOriginRepository:
    return PostgrestOriginRepository(
        base_url=BASE_URL,
        api_key="anon-key",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_select_all_sends_auth_headers():
    """Queries carry the key as apikey and bearer token."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}])

    repo = make_repo(handler)
    rows = await repo.select_all("articles")
    await repo.close()

    assert rows == [{"id": 1}]
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/articles"
    assert request.url.params["select"] == "*"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["authorization"] == "Bearer anon-key"


@pytest.mark.asyncio
async def test_select_by_id_filters_on_id():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 5, "title": "E"}])

    repo = make_repo(handler)
    row = await repo.select_by_id("articles", 5)

    assert row == {"id": 5, "title": "E"}
    assert seen[0].url.params["id"] == "eq.5"


@pytest.mark.asyncio
async def test_select_by_id_no_rows_is_none():
    repo = make_repo(lambda request: httpx.Response(200, json=[]))
    assert await repo.select_by_id("articles", 99) is None


@pytest.mark.asyncio
async def test_insert_requests_representation():
    """Inserts ask PostgREST to return the stored row."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = json.loads(request.content)
        return httpx.Response(201, json=[{"id": 3, **body[0]}])

    repo = make_repo(handler)
    rows = await repo.insert("articles", {"title": "C", "content": "third"})

    assert rows == [{"id": 3, "title": "C", "content": "third"}]
    assert seen[0].method == "POST"
    assert seen[0].headers["prefer"] == "return=representation"


@pytest.mark.asyncio
async def test_error_status_raises_with_payload():
    """PostgREST error objects are carried on the exception."""
    payload = {"message": "permission denied for table articles", "code": "42501", "details": None, "hint": None}
    repo = make_repo(lambda request: httpx.Response(401, json=payload))

    with pytest.raises(OriginError) as exc_info:
        await repo.select_all("articles")

    assert exc_info.value.message == "permission denied for table articles"
    assert exc_info.value.details == payload
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_error_status_without_json_body():
    repo = make_repo(lambda request: httpx.Response(503, text="upstream unavailable"))

    with pytest.raises(OriginError) as exc_info:
        await repo.select_all("articles")

    assert exc_info.value.details == {"message": "upstream unavailable"}


@pytest.mark.asyncio
async def test_transport_error_raises_origin_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    repo = make_repo(handler)

    with pytest.raises(OriginError) as exc_info:
        await repo.select_all("articles")
    assert "connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_non_json_success_body_raises():
    repo = make_repo(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(OriginError):
        await repo.select_all("articles")


@pytest.mark.asyncio
async def test_empty_success_body_is_empty_list():
    repo = make_repo(lambda request: httpx.Response(201))
    assert await repo.insert("articles", {"title": "C"}) == []


@pytest.mark.asyncio
async def test_select_by_id_invalid_id_is_none():
    """An id rejected by the column type matches no row."""
    payload = {"message": 'invalid input syntax for type bigint: "abc"', "code": "22P02", "details": None, "hint": None}
    repo = make_repo(lambda request: httpx.Response(400, json=payload))

    assert await repo.select_by_id("articles", "abc") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, code",
    [(500, "22P02"), (400, "42703")],
)
async def test_select_by_id_other_errors_raise(status_code, code):
    """Server errors and other client errors still surface."""
    repo = make_repo(lambda request: httpx.Response(status_code, json={"message": "boom", "code": code}))

    with pytest.raises(OriginError) as exc_info:
        await repo.select_by_id("articles", "abc")
    assert exc_info.value.status_code == status_code
