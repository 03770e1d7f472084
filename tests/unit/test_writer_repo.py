"""WriterRepository tests: table API requests and error mapping over httpx.MockTransport."""

import json

import httpx
import pytest

from registry.application.dtos.writer import WriterRecord
from registry.domain.exceptions import DataAccessException, ResourceNotFoundException
from registry.infrastructure.persistence.repositories import WriterRepository
from registry.infrastructure.supabase._rest_client import (
    SupabaseRESTClient,
    _parse_content_range_total,
)

_BASE = "https://project.backend.test"
_ROW = {
    "id": "w1",
    "name": "John Smith",
    "first_name": "John",
    "last_name": "Smith",
    "pro": "BMI",
    "ipi_number": "00012345678",
    "cae_number": None,
    "email": "john@example.com",
    "created_at": "2024-01-01T00:00:00Z",
    "is_active": True,
}


class _Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)


def _repo(recorder: _Recorder) -> WriterRepository:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    client = SupabaseRESTClient(_BASE, "anon-key", http_client=http)
    return WriterRepository(client, table="writers")


async def test_page_filters_orders_and_ranges() -> None:
    recorder = _Recorder(httpx.Response(200, json=[_ROW]))

    writers = await _repo(recorder).page("John", page=3, page_size=50)

    assert [w.id for w in writers] == ["w1"]
    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/writers"
    params = request.url.params
    assert params["name"] == "ilike.%John%"
    assert params["order"] == "name.asc"
    assert params["offset"] == "100"
    assert params["limit"] == "50"
    assert "ipi_number" in params["select"]
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["Authorization"] == "Bearer anon-key"


async def test_page_without_query_has_no_filter() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))

    assert await _repo(recorder).page("", page=1, page_size=50) == []
    params = recorder.requests[0].url.params
    assert "name" not in params
    assert params["offset"] == "0"


async def test_page_escapes_like_wildcards() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))

    await _repo(recorder).page("100%", page=1, page_size=10)

    assert recorder.requests[0].url.params["name"] == "ilike.%100\\%%"


async def test_count_uses_exact_count_head_request() -> None:
    recorder = _Recorder(httpx.Response(200, headers={"Content-Range": "0-49/1234"}))

    total = await _repo(recorder).count("john")

    assert total == 1234
    request = recorder.requests[0]
    assert request.method == "HEAD"
    assert request.headers["Prefer"] == "count=exact"
    assert request.url.params["name"] == "ilike.%john%"
    assert "order" not in request.url.params


@pytest.mark.parametrize(
    ("header", "expected"),
    [("0-49/1234", 1234), ("*/0", 0), ("0-9/*", 0), (None, 0)],
)
def test_parse_content_range_total(header: str | None, expected: int) -> None:
    assert _parse_content_range_total(header) == expected


async def test_backend_error_becomes_data_access_exception() -> None:
    recorder = _Recorder(httpx.Response(500, json={"message": "statement timeout"}))

    with pytest.raises(DataAccessException) as exc_info:
        await _repo(recorder).page("john")

    assert exc_info.value.details == {
        "operation": "page",
        "reason": "statement timeout",
        "status_code": 500,
    }


async def test_transport_error_becomes_data_access_exception() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    repo = WriterRepository(SupabaseRESTClient(_BASE, "anon-key", http_client=http))

    with pytest.raises(DataAccessException) as exc_info:
        await repo.count("")

    assert "status_code" not in exc_info.value.details


async def test_get_by_id_missing_returns_none() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))

    assert await _repo(recorder).get_by_id("nope") is None
    assert recorder.requests[0].url.params["id"] == "eq.nope"


async def test_create_posts_row_and_returns_stored_writer() -> None:
    recorder = _Recorder(httpx.Response(201, json=[_ROW]))
    record = WriterRecord(
        name="John Smith",
        first_name="John",
        last_name="Smith",
        pro="BMI",
        ipi_number="00012345678",
        email="john@example.com",
    )

    created = await _repo(recorder).create(record)

    assert created.id == "w1"
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.headers["Prefer"] == "return=representation"
    assert json.loads(request.content) == record.to_row()


async def test_update_matches_id() -> None:
    recorder = _Recorder(httpx.Response(200, json=[{**_ROW, "last_name": "Smythe"}]))
    record = WriterRecord("John Smythe", "John", "Smythe", None, None, None)

    updated = await _repo(recorder).update("w1", record)

    assert updated.last_name == "Smythe"
    request = recorder.requests[0]
    assert request.method == "PATCH"
    assert request.url.params["id"] == "eq.w1"


async def test_update_with_no_matching_row_raises_not_found() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))
    record = WriterRecord("X", "X", None, None, None, None)

    with pytest.raises(ResourceNotFoundException):
        await _repo(recorder).update("gone", record)


async def test_delete_matches_id() -> None:
    recorder = _Recorder(httpx.Response(200, json=[{"id": "w1"}]))

    await _repo(recorder).delete("w1")

    request = recorder.requests[0]
    assert request.method == "DELETE"
    assert request.url.params["id"] == "eq.w1"


async def test_delete_with_no_matching_row_raises_not_found() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))

    with pytest.raises(ResourceNotFoundException):
        await _repo(recorder).delete("gone")


async def test_page_does_not_forward_star_wildcard() -> None:
    recorder = _Recorder(httpx.Response(200, json=[]))

    await _repo(recorder).page("a*z", page=1, page_size=10)

    assert recorder.requests[0].url.params["name"] == "ilike.%a_z%"
