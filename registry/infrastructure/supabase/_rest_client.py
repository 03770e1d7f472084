"""Thin REST client for the hosted Postgres gateway and edge functions.

Talks to the auto-generated table API (``/rest/v1``) and the edge function
endpoint (``/functions/v1``) directly with httpx instead of pulling in an SDK.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Transport and non-2xx failures are raised as BackendRequestError.
"""

from __future__ import annotations

from typing import Any

import httpx


class BackendRequestError(Exception):
    """Raised for transport failures (status_code None) and non-2xx responses."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(resp: httpx.Response) -> str:
    """Best-effort error text from a gateway response body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


async def _request_async(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    headers: dict[str, str],
    params: list[tuple[str, str]] | None = None,
    body: Any = None,
) -> httpx.Response:
    """Perform an HTTP request; raise BackendRequestError on any failure."""
    try:
        resp = await client.request(method, url, headers=headers, params=params, json=body)
    except httpx.HTTPError as e:
        raise BackendRequestError(f"{type(e).__name__}: {e}") from e
    if not resp.is_success:
        raise BackendRequestError(_error_message(resp), status_code=resp.status_code)
    return resp


def _parse_content_range_total(value: str | None) -> int:
    """Total from a Content-Range header such as ``0-49/1234`` or ``*/0``."""
    if not value or "/" not in value:
        return 0
    total = value.rsplit("/", 1)[1].strip()
    return int(total) if total.isdigit() else 0


class _TableQuery:
    """Fluent read query builder: filter / order / range on server, then execute() or count()."""

    def __init__(self, table: "TableReference", columns: str) -> None:
        self._table = table
        self._columns = columns
        self._filters: list[tuple[str, str]] = []
        self._order: str | None = None
        self._offset: int | None = None
        self._limit: int | None = None

    def eq(self, column: str, value: Any) -> "_TableQuery":
        self._filters.append((column, f"eq.{value}"))
        return self

    def ilike(self, column: str, pattern: str) -> "_TableQuery":
        """Case-insensitive LIKE; caller supplies wildcards (%) and escaping."""
        self._filters.append((column, f"ilike.{pattern}"))
        return self

    def order(self, column: str, ascending: bool = True) -> "_TableQuery":
        self._order = f"{column}.{'asc' if ascending else 'desc'}"
        return self

    def range(self, start: int, end: int) -> "_TableQuery":
        """Inclusive row range, 0-based (start=0, end=49 is the first 50 rows)."""
        self._offset = start
        self._limit = max(end - start + 1, 0)
        return self

    def _params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = [("select", self._columns)]
        params.extend(self._filters)
        if self._order is not None:
            params.append(("order", self._order))
        if self._offset is not None:
            params.append(("offset", str(self._offset)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        return params

    async def execute(self) -> list[dict[str, Any]]:
        """Run the query and return rows."""
        resp = await self._table._client.request(
            "GET", self._table.url, params=self._params()
        )
        data = resp.json() if resp.content else []
        return data if isinstance(data, list) else [data]

    async def count(self) -> int:
        """Exact row count for the filters (HEAD request; no rows transferred)."""
        params = [("select", self._columns), *self._filters]
        resp = await self._table._client.request(
            "HEAD",
            self._table.url,
            params=params,
            extra_headers={"Prefer": "count=exact"},
        )
        return _parse_content_range_total(resp.headers.get("content-range"))


class TableReference:
    """Reference to a table exposed by the gateway."""

    def __init__(self, client: "SupabaseRESTClient", name: str) -> None:
        self._client = client
        self.name = name
        self.url = f"{client.rest_url}/{name}"

    def select(self, *columns: str) -> _TableQuery:
        return _TableQuery(self, ",".join(columns) if columns else "*")

    async def insert(
        self, row: dict[str, Any], *, returning: str = "*"
    ) -> dict[str, Any]:
        """Insert one row and return it as stored."""
        resp = await self._client.request(
            "POST",
            self.url,
            params=[("select", returning)],
            body=row,
            extra_headers={"Prefer": "return=representation"},
        )
        rows = resp.json()
        if isinstance(rows, list):
            if not rows:
                raise BackendRequestError("Insert returned no row", resp.status_code)
            return rows[0]
        return rows

    async def update(
        self, row: dict[str, Any], *, match: dict[str, Any], returning: str = "*"
    ) -> list[dict[str, Any]]:
        """Update rows matching all match columns; return updated rows (empty = none matched)."""
        params = [("select", returning)]
        params.extend((k, f"eq.{v}") for k, v in match.items())
        resp = await self._client.request(
            "PATCH",
            self.url,
            params=params,
            body=row,
            extra_headers={"Prefer": "return=representation"},
        )
        return resp.json() if resp.content else []

    async def delete(self, *, match: dict[str, Any]) -> list[dict[str, Any]]:
        """Delete rows matching all match columns; return deleted rows (empty = none matched)."""
        params = [("select", "id")]
        params.extend((k, f"eq.{v}") for k, v in match.items())
        resp = await self._client.request(
            "DELETE",
            self.url,
            params=params,
            extra_headers={"Prefer": "return=representation"},
        )
        return resp.json() if resp.content else []


class SupabaseRESTClient:
    """Lightweight client for the table REST API and edge functions."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        base = base_url.rstrip("/")
        self.rest_url = f"{base}/rest/v1"
        self.functions_url = f"{base}/functions/v1"
        self._api_key = api_key
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: list[tuple[str, str]] | None = None,
        body: Any = None,
        extra_headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await _request_async(
            self._http,
            method,
            url,
            headers=self._headers(extra_headers),
            params=params,
            body=body,
        )

    def table(self, name: str) -> TableReference:
        return TableReference(self, name)

    async def invoke_function(self, name: str, body: dict[str, Any]) -> dict[str, Any]:
        """Invoke an edge function with a JSON body; return its JSON response (or {})."""
        resp = await self.request("POST", f"{self.functions_url}/{name}", body=body)
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {"data": data}
