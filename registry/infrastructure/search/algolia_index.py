"""Search index accessor over the hosted search REST API (search-only key).

The index is an optimization for free-text lookup, not a listing mechanism
and not a source of truth. Every failure is soft: it is logged and returned
as an IndexFallback so the caller can serve the same request from the
relational store.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from registry.application.dtos.search import (
    IndexFallback,
    IndexHit,
    IndexOutcome,
    SearchHitsPage,
)
from registry.application.dtos.writer import WriterResult
from registry.core.constants import INDEX_ATTRIBUTES
from registry.domain.enums import FallbackReason

logger = logging.getLogger(__name__)


class AlgoliaSearchIndex:
    """Query one index. Read scope only: this credential cannot write or delete."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        app_id: str,
        search_key: str | None,
        index_name: str,
        attributes: tuple[str, ...] = INDEX_ATTRIBUTES,
    ) -> None:
        self._http = http_client
        self._app_id = app_id
        self._search_key = search_key
        self.index_name = index_name
        self._attributes = list(attributes)
        # Hostnames are case-insensitive; httpx normalizes them to lowercase.
        self.url = f"https://{app_id.lower()}-dsn.algolia.net/1/indexes/{index_name}/query"

    @property
    def is_configured(self) -> bool:
        return bool(self._app_id and self._search_key)

    def _headers(self) -> dict[str, str]:
        return {
            "X-Algolia-API-Key": self._search_key or "",
            "X-Algolia-Application-Id": self._app_id,
            "Content-Type": "application/json",
        }

    async def query(self, text: str, page: int = 0, page_size: int = 50) -> IndexOutcome:
        """Search with a 0-based page. Never raises."""
        if not text or not text.strip():
            return IndexFallback(FallbackReason.EMPTY_QUERY)
        if not self.is_configured:
            logger.warning("Search key not configured, falling back to relational store")
            return IndexFallback(FallbackReason.NOT_CONFIGURED)

        body = {
            "query": text,
            "page": max(page, 0),
            "hitsPerPage": page_size,
            "attributesToRetrieve": self._attributes,
        }
        try:
            resp = await self._http.post(self.url, headers=self._headers(), json=body)
        except httpx.HTTPError as e:
            logger.warning("Search index request failed: %s", e)
            return IndexFallback(FallbackReason.TRANSPORT_ERROR, str(e))
        if not resp.is_success:
            logger.warning("Search index returned %s for %r", resp.status_code, text)
            return IndexFallback(FallbackReason.HTTP_ERROR, f"status {resp.status_code}")

        try:
            return IndexHit(self._parse(resp.json()))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Search index response malformed: %s", e)
            return IndexFallback(FallbackReason.MALFORMED_RESPONSE, str(e))

    async def search(
        self, text: str, page: int = 0, page_size: int = 50
    ) -> SearchHitsPage | None:
        """Hits page, or None when the index did not serve the request."""
        outcome = await self.query(text, page=page, page_size=page_size)
        return outcome.page if isinstance(outcome, IndexHit) else None

    @staticmethod
    def _parse(data: dict[str, Any]) -> SearchHitsPage:
        # nbPages is ignored; page count is derived from nbHits and the page size.
        hits = [WriterResult.from_hit(hit) for hit in data["hits"]]
        return SearchHitsPage(
            hits=hits,
            total_hits=int(data["nbHits"]),
        )
