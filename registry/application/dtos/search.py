"""DTOs for writer search and browsing (no dependency on transport)."""

import math
from dataclasses import dataclass, field, replace

from registry.application.dtos.writer import WriterResult
from registry.domain.enums import FallbackReason, SearchSource


@dataclass(frozen=True)
class QueryCursor:
    """Which slice of the name-ordered writer set to materialize.

    page is 1-based; query is free text (empty = browse everything).
    """

    query: str = ""
    page: int = 1
    page_size: int = 50

    @property
    def normalized_query(self) -> str:
        return self.query.strip()

    def with_query(self, query: str) -> "QueryCursor":
        """New cursor for a different query; always back on page 1."""
        return replace(self, query=query, page=1)

    def with_page(self, page: int) -> "QueryCursor":
        return replace(self, page=max(page, 1))


@dataclass(frozen=True)
class SearchHitsPage:
    """One page of search-index hits mapped to writer results."""

    hits: list[WriterResult]
    total_hits: int


@dataclass(frozen=True)
class IndexHit:
    """Search index served the read."""

    page: SearchHitsPage


@dataclass(frozen=True)
class IndexFallback:
    """Search index did not serve the read; the relational path must."""

    reason: FallbackReason
    detail: str | None = None


IndexOutcome = IndexHit | IndexFallback


@dataclass(frozen=True)
class WriterPage:
    """A resolved page of writers plus where it came from."""

    writers: list[WriterResult]
    total_count: int
    page: int
    page_size: int
    source: SearchSource
    fallback_reason: FallbackReason | None = None
    degraded: bool = field(default=False)

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @classmethod
    def empty(cls, cursor: QueryCursor, *, degraded: bool = False) -> "WriterPage":
        """Empty relational page (initial state or degraded read)."""
        return cls(
            writers=[],
            total_count=0,
            page=cursor.page,
            page_size=cursor.page_size,
            source=SearchSource.RELATIONAL,
            degraded=degraded,
        )
