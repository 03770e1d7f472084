"""Repository and gateway interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from registry.application.dtos.search import IndexOutcome, SearchHitsPage
    from registry.application.dtos.writer import WriterRecord, WriterResult
    from registry.domain.enums import SyncAction


class IWriterRepository(Protocol):
    """Protocol for the authoritative writer store (relational accessor).

    Failures raise DataAccessException; missing ids on update/delete raise
    ResourceNotFoundException.
    """

    async def count(self, query: str = "") -> int:
        """Return number of writers whose name contains query (case-insensitive)."""

    async def page(
        self,
        query: str = "",
        page: int = 1,
        page_size: int = 50,
        order_by: str = "name",
    ) -> list[WriterResult]:
        """Return one name-ordered page (1-based) of writers matching query."""

    async def get_by_id(self, writer_id: str) -> WriterResult | None:
        """Return writer by id, or None."""

    async def create(self, record: WriterRecord) -> WriterResult:
        """Insert a writer and return the stored row (with its new id)."""

    async def update(self, writer_id: str, record: WriterRecord) -> WriterResult:
        """Update writer columns and return the stored row."""

    async def delete(self, writer_id: str) -> None:
        """Delete writer by id."""


class ISearchIndex(Protocol):
    """Protocol for the managed search index (read-only, search-scoped key)."""

    @property
    def is_configured(self) -> bool:
        """True if the index can be queried at all."""

    async def query(self, text: str, page: int = 0, page_size: int = 50) -> IndexOutcome:
        """Search (0-based page). Never raises; failures come back as IndexFallback."""

    async def search(
        self, text: str, page: int = 0, page_size: int = 50
    ) -> SearchHitsPage | None:
        """Sentinel form of query(): hits page, or None when the index did not serve."""


class ISyncDispatcher(Protocol):
    """Protocol for propagating relational writes into the search index."""

    def reconcile(self, action: SyncAction, writer_id: str) -> None:
        """Fire-and-forget: schedule index reconciliation for one writer (upsert or delete)."""

    async def reindex_all(self) -> int:
        """Rebuild the whole index from the relational store; return records indexed."""
