"""Writer directory use case: search-index fast path, relational source of truth.

Reads prefer the search index for non-empty queries and fall back to the
relational store; writes go to the relational store first and are then
mirrored into the index by a fire-and-forget sync.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from registry.application.dtos.search import (
    IndexFallback,
    IndexHit,
    QueryCursor,
    WriterPage,
)
from registry.application.dtos.writer import WriterFields, WriterResult
from registry.application.services.writer_fields_validator import (
    normalize_writer_fields,
)
from registry.core.constants import DELETE_FAILED, SAVE_FAILED, WRITER_ORDER_COLUMN
from registry.domain.enums import FallbackReason, SearchSource, SyncAction
from registry.domain.exceptions import (
    DataAccessException,
    ResourceNotFoundException,
    WriteFailedException,
)

if TYPE_CHECKING:
    from registry.application.interfaces.repositories import (
        ISearchIndex,
        ISyncDispatcher,
        IWriterRepository,
    )

logger = logging.getLogger(__name__)


class WriterDirectoryService:
    """Browse, search, and edit the writer registry."""

    def __init__(
        self,
        writer_repo: "IWriterRepository",
        search_index: "ISearchIndex",
        sync_dispatcher: "ISyncDispatcher",
    ) -> None:
        self.writer_repo = writer_repo
        self.search_index = search_index
        self.sync_dispatcher = sync_dispatcher

    async def read(self, cursor: QueryCursor) -> WriterPage:
        """Return one page of writers for the cursor.

        Non-empty query: search index first; its hits are used verbatim.
        Empty query or index fallback: relational count + page for the same
        cursor. Relational failures raise DataAccessException.
        """
        query = cursor.normalized_query
        if query:
            outcome = await self.search_index.query(
                query, page=cursor.page - 1, page_size=cursor.page_size
            )
        else:
            outcome = IndexFallback(FallbackReason.EMPTY_QUERY)

        if isinstance(outcome, IndexHit):
            return WriterPage(
                writers=list(outcome.page.hits),
                total_count=outcome.page.total_hits,
                page=cursor.page,
                page_size=cursor.page_size,
                source=SearchSource.INDEX,
            )

        if outcome.reason is not FallbackReason.EMPTY_QUERY:
            logger.info(
                "Search index fallback for query=%r: %s (%s)",
                query,
                outcome.reason.value,
                outcome.detail,
            )
        # Count and page are independent requests; they may disagree under
        # concurrent writes, which is acceptable for display.
        total, writers = await asyncio.gather(
            self.writer_repo.count(query),
            self.writer_repo.page(
                query,
                page=cursor.page,
                page_size=cursor.page_size,
                order_by=WRITER_ORDER_COLUMN,
            ),
        )
        return WriterPage(
            writers=writers,
            total_count=total,
            page=cursor.page,
            page_size=cursor.page_size,
            source=SearchSource.RELATIONAL,
            fallback_reason=None if not query else outcome.reason,
        )

    async def get_writer(self, writer_id: str) -> WriterResult:
        """Return writer by id; raise ResourceNotFoundException if missing."""
        writer = await self.writer_repo.get_by_id(writer_id)
        if writer is None:
            raise ResourceNotFoundException("writer", writer_id)
        return writer

    async def get_edit_form(self, writer_id: str) -> WriterFields:
        """Return the prefilled edit form for a writer."""
        return WriterFields.from_writer(await self.get_writer(writer_id))

    async def create_writer(self, fields: WriterFields) -> WriterResult:
        """Validate, insert, then schedule an index upsert for the new id."""
        record = normalize_writer_fields(fields)
        try:
            created = await self.writer_repo.create(record)
        except DataAccessException as e:
            logger.error("Error creating writer: %s", e.reason)
            raise WriteFailedException(
                SAVE_FAILED, action="create", reason=e.reason
            ) from e
        self.sync_dispatcher.reconcile(SyncAction.UPSERT, created.id)
        return created

    async def update_writer(self, writer_id: str, fields: WriterFields) -> WriterResult:
        """Validate, update, then schedule an index upsert for the writer."""
        record = normalize_writer_fields(fields)
        try:
            updated = await self.writer_repo.update(writer_id, record)
        except DataAccessException as e:
            logger.error("Error updating writer %s: %s", writer_id, e.reason)
            raise WriteFailedException(
                SAVE_FAILED, action="update", resource_id=writer_id, reason=e.reason
            ) from e
        self.sync_dispatcher.reconcile(SyncAction.UPSERT, writer_id)
        return updated

    async def delete_writer(self, writer_id: str) -> None:
        """Delete, then schedule removal of the writer from the index."""
        try:
            await self.writer_repo.delete(writer_id)
        except DataAccessException as e:
            logger.error("Error deleting writer %s: %s", writer_id, e.reason)
            raise WriteFailedException(
                DELETE_FAILED, action="delete", resource_id=writer_id, reason=e.reason
            ) from e
        self.sync_dispatcher.reconcile(SyncAction.DELETE, writer_id)

    async def reindex_all(self) -> int:
        """Rebuild the search index from the relational store."""
        count = await self.sync_dispatcher.reindex_all()
        logger.info("Search index rebuilt: %d writers", count)
        return count
