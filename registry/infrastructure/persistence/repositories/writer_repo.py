"""Writer repository over the hosted table REST API (authoritative store)."""

from __future__ import annotations

import logging

from registry.application.dtos.writer import WriterRecord, WriterResult
from registry.core.constants import WRITER_COLUMNS, WRITER_ORDER_COLUMN
from registry.domain.exceptions import DataAccessException, ResourceNotFoundException
from registry.infrastructure.supabase._rest_client import (
    BackendRequestError,
    SupabaseRESTClient,
    _TableQuery,
)
from registry.shared.utils.sanitization import contains_pattern

logger = logging.getLogger(__name__)


class WriterRepository:
    """Count, page, and mutate writers. Backend errors become DataAccessException."""

    def __init__(self, client: SupabaseRESTClient, table: str = "writers") -> None:
        self.client = client
        self.table = client.table(table)

    def _filtered(self, query: str, columns: tuple[str, ...] = WRITER_COLUMNS) -> _TableQuery:
        q = self.table.select(*columns)
        if query and query.strip():
            q = q.ilike("name", contains_pattern(query))
        return q

    async def count(self, query: str = "") -> int:
        """Number of writers whose name contains query (case-insensitive)."""
        try:
            return await self._filtered(query, ("id",)).count()
        except BackendRequestError as e:
            raise DataAccessException("count", e.message, e.status_code) from e

    async def page(
        self,
        query: str = "",
        page: int = 1,
        page_size: int = 50,
        order_by: str = WRITER_ORDER_COLUMN,
    ) -> list[WriterResult]:
        """One page (1-based) of writers ordered ascending by order_by."""
        start = (max(page, 1) - 1) * page_size
        try:
            rows = await (
                self._filtered(query)
                .order(order_by, ascending=True)
                .range(start, start + page_size - 1)
                .execute()
            )
        except BackendRequestError as e:
            raise DataAccessException("page", e.message, e.status_code) from e
        return [WriterResult.from_row(row) for row in rows]

    async def get_by_id(self, writer_id: str) -> WriterResult | None:
        try:
            rows = await self.table.select(*WRITER_COLUMNS).eq("id", writer_id).execute()
        except BackendRequestError as e:
            raise DataAccessException("get", e.message, e.status_code) from e
        return WriterResult.from_row(rows[0]) if rows else None

    async def create(self, record: WriterRecord) -> WriterResult:
        try:
            row = await self.table.insert(
                record.to_row(), returning=",".join(WRITER_COLUMNS)
            )
        except BackendRequestError as e:
            raise DataAccessException("create", e.message, e.status_code) from e
        created = WriterResult.from_row(row)
        logger.info("Writer created: %s", created.id)
        return created

    async def update(self, writer_id: str, record: WriterRecord) -> WriterResult:
        try:
            rows = await self.table.update(
                record.to_row(),
                match={"id": writer_id},
                returning=",".join(WRITER_COLUMNS),
            )
        except BackendRequestError as e:
            raise DataAccessException("update", e.message, e.status_code) from e
        if not rows:
            raise ResourceNotFoundException("writer", writer_id)
        logger.info("Writer updated: %s", writer_id)
        return WriterResult.from_row(rows[0])

    async def delete(self, writer_id: str) -> None:
        try:
            rows = await self.table.delete(match={"id": writer_id})
        except BackendRequestError as e:
            raise DataAccessException("delete", e.message, e.status_code) from e
        if not rows:
            raise ResourceNotFoundException("writer", writer_id)
        logger.info("Writer deleted: %s", writer_id)
