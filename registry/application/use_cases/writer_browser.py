"""Interactive writer browsing and editing state.

WriterBrowser models the registry page: a debounced search box, a page
number, a loading/resolved/error status and the current result page.
WriterEditor models the create/edit panel on top of it. Both drive
WriterDirectoryService and hold no backend state of their own.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from registry.application.dtos.search import QueryCursor, WriterPage
from registry.application.dtos.writer import WriterFields, WriterResult
from registry.application.services.debounce import Debouncer
from registry.core.config import get_settings
from registry.domain.enums import ReadStatus, SearchSource
from registry.domain.exceptions import (
    DataAccessException,
    ResourceNotFoundException,
    ValidationException,
    WriteFailedException,
)

if TYPE_CHECKING:
    from registry.application.use_cases.writers import WriterDirectoryService

logger = logging.getLogger(__name__)


class WriterBrowser:
    """Search + pagination state for the writer registry.

    Every read gets a sequence number; a response that is not for the most
    recent read is discarded, so a slow earlier query can never overwrite
    the results of a newer one. Page size and debounce window default to
    the configured settings.
    """

    def __init__(
        self,
        service: "WriterDirectoryService",
        page_size: int | None = None,
        debounce_ms: int | None = None,
    ) -> None:
        self.service = service
        settings = get_settings()
        if page_size is None:
            page_size = settings.default_page_size
        if debounce_ms is None:
            debounce_ms = settings.search_debounce_ms
        self.cursor = QueryCursor(page_size=page_size)
        self.search_text = ""
        self.status = ReadStatus.IDLE
        self.result = WriterPage.empty(self.cursor)
        self.error: str | None = None
        self._seq = 0
        self._debouncer: Debouncer[str] = Debouncer(debounce_ms, self.apply_search)

    @property
    def writers(self) -> list[WriterResult]:
        return self.result.writers

    @property
    def total_count(self) -> int:
        return self.result.total_count

    @property
    def total_pages(self) -> int:
        return self.result.total_pages

    @property
    def source(self) -> SearchSource:
        return self.result.source

    @property
    def loading(self) -> bool:
        return self.status is ReadStatus.LOADING

    def type_search(self, text: str) -> None:
        """Record a keystroke; the read is issued once typing pauses."""
        self.search_text = text
        self._debouncer.push(text)

    async def apply_search(self, text: str) -> None:
        """Apply a filter immediately. A changed filter resets to page 1 before reading."""
        if text == self.cursor.query and self.status is not ReadStatus.IDLE:
            return
        self.cursor = self.cursor.with_query(text)
        await self._load()

    async def go_to_page(self, page: int) -> None:
        self.cursor = self.cursor.with_page(page)
        await self._load()

    async def refresh(self) -> None:
        """Re-read the current cursor (e.g. after a save)."""
        await self._load()

    async def settle(self) -> None:
        """Wait for any pending debounced search and its read to finish."""
        await self._debouncer.wait()

    def close(self) -> None:
        """Drop any pending debounced search."""
        self._debouncer.cancel()

    async def _load(self) -> None:
        self._seq += 1
        seq = self._seq
        cursor = self.cursor
        self.status = ReadStatus.LOADING
        try:
            page = await self.service.read(cursor)
        except DataAccessException as e:
            if seq != self._seq:
                return
            # No automatic retry: show the empty state and let the user act.
            logger.error("Error fetching writers: %s", e.reason)
            self.result = WriterPage.empty(cursor, degraded=True)
            self.error = e.message
            self.status = ReadStatus.ERROR
            return
        if seq != self._seq:
            logger.debug("Discarding stale writer page for %r (seq %d < %d)", cursor.query, seq, self._seq)
            return
        self.result = page
        self.error = None
        self.status = ReadStatus.for_source(page.source)


class WriterEditor:
    """Create/edit panel state. Failed saves keep the form so the user can retry."""

    def __init__(
        self,
        service: "WriterDirectoryService",
        browser: WriterBrowser | None = None,
    ) -> None:
        self.service = service
        self.browser = browser
        self.is_open = False
        self.editing: WriterResult | None = None
        self.form = WriterFields()
        self.form_error: str | None = None
        self.saving = False

    def open_create(self) -> None:
        self.editing = None
        self.form = WriterFields()
        self.form_error = None
        self.is_open = True

    def open_edit(self, writer: WriterResult) -> None:
        self.editing = writer
        self.form = WriterFields.from_writer(writer)
        self.form_error = None
        self.is_open = True

    def update_form(self, **changes: str) -> None:
        """Change form fields (first_name, last_name, pro, ipi_number, email)."""
        self.form = dataclasses.replace(self.form, **changes)

    def close(self) -> None:
        self.is_open = False
        self.editing = None

    async def save(self) -> bool:
        """Create or update from the form. Returns False (form kept, error set) on failure."""
        self.saving = True
        self.form_error = None
        try:
            if self.editing is not None:
                await self.service.update_writer(self.editing.id, self.form)
            else:
                await self.service.create_writer(self.form)
        except (ValidationException, WriteFailedException, ResourceNotFoundException) as e:
            self.form_error = e.message
            return False
        finally:
            self.saving = False
        await self._finish()
        return True

    async def delete(self) -> bool:
        """Delete the writer being edited. Returns False (error set) on failure."""
        if self.editing is None:
            return False
        self.saving = True
        self.form_error = None
        try:
            await self.service.delete_writer(self.editing.id)
        except (WriteFailedException, ResourceNotFoundException) as e:
            self.form_error = e.message
            return False
        finally:
            self.saving = False
        await self._finish()
        return True

    async def _finish(self) -> None:
        self.close()
        if self.browser is not None:
            await self.browser.refresh()
