"""WriterBrowser / WriterEditor state tests (debounce, page reset, sequencing, form retention)."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from registry.application.dtos.search import QueryCursor, WriterPage
from registry.application.use_cases.writer_browser import WriterBrowser, WriterEditor
from registry.application.use_cases.writers import WriterDirectoryService
from registry.domain.enums import ReadStatus, SearchSource, SyncAction
from registry.domain.exceptions import DataAccessException
from tests.factories import make_writer


def _page(cursor: QueryCursor, *writers, source: SearchSource = SearchSource.RELATIONAL) -> WriterPage:
    return WriterPage(
        writers=list(writers),
        total_count=len(writers),
        page=cursor.page,
        page_size=cursor.page_size,
        source=source,
    )


@pytest.fixture
def service() -> AsyncMock:
    svc = AsyncMock(spec=WriterDirectoryService)
    svc.read = AsyncMock(side_effect=lambda cursor: _page(cursor))
    return svc


class TestBrowser:
    async def test_initial_state_is_idle(self, service) -> None:
        browser = WriterBrowser(service)

        assert browser.status is ReadStatus.IDLE
        assert browser.writers == []
        service.read.assert_not_awaited()

    async def test_resolved_status_follows_source(self, service) -> None:
        hit = make_writer("a")
        service.read = AsyncMock(side_effect=lambda c: _page(c, hit, source=SearchSource.INDEX))
        browser = WriterBrowser(service)

        await browser.apply_search("john")

        assert browser.status is ReadStatus.RESOLVED_FROM_INDEX
        assert browser.source is SearchSource.INDEX
        assert browser.writers == [hit]

    async def test_filter_change_resets_page_before_read(self, service) -> None:
        browser = WriterBrowser(service, page_size=50)
        await browser.apply_search("")
        await browser.go_to_page(4)
        assert service.read.await_args.args[0].page == 4

        await browser.apply_search("john")

        cursor = service.read.await_args.args[0]
        assert cursor.query == "john"
        assert cursor.page == 1
        assert browser.cursor.page == 1

    async def test_same_filter_does_not_reread(self, service) -> None:
        browser = WriterBrowser(service)
        await browser.apply_search("john")
        await browser.go_to_page(2)

        await browser.apply_search("john")

        assert service.read.await_count == 2
        assert browser.cursor.page == 2

    async def test_rapid_typing_triggers_one_read_with_last_value(self, service) -> None:
        browser = WriterBrowser(service, debounce_ms=60)

        for text in ("j", "jo", "joh", "john"):
            browser.type_search(text)
            await asyncio.sleep(0.005)
        await browser.settle()

        service.read.assert_awaited_once()
        assert service.read.await_args.args[0].query == "john"
        assert browser.search_text == "john"

    async def test_stale_response_does_not_overwrite_newer_one(self, service) -> None:
        release_slow = asyncio.Event()
        slow_writer = make_writer("slow", "Jo Slow")
        fast_writer = make_writer("fast", "John Fast")

        async def read(cursor: QueryCursor) -> WriterPage:
            if cursor.query == "jo":
                await release_slow.wait()
                return _page(cursor, slow_writer)
            return _page(cursor, fast_writer)

        service.read = AsyncMock(side_effect=read)
        browser = WriterBrowser(service)

        slow = asyncio.create_task(browser.apply_search("jo"))
        await asyncio.sleep(0)
        await browser.apply_search("john")
        release_slow.set()
        await slow

        assert browser.writers == [fast_writer]
        assert browser.cursor.query == "john"
        assert browser.status is ReadStatus.RESOLVED_FROM_RELATIONAL

    async def test_read_failure_shows_empty_degraded_state_without_retry(self, service) -> None:
        service.read = AsyncMock(side_effect=DataAccessException("page", "connection reset"))
        browser = WriterBrowser(service)

        await browser.apply_search("")

        assert browser.status is ReadStatus.ERROR
        assert browser.writers == []
        assert browser.total_count == 0
        assert browser.result.degraded is True
        assert browser.error is not None
        service.read.assert_awaited_once()

    async def test_close_drops_pending_search(self, service) -> None:
        browser = WriterBrowser(service, debounce_ms=20)
        browser.type_search("john")

        browser.close()
        await asyncio.sleep(0.05)

        service.read.assert_not_awaited()


@pytest.fixture
def editor_env(writer_repo, search_index, sync_dispatcher):
    """Real WriterDirectoryService over mocked ports, plus browser and editor."""
    svc = WriterDirectoryService(writer_repo, search_index, sync_dispatcher)
    browser = WriterBrowser(svc)
    editor = WriterEditor(svc, browser)
    return editor, browser, writer_repo, sync_dispatcher


class TestEditor:
    async def test_missing_first_name_keeps_form_and_never_syncs(self, editor_env) -> None:
        editor, _, writer_repo, sync_dispatcher = editor_env
        editor.open_create()
        editor.update_form(first_name="   ", last_name="Smith", email="smith@example.com")

        ok = await editor.save()

        assert ok is False
        assert editor.form_error == "First name is required"
        assert editor.is_open is True
        assert editor.form.last_name == "Smith"
        assert editor.form.email == "smith@example.com"
        writer_repo.create.assert_not_awaited()
        assert sync_dispatcher.reconcile.call_count == 0

    async def test_backend_failure_keeps_form_for_retry(self, editor_env) -> None:
        editor, _, writer_repo, sync_dispatcher = editor_env
        writer_repo.update = AsyncMock(side_effect=DataAccessException("update", "boom", 500))
        editor.open_edit(make_writer("w1"))
        editor.update_form(last_name="Smythe")

        ok = await editor.save()

        assert ok is False
        assert editor.form_error == "Failed to save writer"
        assert editor.form.last_name == "Smythe"
        assert editor.editing is not None
        assert editor.saving is False
        sync_dispatcher.reconcile.assert_not_called()

    async def test_successful_save_closes_panel_and_refreshes(self, editor_env) -> None:
        editor, browser, writer_repo, sync_dispatcher = editor_env
        writer_repo.create = AsyncMock(return_value=make_writer("new"))
        editor.open_create()
        editor.update_form(first_name="Jane", last_name="Doe")

        ok = await editor.save()

        assert ok is True
        assert editor.is_open is False
        assert editor.form_error is None
        sync_dispatcher.reconcile.assert_called_once_with(SyncAction.UPSERT, "new")
        writer_repo.page.assert_awaited_once()
        assert browser.status is ReadStatus.RESOLVED_FROM_RELATIONAL

    async def test_open_edit_prefills_from_legacy_name(self, editor_env) -> None:
        editor, *_ = editor_env

        editor.open_edit(make_writer("w1", name="Prince", first_name=None, last_name=None))

        assert editor.form.first_name == "Prince"
        assert editor.form.last_name == ""

    async def test_delete_dispatches_and_closes(self, editor_env) -> None:
        editor, _, writer_repo, sync_dispatcher = editor_env
        editor.open_edit(make_writer("w1"))

        ok = await editor.delete()

        assert ok is True
        writer_repo.delete.assert_awaited_once_with("w1")
        sync_dispatcher.reconcile.assert_called_once_with(SyncAction.DELETE, "w1")
        assert editor.is_open is False

    async def test_delete_without_selection_is_noop(self, editor_env) -> None:
        editor, _, writer_repo, _ = editor_env
        editor.open_create()

        assert await editor.delete() is False
        writer_repo.delete.assert_not_awaited()

    async def test_delete_retry_clears_previous_error(self, editor_env) -> None:
        editor, _, writer_repo, _ = editor_env
        writer_repo.delete = AsyncMock(
            side_effect=[DataAccessException("delete", "timeout"), None]
        )
        editor.open_edit(make_writer("w1"))

        assert await editor.delete() is False
        assert editor.form_error == "Failed to delete writer"

        assert await editor.delete() is True
        assert editor.form_error is None
