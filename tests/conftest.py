"""Pytest configuration and fixtures for the rights registry.

Required settings are provided through the environment before
registry.main is imported (it builds the app at import time). Backend ports
are replaced with mocks; wire-level tests build their own clients on
httpx.MockTransport.
"""

import os

os.environ.setdefault("SUPABASE_URL", "https://project.backend.test")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from registry.api.v1.dependencies import get_writer_service  # noqa: E402
from registry.application.dtos.search import IndexFallback  # noqa: E402
from registry.application.use_cases.writers import WriterDirectoryService  # noqa: E402
from registry.domain.enums import FallbackReason  # noqa: E402
from registry.main import app  # noqa: E402


@pytest.fixture
def writer_repo() -> AsyncMock:
    """Relational accessor mock: empty store by default."""
    repo = AsyncMock()
    repo.count = AsyncMock(return_value=0)
    repo.page = AsyncMock(return_value=[])
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def search_index() -> AsyncMock:
    """Search index mock: falls back (HTTP error) unless a test sets query()."""
    index = AsyncMock()
    index.is_configured = True
    index.query = AsyncMock(
        return_value=IndexFallback(FallbackReason.HTTP_ERROR, "status 500")
    )
    return index


@pytest.fixture
def sync_dispatcher() -> MagicMock:
    """Sync dispatcher mock: reconcile() is synchronous fire-and-forget."""
    dispatcher = MagicMock()
    dispatcher.reconcile = MagicMock(return_value=None)
    dispatcher.reindex_all = AsyncMock(return_value=0)
    return dispatcher


@pytest.fixture
def writer_service(
    writer_repo: AsyncMock, search_index: AsyncMock, sync_dispatcher: MagicMock
) -> WriterDirectoryService:
    return WriterDirectoryService(
        writer_repo=writer_repo,
        search_index=search_index,
        sync_dispatcher=sync_dispatcher,
    )


@pytest.fixture
async def client(writer_service: WriterDirectoryService) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with mocked backend ports."""
    app.dependency_overrides[get_writer_service] = lambda: writer_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
