"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (shared HTTP client, backend
REST client, search index, index sync dispatcher).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from registry.core.config import get_settings
from registry.infrastructure.search import AlgoliaSearchIndex, EdgeFunctionSyncDispatcher
from registry.infrastructure.supabase import build_supabase_client
from registry.shared.telemetry import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, one shared httpx client, backend REST client, search
    index accessor, sync dispatcher (all on app.state). Shutdown: wait for
    in-flight index syncs, then close the HTTP client.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # Shared HTTP client for every outbound call (connection reuse).
    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    app.state.http_client = http_client
    app.state.supabase = build_supabase_client(settings, http_client)
    app.state.search_index = AlgoliaSearchIndex(
        http_client,
        app_id=settings.algolia_app_id,
        search_key=(
            settings.algolia_search_key.get_secret_value()
            if settings.algolia_search_key
            else None
        ),
        index_name=settings.algolia_writers_index,
    )
    app.state.sync_dispatcher = EdgeFunctionSyncDispatcher(
        app.state.supabase, function_name=settings.writers_sync_function
    )
    if not settings.search_index_enabled:
        logger.warning("Search index not configured; writer search uses the relational store only")

    yield

    # ---- Shutdown ----
    dispatcher = getattr(app.state, "sync_dispatcher", None)
    if dispatcher is not None and dispatcher.pending:
        logger.info("Waiting for %d index sync task(s)", dispatcher.pending)
        await dispatcher.drain()

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")
