"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the writer directory use case. Shared
infrastructure (REST client, search index, sync dispatcher) is created once
in the lifespan and stored on app.state; routes depend only on these
dependencies, not on infra directly. Tests replace them through
app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from registry.application.use_cases.writers import WriterDirectoryService
from registry.core.config import get_settings
from registry.infrastructure.persistence.repositories import WriterRepository
from registry.infrastructure.search import AlgoliaSearchIndex, EdgeFunctionSyncDispatcher


def get_writer_repo(request: Request) -> WriterRepository:
    """Writer repository bound to the shared REST client."""
    return WriterRepository(
        request.app.state.supabase, table=get_settings().writers_table
    )


def get_search_index(request: Request) -> AlgoliaSearchIndex:
    return request.app.state.search_index


def get_sync_dispatcher(request: Request) -> EdgeFunctionSyncDispatcher:
    return request.app.state.sync_dispatcher


def get_writer_service(
    writer_repo: Annotated[WriterRepository, Depends(get_writer_repo)],
    search_index: Annotated[AlgoliaSearchIndex, Depends(get_search_index)],
    sync_dispatcher: Annotated[EdgeFunctionSyncDispatcher, Depends(get_sync_dispatcher)],
) -> WriterDirectoryService:
    """Writer directory use case (index-first reads, relational writes + index sync)."""
    return WriterDirectoryService(
        writer_repo=writer_repo,
        search_index=search_index,
        sync_dispatcher=sync_dispatcher,
    )
