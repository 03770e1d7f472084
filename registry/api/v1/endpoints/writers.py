"""Writer registry API: thin routes delegating to WriterDirectoryService."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from registry.api.v1.dependencies import get_writer_service
from registry.application.dtos.search import QueryCursor, WriterPage
from registry.application.dtos.writer import WriterFields
from registry.application.use_cases.writers import WriterDirectoryService
from registry.core.config import get_settings
from registry.core.constants import PRO_OPTIONS
from registry.domain.exceptions import DataAccessException
from registry.schemas.writer import (
    ProOption,
    ReindexResponse,
    WriterFieldsRequest,
    WriterFormResponse,
    WriterListResponse,
    WriterResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _list_response(page: WriterPage) -> WriterListResponse:
    return WriterListResponse(
        items=[WriterResponse.model_validate(w) for w in page.writers],
        total_count=page.total_count,
        page=page.page,
        page_size=page.page_size,
        total_pages=page.total_pages,
        source=page.source,
        degraded=page.degraded,
    )


def _fields(body: WriterFieldsRequest) -> WriterFields:
    return WriterFields(**body.model_dump())


@router.get("", response_model=WriterListResponse)
async def list_writers(
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
    q: str = Query("", max_length=200, description="Free-text filter on writer name"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(
        None, ge=1, description="Defaults to DEFAULT_PAGE_SIZE; at most MAX_PAGE_SIZE"
    ),
):
    """Browse (empty q) or search writers. Search uses the index when it is available."""
    settings = get_settings()
    if page_size is not None and page_size > settings.max_page_size:
        raise HTTPException(
            status_code=422,
            detail=f"page_size must be at most {settings.max_page_size}",
        )
    cursor = QueryCursor(
        query=q,
        page=page,
        page_size=page_size or settings.default_page_size,
    )
    try:
        result = await writer_svc.read(cursor)
    except DataAccessException as e:
        # Degrade to an empty page; the client decides whether to retry.
        logger.error("Error fetching writers: %s", e.reason)
        result = WriterPage.empty(cursor, degraded=True)
    return _list_response(result)


@router.get("/pro-options", response_model=list[ProOption])
def list_pro_options() -> list[ProOption]:
    """Performing rights organisations offered in the writer form."""
    return [ProOption(value=value, label=label) for value, label in PRO_OPTIONS]


@router.post("/reindex", response_model=ReindexResponse)
async def reindex_writers(
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
):
    """Rebuild the search index from the relational store."""
    count = await writer_svc.reindex_all()
    return ReindexResponse(count=count)


@router.post("", response_model=WriterResponse, status_code=201)
async def create_writer(
    body: WriterFieldsRequest,
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
):
    """Create a writer; the search index is updated in the background."""
    created = await writer_svc.create_writer(_fields(body))
    return WriterResponse.model_validate(created)


@router.get("/{writer_id}", response_model=WriterResponse)
async def get_writer(
    writer_id: str,
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
):
    writer = await writer_svc.get_writer(writer_id)
    return WriterResponse.model_validate(writer)


@router.get("/{writer_id}/form", response_model=WriterFormResponse)
async def get_writer_form(
    writer_id: str,
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
):
    """Edit-form prefill (name split for legacy rows, CAE fallback for IPI)."""
    form = await writer_svc.get_edit_form(writer_id)
    return WriterFormResponse.model_validate(form)


@router.patch("/{writer_id}", response_model=WriterResponse)
async def update_writer(
    writer_id: str,
    body: WriterFieldsRequest,
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
):
    """Replace a writer's editable fields; the search index is updated in the background."""
    updated = await writer_svc.update_writer(writer_id, _fields(body))
    return WriterResponse.model_validate(updated)


@router.delete("/{writer_id}", status_code=204)
async def delete_writer(
    writer_id: str,
    writer_svc: Annotated[WriterDirectoryService, Depends(get_writer_service)],
) -> Response:
    await writer_svc.delete_writer(writer_id)
    return Response(status_code=204)
