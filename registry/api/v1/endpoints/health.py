"""Health check endpoints. No backend calls; used for liveness and readiness probes."""

from fastapi import APIRouter

from registry.core.config import get_settings
from registry.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check() -> ReadinessResponse:
    """Return ok plus whether the search index path is enabled."""
    return ReadinessResponse(search_index=get_settings().search_index_enabled)
