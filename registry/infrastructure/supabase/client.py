"""Backend client construction.

Built once per application in the lifespan and injected into repositories
and the sync dispatcher (no module-level singleton), so tests can pass a
client backed by httpx.MockTransport or replace the accessors entirely.
"""

import logging

import httpx

from registry.core.config import Settings
from registry.infrastructure.supabase._rest_client import SupabaseRESTClient

logger = logging.getLogger(__name__)


def build_supabase_client(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> SupabaseRESTClient:
    """Return a REST client for the configured project.

    Args:
        settings: Loaded settings (supabase_url and supabase_key are required there).
        http_client: Shared AsyncClient; when omitted the client owns its own.

    Returns:
        SupabaseRESTClient bound to settings.supabase_url.
    """
    client = SupabaseRESTClient(
        settings.supabase_url,
        settings.supabase_key.get_secret_value(),
        http_client=http_client,
        timeout=settings.http_timeout_seconds,
    )
    logger.info("Backend REST client configured for %s", client.rest_url)
    return client
