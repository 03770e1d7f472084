"""Hosted Postgres gateway and edge function client (REST over httpx)."""

from registry.infrastructure.supabase._rest_client import (
    BackendRequestError,
    SupabaseRESTClient,
    TableReference,
)
from registry.infrastructure.supabase.client import build_supabase_client

__all__ = [
    "BackendRequestError",
    "SupabaseRESTClient",
    "TableReference",
    "build_supabase_client",
]
