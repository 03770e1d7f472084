"""Index sync dispatcher: mirrors relational writes into the search index.

Reconciliation is delegated to an edge function that reads the writer from
the relational store with elevated credentials and upserts or deletes the
index record. Per-writer calls are fire-and-forget: they never block or fail
the write that triggered them, and failures are only logged.
"""

from __future__ import annotations

import asyncio
import logging

from registry.domain.enums import SyncAction
from registry.domain.exceptions import SyncFailedException
from registry.infrastructure.supabase._rest_client import (
    BackendRequestError,
    SupabaseRESTClient,
)

logger = logging.getLogger(__name__)


class EdgeFunctionSyncDispatcher:
    """Invoke the sync function as detached asyncio tasks.

    Strong references to in-flight tasks are kept until they finish so they
    are not garbage-collected mid-call; drain() awaits them on shutdown.
    """

    def __init__(
        self,
        client: SupabaseRESTClient,
        function_name: str = "sync-writers-algolia",
        id_field: str = "writer_id",
    ) -> None:
        self.client = client
        self.function_name = function_name
        self.id_field = id_field
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def reconcile(self, action: SyncAction, writer_id: str) -> None:
        """Schedule reconciliation of one writer and return immediately."""
        if action is SyncAction.FULL_SYNC:
            raise ValueError("full_sync is not a per-writer action; use reindex_all()")
        task = asyncio.get_running_loop().create_task(
            self._invoke(action, writer_id),
            name=f"index-sync:{action.value}:{writer_id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _invoke(self, action: SyncAction, writer_id: str) -> None:
        body = {"action": action.value, self.id_field: writer_id}
        try:
            await self.client.invoke_function(self.function_name, body)
        except BackendRequestError as e:
            logger.warning(
                "Index sync failed (non-blocking): action=%s %s=%s status=%s error=%s",
                action.value,
                self.id_field,
                writer_id,
                e.status_code,
                e.message,
            )
            return
        except Exception:
            logger.warning(
                "Index sync failed (non-blocking): action=%s %s=%s",
                action.value,
                self.id_field,
                writer_id,
                exc_info=True,
            )
            return
        logger.debug("Index sync done: action=%s %s=%s", action.value, self.id_field, writer_id)

    async def reindex_all(self) -> int:
        """Run a full index rebuild and wait for it. Returns the count the function reports."""
        try:
            data = await self.client.invoke_function(
                self.function_name, {"action": SyncAction.FULL_SYNC.value}
            )
        except BackendRequestError as e:
            raise SyncFailedException(SyncAction.FULL_SYNC.value, e.message) from e
        if data.get("success") is False:
            raise SyncFailedException(
                SyncAction.FULL_SYNC.value, str(data.get("error") or "unknown error")
            )
        return int(data.get("count") or 0)

    async def drain(self) -> None:
        """Wait for all in-flight reconciliations to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
