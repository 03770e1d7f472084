"""Search index accessor and index sync dispatcher."""

from registry.infrastructure.search.algolia_index import AlgoliaSearchIndex
from registry.infrastructure.search.sync_dispatcher import EdgeFunctionSyncDispatcher

__all__ = ["AlgoliaSearchIndex", "EdgeFunctionSyncDispatcher"]
