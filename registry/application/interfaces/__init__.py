"""Application ports (protocols implemented by infrastructure)."""

from registry.application.interfaces.repositories import (
    ISearchIndex,
    ISyncDispatcher,
    IWriterRepository,
)

__all__ = ["ISearchIndex", "ISyncDispatcher", "IWriterRepository"]
