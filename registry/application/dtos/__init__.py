"""Application DTOs (read-models and inputs passed between layers)."""

from registry.application.dtos.search import (
    IndexFallback,
    IndexHit,
    IndexOutcome,
    QueryCursor,
    SearchHitsPage,
    WriterPage,
)
from registry.application.dtos.writer import WriterFields, WriterRecord, WriterResult

__all__ = [
    "IndexFallback",
    "IndexHit",
    "IndexOutcome",
    "QueryCursor",
    "SearchHitsPage",
    "WriterFields",
    "WriterPage",
    "WriterRecord",
    "WriterResult",
]
