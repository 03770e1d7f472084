"""Domain enumerations for the rights registry.

Enums represent fixed sets of domain values (read source, sync action,
browser status, index fallback reason).
"""

from enum import Enum


class SearchSource(str, Enum):
    """Where a page of writers was read from."""

    INDEX = "index"
    RELATIONAL = "relational"


class SyncAction(str, Enum):
    """Actions understood by the index sync edge function."""

    UPSERT = "upsert"
    DELETE = "delete"
    FULL_SYNC = "full_sync"


class ReadStatus(str, Enum):
    """Lifecycle of a single read in the writer browser.

    idle -> loading -> resolved_from_index | resolved_from_relational | error
    """

    IDLE = "idle"
    LOADING = "loading"
    RESOLVED_FROM_INDEX = "resolved_from_index"
    RESOLVED_FROM_RELATIONAL = "resolved_from_relational"
    ERROR = "error"

    @classmethod
    def for_source(cls, source: SearchSource) -> "ReadStatus":
        """Return the resolved status matching a read source."""
        if source is SearchSource.INDEX:
            return cls.RESOLVED_FROM_INDEX
        return cls.RESOLVED_FROM_RELATIONAL


class FallbackReason(str, Enum):
    """Why the search index did not serve a read."""

    EMPTY_QUERY = "empty_query"
    NOT_CONFIGURED = "not_configured"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
