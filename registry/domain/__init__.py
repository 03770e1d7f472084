"""Domain layer: writer rules, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from registry.domain.enums import FallbackReason, ReadStatus, SearchSource, SyncAction
from registry.domain.exceptions import (
    DataAccessException,
    RegistryException,
    ResourceNotFoundException,
    SyncFailedException,
    ValidationException,
    WriteFailedException,
)

__all__ = [
    # Enums
    "FallbackReason",
    "ReadStatus",
    "SearchSource",
    "SyncAction",
    # Exceptions
    "DataAccessException",
    "RegistryException",
    "ResourceNotFoundException",
    "SyncFailedException",
    "ValidationException",
    "WriteFailedException",
]
