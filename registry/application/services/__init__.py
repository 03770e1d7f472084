"""Application services: debounce, writer form validation."""

from registry.application.services.debounce import Debouncer
from registry.application.services.writer_fields_validator import (
    normalize_writer_fields,
)

__all__ = ["Debouncer", "normalize_writer_fields"]
