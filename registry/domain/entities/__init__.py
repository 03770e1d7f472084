"""Domain entities and their rules."""

from registry.domain.entities.writer import (
    compose_display_name,
    preferred_identifier,
    split_display_name,
)

__all__ = ["compose_display_name", "preferred_identifier", "split_display_name"]
