"""Shared utilities."""

from registry.shared.utils.sanitization import contains_pattern, escape_like

__all__ = ["contains_pattern", "escape_like"]
