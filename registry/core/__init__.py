"""Core: config, constants, exception handlers, and application bootstrap.

Single place for settings and shared constants.
"""

from registry.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
