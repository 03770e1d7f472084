"""Application use cases: writer directory (read/write facade) and browsing state."""

from registry.application.use_cases.writer_browser import WriterBrowser, WriterEditor
from registry.application.use_cases.writers import WriterDirectoryService

__all__ = ["WriterBrowser", "WriterDirectoryService", "WriterEditor"]
