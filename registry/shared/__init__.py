"""Cross-cutting helpers: logging setup and query sanitization."""
