"""Input sanitization helpers for backend queries."""


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards (backslash, % and _) so value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_pattern(value: str) -> str:
    """Gateway ILIKE pattern matching value anywhere (``%value%``).

    SQL wildcards are escaped. The gateway also reads ``*`` as ``%`` and has
    no escape for it, so a literal ``*`` is sent as ``_`` (exactly one
    character) instead of matching any run of characters.
    """
    return f"%{escape_like(value.strip()).replace('*', '_')}%"
