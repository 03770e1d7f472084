"""Writer domain rules.

A writer (composer / interested party) is identified by a stable opaque id
assigned by the backend. Its display name is always derived from the
structured name parts; these helpers hold that rule for both the create
and edit paths.
"""


def compose_display_name(first_name: str | None, last_name: str | None) -> str:
    """Join non-empty first and last name with a single space."""
    parts = [p.strip() for p in (first_name, last_name) if p and p.strip()]
    return " ".join(parts)


def split_display_name(name: str | None) -> tuple[str, str]:
    """Split a display name into (first, rest) on whitespace.

    Used to prefill the edit form for legacy rows that only carry ``name``.
    """
    tokens = (name or "").split()
    if not tokens:
        return "", ""
    return tokens[0], " ".join(tokens[1:])


def preferred_identifier(ipi_number: str | None, cae_number: str | None) -> str | None:
    """IPI number, falling back to the legacy CAE number."""
    return ipi_number or cae_number or None
