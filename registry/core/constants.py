"""Shared constants for the writer registry."""

# Columns read from the writers table (relational path).
WRITER_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "first_name",
    "last_name",
    "pro",
    "ipi_number",
    "cae_number",
    "email",
    "created_at",
    "is_active",
)

# Attributes requested from the search index (index path). The index
# projection carries no cae_number or is_active.
INDEX_ATTRIBUTES: tuple[str, ...] = (
    "objectID",
    "name",
    "first_name",
    "last_name",
    "pro",
    "ipi_number",
    "email",
    "created_at",
)

WRITER_ORDER_COLUMN = "name"

# Performing rights organisations offered in the writer form ("" = not specified).
PRO_OPTIONS: tuple[tuple[str, str], ...] = (
    ("", "Not specified"),
    ("ASCAP", "ASCAP"),
    ("BMI", "BMI"),
    ("SESAC", "SESAC"),
    ("GMR", "GMR"),
    ("SOCAN", "SOCAN"),
    ("PRS", "PRS"),
    ("APRA", "APRA"),
    ("GEMA", "GEMA"),
    ("SACEM", "SACEM"),
    ("NS", "NS (Not Specified)"),
)

FIRST_NAME_REQUIRED = "First name is required"
SAVE_FAILED = "Failed to save writer"
DELETE_FAILED = "Failed to delete writer"
