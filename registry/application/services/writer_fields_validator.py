"""Writer form validation and normalization.

Turns raw form input into the column values stored in the writers table.
Runs before any backend call so an invalid form never reaches the store.
"""

from registry.application.dtos.writer import WriterFields, WriterRecord
from registry.core.constants import FIRST_NAME_REQUIRED
from registry.domain.entities import compose_display_name
from registry.domain.exceptions import ValidationException


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def normalize_writer_fields(fields: WriterFields) -> WriterRecord:
    """Validate form input and return normalized column values.

    First name is required (after trimming). Blank optional values become
    None; the display name is recomputed from first + last name.

    Raises:
        ValidationException: If the first name is missing.
    """
    first_name = (fields.first_name or "").strip()
    last_name = (fields.last_name or "").strip()
    if not first_name:
        raise ValidationException(FIRST_NAME_REQUIRED, field="first_name")
    return WriterRecord(
        name=compose_display_name(first_name, last_name),
        first_name=first_name,
        last_name=last_name or None,
        pro=_blank_to_none(fields.pro),
        ipi_number=_blank_to_none(fields.ipi_number),
        email=_blank_to_none(fields.email),
    )
