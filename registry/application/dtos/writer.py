"""DTOs for writer use cases (no dependency on transport or HTTP schemas)."""

from dataclasses import dataclass
from typing import Any

from registry.domain.entities import preferred_identifier, split_display_name


@dataclass(frozen=True)
class WriterResult:
    """Writer read-model (relational row or search-index hit)."""

    id: str
    name: str
    first_name: str | None
    last_name: str | None
    pro: str | None
    ipi_number: str | None
    cae_number: str | None
    email: str | None
    created_at: str | None
    is_active: bool = True

    @property
    def identifier(self) -> str | None:
        return preferred_identifier(self.ipi_number, self.cae_number)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "WriterResult":
        """Build from a relational row (columns in WRITER_COLUMNS)."""
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            pro=row.get("pro"),
            ipi_number=row.get("ipi_number"),
            cae_number=row.get("cae_number"),
            email=row.get("email"),
            created_at=row.get("created_at"),
            is_active=row.get("is_active", True) is not False,
        )

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> "WriterResult":
        """Build from a search-index hit (objectID is the writer id)."""
        return cls(
            id=str(hit["objectID"]),
            name=hit.get("name") or "",
            first_name=hit.get("first_name"),
            last_name=hit.get("last_name"),
            pro=hit.get("pro"),
            ipi_number=hit.get("ipi_number"),
            cae_number=None,
            email=hit.get("email"),
            created_at=hit.get("created_at"),
        )


@dataclass(frozen=True)
class WriterFields:
    """Raw writer form input (create or update). Normalized by WriterFieldsValidator."""

    first_name: str = ""
    last_name: str = ""
    pro: str = ""
    ipi_number: str = ""
    email: str = ""

    @classmethod
    def from_writer(cls, writer: WriterResult) -> "WriterFields":
        """Prefill for editing: split legacy display names, fall back to CAE number."""
        first_name = writer.first_name or ""
        last_name = writer.last_name or ""
        if not first_name and not last_name and writer.name:
            first_name, last_name = split_display_name(writer.name)
        return cls(
            first_name=first_name,
            last_name=last_name,
            pro=writer.pro or "",
            ipi_number=writer.identifier or "",
            email=writer.email or "",
        )


@dataclass(frozen=True)
class WriterRecord:
    """Normalized column values written to the writers table."""

    name: str
    first_name: str | None
    last_name: str | None
    pro: str | None
    ipi_number: str | None
    email: str | None

    def to_row(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "pro": self.pro,
            "ipi_number": self.ipi_number,
            "email": self.email,
        }
