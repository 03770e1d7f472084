"""Writer API schemas."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from registry.domain.enums import SearchSource


class WriterFieldsRequest(BaseModel):
    """Request body for creating or updating a writer.

    first_name is validated by the service (not here) so a blank value gets
    the same "First name is required" error whatever the client.
    """

    first_name: str = Field(default="", max_length=200)
    last_name: str = Field(default="", max_length=200)
    pro: str = Field(default="", max_length=32)
    ipi_number: str = Field(default="", max_length=32)
    email: str = Field(default="", max_length=320)


class WriterFormResponse(WriterFieldsRequest):
    """Edit-form prefill for an existing writer."""

    model_config = ConfigDict(from_attributes=True)


class WriterResponse(BaseModel):
    """Writer response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    first_name: str | None = None
    last_name: str | None = None
    pro: str | None = None
    ipi_number: str | None = None
    cae_number: str | None = None
    email: str | None = None
    created_at: str | None = None
    is_active: bool = True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def identifier(self) -> str | None:
        """IPI number, or CAE number for legacy rows."""
        return self.ipi_number or self.cae_number


class WriterListResponse(BaseModel):
    """One page of writers and where it was read from."""

    items: list[WriterResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    source: SearchSource = Field(..., description="index | relational")
    degraded: bool = Field(
        default=False,
        description="True when the store could not be read and an empty page is shown",
    )


class ProOption(BaseModel):
    """Performing rights organisation choice for the writer form."""

    value: str
    label: str


class ReindexResponse(BaseModel):
    """Result of a full search-index rebuild."""

    count: int
