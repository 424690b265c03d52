"""File (document) models."""

from datetime import datetime

from assembla_connector.api.models.base import AssemblaModel


class Document(AssemblaModel):
    """A file stored in a space."""

    id: str = ""
    name: str = ""
    filename: str = ""
    content_type: str | None = None
    filesize: int = 0
    description: str | None = None
    version: int = 0
    position: int = 0
    attachable_type: str | None = None
    attachable_id: str | None = None
    ticket_id: int | None = None
    space_id: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def size_readable(self) -> str:
        """Get human-readable file size."""
        if self.filesize < 1024:
            return f"{self.filesize} B"
        elif self.filesize < 1024 * 1024:
            return f"{self.filesize / 1024:.1f} KB"
        else:
            return f"{self.filesize / (1024 * 1024):.1f} MB"


class DocumentEnvelope(AssemblaModel):
    """Request body wrapper for document metadata writes."""

    document: Document
