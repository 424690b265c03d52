"""Tag models."""

from datetime import datetime

from assembla_connector.api.models.base import AssemblaModel


class Tag(AssemblaModel):
    """A ticket tag defined on a space."""

    id: int = 0
    name: str = ""
    space_id: str | None = None
    # 1 = proposed, 2 = active, 4 = hidden
    state: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TagEnvelope(AssemblaModel):
    """Request body wrapper for tag writes."""

    tag: Tag
