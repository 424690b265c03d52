"""Space (project) models."""

from datetime import datetime

from assembla_connector.api.models.base import AssemblaModel


class Space(AssemblaModel):
    """An Assembla space."""

    id: str = ""
    name: str = ""
    wiki_name: str = ""
    description: str | None = None
    public_permissions: int = 0
    team_permissions: int = 0
    watcher_permissions: int = 0
    is_volunteer: bool = False
    is_commercial: bool = False
    status: int = 0
    parent_id: str | None = None
    default_showpage: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
