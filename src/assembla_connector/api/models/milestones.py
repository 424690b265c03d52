"""Milestone models."""

from datetime import date, datetime

from assembla_connector.api.models.base import AssemblaModel


class Milestone(AssemblaModel):
    """A milestone within a space."""

    id: int = 0
    title: str = ""
    description: str | None = None
    due_date: date | None = None
    is_completed: bool = False
    completed_date: date | None = None
    planner_type: int = 0
    release_level: int = 0
    release_notes: str | None = None
    space_id: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MilestoneEnvelope(AssemblaModel):
    """Request body wrapper for milestone writes."""

    milestone: Milestone
