"""Ticket models."""

from datetime import datetime
from typing import Any

from pydantic import Field

from assembla_connector.api.models.base import AssemblaModel


class Ticket(AssemblaModel):
    """A ticket within a space.

    ``number`` is the per-space ticket number used in URLs; ``id`` is the
    global identifier.
    """

    id: int = 0
    number: int = 0
    summary: str = ""
    description: str | None = None
    priority: int = 0
    status: str | None = None
    state: int = 0
    milestone_id: int | None = None
    assigned_to_id: str | None = None
    reporter_id: str | None = None
    component_id: int | None = None
    space_id: str | None = None
    estimate: float = 0
    total_estimate: float = 0
    total_invested_hours: float = 0
    importance: float = 0
    tags: list[str] = Field(default_factory=list)
    custom_fields: dict[str, Any] = Field(default_factory=dict)
    completed_date: datetime | None = None
    created_on: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        """Assembla uses state 1 for open tickets and 0 for closed ones."""
        return self.state == 1


class TicketEnvelope(AssemblaModel):
    """Request body wrapper for ticket writes."""

    ticket: Ticket
