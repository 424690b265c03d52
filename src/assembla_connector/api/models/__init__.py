"""Re-export all models."""

from assembla_connector.api.models.base import AssemblaModel
from assembla_connector.api.models.documents import Document, DocumentEnvelope
from assembla_connector.api.models.milestones import Milestone, MilestoneEnvelope
from assembla_connector.api.models.spaces import Space
from assembla_connector.api.models.tags import Tag, TagEnvelope
from assembla_connector.api.models.tickets import Ticket, TicketEnvelope

__all__ = [
    # Base
    "AssemblaModel",
    # Spaces
    "Space",
    # Milestones
    "Milestone",
    "MilestoneEnvelope",
    # Tickets
    "Ticket",
    "TicketEnvelope",
    # Tags
    "Tag",
    "TagEnvelope",
    # Documents
    "Document",
    "DocumentEnvelope",
]
