"""API module for the Assembla connector."""

from assembla_connector.api.client import AssemblaClient
from assembla_connector.api.codec import decode, encode
from assembla_connector.api.error_body import ErrorBody, extract_error
from assembla_connector.api.exceptions import (
    AssemblaError,
    ConfigurationError,
    DecodeError,
    RequestFailedError,
)
from assembla_connector.api.http_logging import METHOD_EVENT_IDS, EventId
from assembla_connector.api.models import (
    AssemblaModel,
    Document,
    DocumentEnvelope,
    Milestone,
    MilestoneEnvelope,
    Space,
    Tag,
    TagEnvelope,
    Ticket,
    TicketEnvelope,
)
from assembla_connector.api.resources import (
    FilesResource,
    MilestonesResource,
    SpacesResource,
    TagsResource,
    TicketsResource,
)
from assembla_connector.api.transport import AssemblaTransport, MultipartContent, RawContent
from assembla_connector.api.urls import compose_url

__all__ = [
    # Client
    "AssemblaClient",
    "AssemblaTransport",
    "MultipartContent",
    "RawContent",
    # Core helpers
    "compose_url",
    "decode",
    "encode",
    "extract_error",
    "ErrorBody",
    "EventId",
    "METHOD_EVENT_IDS",
    # Exceptions
    "AssemblaError",
    "ConfigurationError",
    "DecodeError",
    "RequestFailedError",
    # Models
    "AssemblaModel",
    "Document",
    "DocumentEnvelope",
    "Milestone",
    "MilestoneEnvelope",
    "Space",
    "Tag",
    "TagEnvelope",
    "Ticket",
    "TicketEnvelope",
    # Resources
    "FilesResource",
    "MilestonesResource",
    "SpacesResource",
    "TagsResource",
    "TicketsResource",
]
