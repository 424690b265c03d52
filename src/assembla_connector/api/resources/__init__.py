"""API resources."""

from assembla_connector.api.resources.files import FilesResource
from assembla_connector.api.resources.milestones import MilestonesResource
from assembla_connector.api.resources.spaces import SpacesResource
from assembla_connector.api.resources.tags import TagsResource
from assembla_connector.api.resources.tickets import TicketsResource

__all__ = [
    "FilesResource",
    "MilestonesResource",
    "SpacesResource",
    "TagsResource",
    "TicketsResource",
]
