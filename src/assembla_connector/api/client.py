"""Assembla API client facade."""

from __future__ import annotations

from assembla_connector.api.resources import (
    FilesResource,
    MilestonesResource,
    SpacesResource,
    TagsResource,
    TicketsResource,
)
from assembla_connector.api.transport import AssemblaTransport
from assembla_connector.config import Settings, get_settings


class AssemblaClient:
    """Entry point grouping the API by resource type.

    Every resource view shares the one transport passed in; the client does
    not own it unless created with ``from_settings``.

    Usage:
        async with AssemblaClient.from_settings() as client:
            spaces = await client.spaces.list()
            tickets = await client.tickets.list(spaces[0].id, report=1)
    """

    def __init__(self, transport: AssemblaTransport):
        self._transport = transport
        self._owns_transport = False
        self._spaces = SpacesResource(transport)
        self._milestones = MilestonesResource(transport)
        self._tickets = TicketsResource(transport)
        self._tags = TagsResource(transport)
        self._files = FilesResource(transport)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AssemblaClient:
        """Create a client with its own transport built from settings.

        Raises:
            ConfigurationError: If the API key or secret is missing
        """
        client = cls(AssemblaTransport.from_settings(settings or get_settings()))
        client._owns_transport = True
        return client

    async def __aenter__(self) -> AssemblaClient:
        return self

    async def __aexit__(self, *args) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    @property
    def transport(self) -> AssemblaTransport:
        return self._transport

    @property
    def spaces(self) -> SpacesResource:
        return self._spaces

    @property
    def milestones(self) -> MilestonesResource:
        return self._milestones

    @property
    def tickets(self) -> TicketsResource:
        return self._tickets

    @property
    def tags(self) -> TagsResource:
        return self._tags

    @property
    def files(self) -> FilesResource:
        return self._files
