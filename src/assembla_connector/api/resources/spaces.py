"""Spaces resource."""

from __future__ import annotations

from assembla_connector.api.base import BaseResource
from assembla_connector.api.models import Space


class SpacesResource(BaseResource):
    """Resource for space-related API calls."""

    async def list(self) -> list[Space]:
        """Get all spaces the credentials have access to."""
        return self._listing(await self._transport.get_json("/v1/spaces.json", list[Space]))

    async def get(self, space_id: str) -> Space | None:
        """Get a single space by id or wiki name."""
        return await self._transport.get_json(f"/v1/spaces/{space_id}.json", Space)
