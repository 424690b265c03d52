"""Milestones resource."""

from __future__ import annotations

from assembla_connector.api.base import BaseResource
from assembla_connector.api.models import Milestone, MilestoneEnvelope


class MilestonesResource(BaseResource):
    """Resource for milestone-related API calls."""

    async def _list(
        self,
        space_id: str,
        kind: str,
        page: int | None,
        per_page: int | None,
    ) -> list[Milestone]:
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/milestones/{kind}.json",
            list[Milestone],
            self._paging(page, per_page),
        )
        return self._listing(data)

    async def all(
        self, space_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Milestone]:
        """Get all milestones of a space."""
        return await self._list(space_id, "all", page, per_page)

    async def upcoming(
        self, space_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Milestone]:
        """Get milestones that are not completed yet."""
        return await self._list(space_id, "upcoming", page, per_page)

    async def completed(
        self, space_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Milestone]:
        """Get completed milestones."""
        return await self._list(space_id, "completed", page, per_page)

    async def get(self, space_id: str, milestone_id: int) -> Milestone | None:
        """Get a single milestone."""
        return await self._transport.get_json(
            f"/v1/spaces/{space_id}/milestones/{milestone_id}.json", Milestone
        )

    async def create(self, space_id: str, milestone: Milestone) -> Milestone | None:
        """Create a milestone and return it as stored by the API."""
        return await self._transport.post_json(
            f"/v1/spaces/{space_id}/milestones.json",
            MilestoneEnvelope(milestone=milestone),
            Milestone,
        )

    async def update(self, space_id: str, milestone_id: int, milestone: Milestone) -> None:
        """Update a milestone. Failures are logged, not raised."""
        await self._transport.put_json(
            f"/v1/spaces/{space_id}/milestones/{milestone_id}.json",
            MilestoneEnvelope(milestone=milestone),
        )

    async def delete(self, space_id: str, milestone_id: int) -> None:
        """Delete a milestone."""
        await self._transport.delete(f"/v1/spaces/{space_id}/milestones/{milestone_id}.json")
