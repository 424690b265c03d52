"""Tickets resource."""

from __future__ import annotations

from assembla_connector.api.base import BaseResource
from assembla_connector.api.models import Tag, Ticket, TicketEnvelope


class TicketsResource(BaseResource):
    """Resource for ticket-related API calls.

    Tickets are addressed by their per-space ``number``.
    """

    async def list(
        self,
        space_id: str,
        report: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
        sort_order: str | None = None,
        sort_by: str | None = None,
    ) -> list[Ticket]:
        """Get tickets of a space.

        Args:
            space_id: The space id or wiki name
            report: Assembla report id (0 = all, 1 = active, 4 = closed, ...)
            page: Page number, starting at 1
            per_page: Page size
            sort_order: "asc" or "desc"
            sort_by: Ticket field to sort on

        Returns:
            List of tickets, empty if the report has none
        """
        query = self._paging(
            page,
            per_page,
            report=report,
            sort_order=sort_order,
            sort_by=sort_by,
        )
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/tickets.json", list[Ticket], query
        )
        return self._listing(data)

    async def by_milestone(
        self,
        space_id: str,
        milestone_id: int,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Ticket]:
        """Get tickets assigned to a milestone."""
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/tickets/milestone/{milestone_id}.json",
            list[Ticket],
            self._paging(page, per_page),
        )
        return self._listing(data)

    async def get(self, space_id: str, number: int) -> Ticket | None:
        """Get a single ticket by number."""
        return await self._transport.get_json(
            f"/v1/spaces/{space_id}/tickets/{number}.json", Ticket
        )

    async def create(self, space_id: str, ticket: Ticket) -> Ticket | None:
        """Create a ticket and return it as stored by the API."""
        return await self._transport.post_json(
            f"/v1/spaces/{space_id}/tickets.json",
            TicketEnvelope(ticket=ticket),
            Ticket,
        )

    async def update(self, space_id: str, number: int, ticket: Ticket) -> None:
        """Update a ticket. Failures are logged, not raised."""
        await self._transport.put_json(
            f"/v1/spaces/{space_id}/tickets/{number}.json",
            TicketEnvelope(ticket=ticket),
        )

    async def delete(self, space_id: str, number: int) -> None:
        """Delete a ticket."""
        await self._transport.delete(f"/v1/spaces/{space_id}/tickets/{number}.json")

    async def tags(self, space_id: str, number: int) -> list[Tag]:
        """Get the tags attached to a ticket."""
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/tickets/{number}/tags.json", list[Tag]
        )
        return self._listing(data)
