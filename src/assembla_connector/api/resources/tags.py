"""Tags resource."""

from __future__ import annotations

from assembla_connector.api.base import BaseResource
from assembla_connector.api.models import Tag, TagEnvelope


class TagsResource(BaseResource):
    """Resource for tag-related API calls."""

    async def list(
        self, space_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Tag]:
        """Get the tags defined on a space."""
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/tags.json", list[Tag], self._paging(page, per_page)
        )
        return self._listing(data)

    async def get(self, space_id: str, tag_id: int) -> Tag | None:
        return await self._transport.get_json(f"/v1/spaces/{space_id}/tags/{tag_id}.json", Tag)

    async def create(self, space_id: str, tag: Tag) -> Tag | None:
        return await self._transport.post_json(
            f"/v1/spaces/{space_id}/tags.json", TagEnvelope(tag=tag), Tag
        )

    async def update(self, space_id: str, tag_id: int, tag: Tag) -> None:
        await self._transport.put_json(
            f"/v1/spaces/{space_id}/tags/{tag_id}.json", TagEnvelope(tag=tag)
        )

    async def delete(self, space_id: str, tag_id: int) -> None:
        await self._transport.delete(f"/v1/spaces/{space_id}/tags/{tag_id}.json")
