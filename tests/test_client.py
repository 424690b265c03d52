"""Tests for the resource facade."""

import json
from datetime import date

import httpx
import pytest

from assembla_connector.api import (
    AssemblaClient,
    ConfigurationError,
    Document,
    Milestone,
    RequestFailedError,
    Tag,
    Ticket,
)
from assembla_connector.config import Settings


class TestAssemblaClient:
    """Tests for AssemblaClient wiring."""

    @pytest.mark.asyncio
    async def test_resources_share_transport(self, client, transport):
        """Every resource view uses the one transport."""
        views = [client.spaces, client.milestones, client.tickets, client.tags, client.files]

        assert all(view._transport is transport for view in views)
        assert client.transport is transport

    @pytest.mark.asyncio
    async def test_views_are_stable(self, client):
        assert client.tickets is client.tickets

    def test_from_settings_requires_credentials(self):
        with pytest.raises(ConfigurationError):
            AssemblaClient.from_settings(Settings())

    @pytest.mark.asyncio
    async def test_from_settings_owns_transport(self):
        settings = Settings(api_key="k", api_secret="s")

        async with AssemblaClient.from_settings(settings) as client:
            inner = client.transport._client

        assert inner.is_closed

    @pytest.mark.asyncio
    async def test_shared_transport_stays_open(self, transport):
        async with AssemblaClient(transport):
            pass

        assert not transport._client.is_closed


@pytest.mark.asyncio
class TestSpaces:
    """Tests for SpacesResource."""

    async def test_list(self, client, mock_api):
        mock_api.get("/v1/spaces.json").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"id": "abc", "name": "Project X", "wiki_name": "project-x"},
                    {"id": "def", "name": "Project Y", "wiki_name": "project-y"},
                ],
            )
        )

        spaces = await client.spaces.list()

        assert [s.wiki_name for s in spaces] == ["project-x", "project-y"]

    async def test_get(self, client, mock_api):
        mock_api.get("/v1/spaces/project-x.json").mock(
            return_value=httpx.Response(
                200,
                json={"id": "abc", "name": "Project X", "created_at": "2024-03-01T10:00:00Z"},
            )
        )

        space = await client.spaces.get("project-x")

        assert space.name == "Project X"
        assert space.created_at.year == 2024


@pytest.mark.asyncio
class TestMilestones:
    """Tests for MilestonesResource."""

    @pytest.mark.parametrize("kind", ["all", "upcoming", "completed"])
    async def test_listings(self, client, mock_api, kind):
        route = mock_api.get(f"/v1/spaces/s/milestones/{kind}.json").mock(
            return_value=httpx.Response(200, json=[{"id": 1, "title": "M1", "due_date": "2026-12-01"}])
        )

        milestones = await getattr(client.milestones, kind)("s", per_page=25)

        assert milestones[0].due_date == date(2026, 12, 1)
        assert route.calls.last.request.url.query == b"per_page=25"

    async def test_empty_listing(self, client, mock_api):
        mock_api.get("/v1/spaces/s/milestones/upcoming.json").mock(return_value=httpx.Response(204))

        assert await client.milestones.upcoming("s") == []

    async def test_create(self, client, mock_api):
        route = mock_api.post("/v1/spaces/s/milestones.json").mock(
            return_value=httpx.Response(201, json={"id": 77, "title": "Beta"})
        )

        created = await client.milestones.create("s", Milestone(title="Beta", due_date=date(2026, 11, 30)))

        assert created.id == 77
        body = json.loads(route.calls.last.request.content)
        assert body == {"milestone": {"title": "Beta", "due_date": "2026-11-30"}}

    async def test_update_and_delete(self, client, mock_api):
        put = mock_api.put("/v1/spaces/s/milestones/77.json").mock(return_value=httpx.Response(204))
        delete = mock_api.delete("/v1/spaces/s/milestones/77.json").mock(
            return_value=httpx.Response(204)
        )

        await client.milestones.update("s", 77, Milestone(is_completed=True))
        await client.milestones.delete("s", 77)

        assert json.loads(put.calls.last.request.content) == {"milestone": {"is_completed": True}}
        assert delete.called


@pytest.mark.asyncio
class TestTickets:
    """Tests for TicketsResource."""

    async def test_list_with_query(self, client, mock_api):
        route = mock_api.get("/v1/spaces/s/tickets.json").mock(
            return_value=httpx.Response(
                200, json=[{"id": 1000, "number": 1, "summary": "First", "tags": ["bug"], "state": 1}]
            )
        )

        tickets = await client.tickets.list("s", report=1, page=2, per_page=10, sort_order="desc")

        assert tickets[0].summary == "First"
        assert tickets[0].is_open
        assert route.calls.last.request.url.query == b"page=2&per_page=10&report=1&sort_order=desc"

    async def test_list_without_query(self, client, mock_api):
        route = mock_api.get("/v1/spaces/s/tickets.json").mock(return_value=httpx.Response(200, json=[]))

        assert await client.tickets.list("s") == []
        assert route.calls.last.request.url.query == b""

    async def test_by_milestone(self, client, mock_api):
        mock_api.get("/v1/spaces/s/tickets/milestone/5.json").mock(
            return_value=httpx.Response(200, json=[{"number": 3, "summary": "In M5"}])
        )

        tickets = await client.tickets.by_milestone("s", 5)

        assert tickets[0].number == 3

    async def test_get_missing(self, client, mock_api):
        mock_api.get("/v1/spaces/s/tickets/404.json").mock(
            return_value=httpx.Response(404, json={"error": "Ticket not found"})
        )

        with pytest.raises(RequestFailedError) as exc_info:
            await client.tickets.get("s", 404)

        assert exc_info.value.error_message == "Ticket not found"

    async def test_create(self, client, mock_api):
        route = mock_api.post("/v1/spaces/s/tickets.json").mock(
            return_value=httpx.Response(201, json={"id": 1001, "number": 2, "summary": "New"})
        )

        ticket = await client.tickets.create("s", Ticket(summary="New", priority=3))

        assert ticket.number == 2
        assert json.loads(route.calls.last.request.content) == {
            "ticket": {"summary": "New", "priority": 3}
        }

    async def test_update_failure_is_silent(self, client, mock_api):
        mock_api.put("/v1/spaces/s/tickets/2.json").mock(
            return_value=httpx.Response(422, json={"error": "invalid"})
        )

        assert await client.tickets.update("s", 2, Ticket(summary="x")) is None

    async def test_delete(self, client, mock_api):
        route = mock_api.delete("/v1/spaces/s/tickets/2.json").mock(return_value=httpx.Response(204))

        await client.tickets.delete("s", 2)

        assert route.called

    async def test_tags(self, client, mock_api):
        mock_api.get("/v1/spaces/s/tickets/2/tags.json").mock(
            return_value=httpx.Response(200, json=[{"id": 1, "name": "bug", "state": 2}])
        )

        tags = await client.tickets.tags("s", 2)

        assert tags == [Tag(id=1, name="bug", state=2)]


@pytest.mark.asyncio
class TestTags:
    """Tests for TagsResource."""

    async def test_crud(self, client, mock_api):
        mock_api.get("/v1/spaces/s/tags.json").mock(
            return_value=httpx.Response(200, json=[{"id": 1, "name": "bug"}])
        )
        mock_api.get("/v1/spaces/s/tags/1.json").mock(
            return_value=httpx.Response(200, json={"id": 1, "name": "bug"})
        )
        create = mock_api.post("/v1/spaces/s/tags.json").mock(
            return_value=httpx.Response(201, json={"id": 2, "name": "feature"})
        )
        update = mock_api.put("/v1/spaces/s/tags/2.json").mock(return_value=httpx.Response(204))
        delete = mock_api.delete("/v1/spaces/s/tags/2.json").mock(return_value=httpx.Response(204))

        assert [t.name for t in await client.tags.list("s")] == ["bug"]
        assert (await client.tags.get("s", 1)).name == "bug"
        created = await client.tags.create("s", Tag(name="feature"))
        await client.tags.update("s", created.id, Tag(name="feature", state=4))
        await client.tags.delete("s", created.id)

        assert json.loads(create.calls.last.request.content) == {"tag": {"name": "feature"}}
        assert json.loads(update.calls.last.request.content) == {"tag": {"name": "feature", "state": 4}}
        assert delete.called


@pytest.mark.asyncio
class TestFiles:
    """Tests for FilesResource."""

    async def test_list_and_get(self, client, mock_api):
        mock_api.get("/v1/spaces/s/documents.json").mock(
            return_value=httpx.Response(
                200, json=[{"id": "d1", "name": "spec.pdf", "filename": "spec.pdf", "filesize": 2048}]
            )
        )

        documents = await client.files.list("s")

        assert documents[0].size_readable == "2.0 KB"

    async def test_download(self, client, mock_api):
        mock_api.get("/v1/spaces/s/documents/d1/download").mock(
            return_value=httpx.Response(200, content=b"%PDF-1.7")
        )

        assert await client.files.download("s", "d1") == b"%PDF-1.7"

    async def test_download_to(self, client, mock_api, tmp_path):
        """Existing files are not overwritten."""
        mock_api.get("/v1/spaces/s/documents/d1/download").mock(
            return_value=httpx.Response(200, content=b"data")
        )
        (tmp_path / "notes.txt").write_bytes(b"old")
        document = Document(id="d1", name="Notes", filename="notes.txt")

        path = await client.files.download_to("s", document, tmp_path)

        assert path == tmp_path / "notes_1.txt"
        assert path.read_bytes() == b"data"
        assert (tmp_path / "notes.txt").read_bytes() == b"old"

    async def test_upload(self, client, mock_api, caplog):
        route = mock_api.post("/v1/spaces/s/documents.json").mock(
            return_value=httpx.Response(201, json={"id": "d9", "name": "log.txt"})
        )

        document = await client.files.upload("s", "log.txt", b"line", "text/plain", description="Build log")

        assert document.id == "d9"
        body = route.calls.last.request.read()
        assert b'name="document[file]"; filename="log.txt"' in body
        assert b"Build log" in body
        request_records = [r for r in caplog.records if getattr(r, "event_id", None) == 1002]
        assert request_records[0].http.content_type == "MultipartContent"

    async def test_update_and_delete(self, client, mock_api):
        update = mock_api.put("/v1/spaces/s/documents/d1.json").mock(return_value=httpx.Response(200))
        delete = mock_api.delete("/v1/spaces/s/documents/d1.json").mock(return_value=httpx.Response(204))

        await client.files.update("s", "d1", Document(description="Updated"))
        await client.files.delete("s", "d1")

        assert json.loads(update.calls.last.request.content) == {"document": {"description": "Updated"}}
        assert delete.called
