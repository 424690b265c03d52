"""Files resource for document listing, upload and download."""

from __future__ import annotations

import logging
from pathlib import Path

from assembla_connector.api.base import BaseResource
from assembla_connector.api.models import Document, DocumentEnvelope
from assembla_connector.api.transport import MultipartContent
from assembla_connector.utils.files import sanitize_filename, unique_path

logger = logging.getLogger(__name__)


class FilesResource(BaseResource):
    """Resource for files (documents) stored in a space."""

    async def list(
        self, space_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Document]:
        """Get the files of a space."""
        data = await self._transport.get_json(
            f"/v1/spaces/{space_id}/documents.json",
            list[Document],
            self._paging(page, per_page),
        )
        return self._listing(data)

    async def get(self, space_id: str, document_id: str) -> Document | None:
        """Get file metadata."""
        return await self._transport.get_json(
            f"/v1/spaces/{space_id}/documents/{document_id}.json", Document
        )

    async def download(self, space_id: str, document_id: str) -> bytes:
        """Get the raw contents of a file."""
        return await self._transport.get_raw(
            f"/v1/spaces/{space_id}/documents/{document_id}/download"
        )

    async def download_to(
        self, space_id: str, document: Document, output_dir: Path | None = None
    ) -> Path:
        """Download a file into ``output_dir`` without overwriting existing files.

        Returns:
            Path to the written file
        """
        data = await self.download(space_id, document.id)

        if output_dir is None:
            output_dir = Path.cwd()
        output_dir.mkdir(parents=True, exist_ok=True)

        output_path = unique_path(output_dir / sanitize_filename(document.filename or document.name))
        output_path.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {output_path}")
        return output_path

    async def upload(
        self,
        space_id: str,
        filename: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        description: str | None = None,
    ) -> Document | None:
        """Upload a new file as multipart form data."""
        fields = {"document[name]": filename}
        if description:
            fields["document[description]"] = description

        content = MultipartContent(
            files={"document[file]": (filename, data, content_type)},
            data=fields,
        )
        return await self._transport.post(
            f"/v1/spaces/{space_id}/documents.json", Document, content
        )

    async def update(self, space_id: str, document_id: str, document: Document) -> None:
        """Update file metadata. Failures are logged, not raised."""
        await self._transport.put_json(
            f"/v1/spaces/{space_id}/documents/{document_id}.json",
            DocumentEnvelope(document=document),
        )

    async def delete(self, space_id: str, document_id: str) -> None:
        """Delete a file."""
        await self._transport.delete(f"/v1/spaces/{space_id}/documents/{document_id}.json")
