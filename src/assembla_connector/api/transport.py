"""Authenticated async HTTP transport for the Assembla API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx

from assembla_connector.api.codec import decode, encode
from assembla_connector.api.error_body import ErrorBody
from assembla_connector.api.exceptions import ConfigurationError, RequestFailedError
from assembla_connector.api.http_logging import log_request, log_response
from assembla_connector.api.urls import compose_url
from assembla_connector.config import DEFAULT_BASE_URL, Settings

T = TypeVar("T")

USER_AGENT = "assembla-connector/0.1.0"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

Query = Mapping[str, str]


@dataclass(frozen=True)
class RawContent:
    """A request body that is sent as-is."""

    data: bytes
    media_type: str = "application/octet-stream"


@dataclass(frozen=True)
class MultipartContent:
    """A multipart/form-data body.

    ``files`` maps form field names to ``(filename, data, media_type)``.
    """

    files: dict[str, tuple[str, bytes, str]]
    data: dict[str, str] = field(default_factory=dict)


PrebuiltContent = RawContent | MultipartContent


class AssemblaTransport:
    """Performs authenticated API calls with request/response logging.

    The API key and secret are installed as default headers when the
    transport is created and never change afterwards. Calls keep no state
    on the transport, so one instance can serve concurrent callers.

    Usage:
        async with AssemblaTransport(key, secret, logger) as transport:
            spaces = await transport.get_json("/v1/spaces.json", list[Space])
    """

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        logger: logging.Logger | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
    ):
        if not api_key:
            raise ConfigurationError("API key is required (set ASSEMBLA_API_KEY)")
        if not api_secret:
            raise ConfigurationError("API secret is required (set ASSEMBLA_API_SECRET)")
        if logger is None:
            raise ConfigurationError("A logger is required")

        self._logger = logger
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "X-Api-Key": api_key,
                "X-Api-Secret": api_secret,
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(timeout),
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, logger: logging.Logger | None = None
    ) -> AssemblaTransport:
        """Create a transport from application settings."""
        return cls(
            settings.api_key,
            settings.api_secret,
            logger or logging.getLogger(__name__),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    async def __aenter__(self) -> AssemblaTransport:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        url: str,
        query: Query | None = None,
        *,
        json_body: str | None = None,
        content: PrebuiltContent | None = None,
    ) -> tuple[httpx.Response, ErrorBody | None]:
        """Compose, log, send and log one request."""
        target = compose_url(url, query)

        kwargs: dict[str, Any] = {}
        if json_body is not None:
            kwargs["content"] = json_body.encode("utf-8")
            kwargs["headers"] = {"Content-Type": JSON_CONTENT_TYPE}
        elif isinstance(content, RawContent):
            kwargs["content"] = content.data
            kwargs["headers"] = {"Content-Type": content.media_type}
        elif isinstance(content, MultipartContent):
            kwargs["files"] = content.files
            kwargs["data"] = content.data

        request = self._client.build_request(method, target, **kwargs)

        log_request(
            self._logger,
            method,
            target,
            content=json_body,
            content_kind=type(content).__name__ if content is not None else None,
        )

        response = await self._client.send(request)

        error = log_response(self._logger, response)
        return response, error

    @staticmethod
    def _ensure_success(response: httpx.Response, error: ErrorBody | None) -> None:
        if response.is_success:
            return
        raise RequestFailedError(
            response.status_code,
            response.reason_phrase,
            error.message if error is not None else None,
        )

    @staticmethod
    def _decode(response: httpx.Response, result_type: type[T]) -> T | None:
        # An empty success body (e.g. 204 on an empty listing) decodes to None
        if not response.content.strip():
            return None
        return decode(response.content, result_type)

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    async def get_json(
        self, url: str, result_type: type[T], query: Query | None = None
    ) -> T | None:
        """GET ``url`` and decode the response body as ``result_type``."""
        response, error = await self._send("GET", url, query)
        self._ensure_success(response, error)
        return self._decode(response, result_type)

    async def get_raw(self, url: str, query: Query | None = None) -> bytes:
        """GET ``url`` and return the response body unmodified."""
        response, error = await self._send("GET", url, query)
        self._ensure_success(response, error)
        return response.content

    async def post_json(
        self,
        url: str,
        content: Any,
        result_type: type[T],
        query: Query | None = None,
    ) -> T | None:
        """POST ``content`` encoded as JSON and decode the response."""
        response, error = await self._send("POST", url, query, json_body=encode(content))
        self._ensure_success(response, error)
        return self._decode(response, result_type)

    async def post(
        self,
        url: str,
        result_type: type[T],
        content: PrebuiltContent | None = None,
        query: Query | None = None,
    ) -> T | None:
        """POST pre-built ``content`` verbatim and decode the response."""
        response, error = await self._send("POST", url, query, content=content)
        self._ensure_success(response, error)
        return self._decode(response, result_type)

    async def post_command(
        self, url: str, result_type: type[T], query: Query | None = None
    ) -> T | None:
        """POST without a body and decode the response."""
        return await self.post(url, result_type, None, query)

    async def put_json(self, url: str, content: Any, query: Query | None = None) -> None:
        """PUT ``content`` encoded as JSON.

        A failure status is logged but not raised.
        """
        await self._send("PUT", url, query, json_body=encode(content))

    async def put(
        self,
        url: str,
        content: PrebuiltContent | None = None,
        query: Query | None = None,
    ) -> None:
        """PUT pre-built ``content`` verbatim.

        A failure status is logged but not raised.
        """
        await self._send("PUT", url, query, content=content)

    async def delete(self, url: str, query: Query | None = None) -> None:
        """DELETE ``url``."""
        response, error = await self._send("DELETE", url, query)
        self._ensure_success(response, error)
