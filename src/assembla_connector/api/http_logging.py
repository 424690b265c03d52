"""Structured logging around every API round-trip.

Each record carries its event identity and a frozen record of the request or
response as ``LogRecord`` attributes (``event_id``, ``event_name``, ``http``),
so handlers can filter on them without parsing the message.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

import httpx

from assembla_connector.api.error_body import ErrorBody, extract_error


class EventId(NamedTuple):
    """Stable identity of a log event."""

    id: int
    name: str


METHOD_EVENT_IDS = MappingProxyType(
    {
        "GET": EventId(1001, "GET"),
        "POST": EventId(1002, "POST"),
        "PUT": EventId(1003, "PUT"),
        "DELETE": EventId(1004, "DELETE"),
    }
)


@dataclass(frozen=True)
class RequestLogRecord:
    method: str
    target: str
    content: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class ResponseLogRecord:
    method: str
    target: str
    status: int
    reason_phrase: str
    error_message: str | None = None
    parse_error: str | None = None


def response_event_id(response: httpx.Response) -> EventId:
    """Identity of a response record, derived from its status line."""
    return EventId(response.status_code, response.reason_phrase)


def _extra(event_id: EventId, record: RequestLogRecord | ResponseLogRecord) -> dict:
    return {"event_id": event_id.id, "event_name": event_id.name, "http": record}


def log_request(
    logger: logging.Logger,
    method: str,
    target: str,
    content: str | None = None,
    content_kind: str | None = None,
) -> None:
    """Log an outgoing request at DEBUG.

    ``content`` is the serialized body of a typed payload; ``content_kind``
    is the type name of pre-built content that is not logged verbatim.
    """
    method = method.upper()
    record = RequestLogRecord(
        method=method,
        target=target,
        content=content,
        content_type=content_kind,
    )
    body = content if content is not None else content_kind
    message = f"{method}: {target}" if body is None else f"{method}: {target} {body}"

    logger.debug(message, extra=_extra(METHOD_EVENT_IDS[method], record))


def log_response(logger: logging.Logger, response: httpx.Response) -> ErrorBody | None:
    """Log a completed response.

    Success is logged at DEBUG, failure at ERROR together with what could be
    extracted from the body.

    Returns:
        The extraction result for a failure, ``None`` for a success.
    """
    request = response.request
    method = request.method.upper()
    target = request.url.raw_path.decode("ascii")
    event_id = response_event_id(response)
    prefix = f"{method}: {target} {response.status_code} '{response.reason_phrase}'"

    if response.is_success:
        record = ResponseLogRecord(
            method=method,
            target=target,
            status=response.status_code,
            reason_phrase=response.reason_phrase,
        )
        logger.debug(prefix, extra=_extra(event_id, record))
        return None

    error = extract_error(response.content)
    record = ResponseLogRecord(
        method=method,
        target=target,
        status=response.status_code,
        reason_phrase=response.reason_phrase,
        error_message=error.message,
        parse_error=error.parse_error,
    )
    logger.error(f"{prefix} '{error.description}'", extra=_extra(event_id, record))
    return error
