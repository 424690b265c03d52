"""Interpretation of failure response bodies.

The API reports failures as ``{"error": "..."}``. Bodies that do not follow
that convention are routine (proxies, HTML error pages, empty bodies), so
extraction returns a result describing what went wrong instead of raising.
"""

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorBody:
    """Outcome of reading a failure body.

    Exactly one of ``message`` and ``parse_error`` is set: ``message`` is the
    API's own ``error`` text, ``parse_error`` describes why the body could
    not be read.
    """

    message: str | None = None
    parse_error: str | None = None

    @property
    def parsed(self) -> bool:
        return self.parse_error is None

    @property
    def description(self) -> str:
        """The text to report for this failure."""
        return self.message if self.parse_error is None else self.parse_error


def extract_error(body: bytes | str) -> ErrorBody:
    """Read the ``error`` property from a failure response body."""
    # Deeply nested bodies exhaust the decoder's recursion limit
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        return ErrorBody(parse_error=str(e))

    if not isinstance(data, dict):
        return ErrorBody(parse_error=f"Expected a JSON object, got {type(data).__name__}")

    if "error" not in data:
        return ErrorBody(parse_error="Response body has no 'error' property")

    message = data["error"]
    # Scalars are reported as their text
    if isinstance(message, (bool, int, float)):
        message = str(message)
    elif not isinstance(message, str):
        return ErrorBody(
            parse_error=f"'error' property is {type(message).__name__}, not a string"
        )

    return ErrorBody(message=message)
