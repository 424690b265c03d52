"""Exceptions for the Assembla API client."""


class AssemblaError(Exception):
    """Base exception for Assembla client errors."""


class ConfigurationError(AssemblaError):
    """A required credential or collaborator was not supplied."""


class RequestFailedError(AssemblaError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        reason_phrase: str,
        error_message: str | None = None,
    ):
        super().__init__(
            f"Response status code does not indicate success: {status_code} ({reason_phrase})."
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        # Only set when the failure body carried an "error" property
        self.error_message = error_message


class DecodeError(AssemblaError):
    """A response body could not be deserialized into the expected type."""

    def __init__(self, message: str, result_type: object = None):
        super().__init__(message)
        self.result_type = result_type
