"""User-friendly error messages with actionable suggestions."""

from dataclasses import dataclass

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from assembla_connector.api.exceptions import (
    ConfigurationError,
    DecodeError,
    RequestFailedError,
)


@dataclass
class ErrorInfo:
    """Structured error information for display."""

    title: str
    message: str
    suggestion: str
    command: str | None = None


ERROR_MESSAGES = {
    "not_configured": ErrorInfo(
        title="Not configured",
        message="No Assembla API credentials are configured.",
        suggestion="Store your API key and secret, or set ASSEMBLA_API_KEY and ASSEMBLA_API_SECRET.",
        command="assembla config set api_key <key> && assembla config set api_secret <secret>",
    ),
    "invalid_settings": ErrorInfo(
        title="Invalid configuration",
        message="A configuration value is out of range or not recognised.",
        suggestion="Fix the value in the config file or the ASSEMBLA_ environment variables.",
        command="assembla config show",
    ),
    "unauthorized": ErrorInfo(
        title="Access denied",
        message="Assembla rejected the API credentials.",
        suggestion="Check that the key and secret are valid and belong to the same user.",
        command="assembla config show",
    ),
    "forbidden": ErrorInfo(
        title="No access",
        message="Your account has no access to this resource.",
        suggestion="Check that you are a member of the space.",
    ),
    "not_found": ErrorInfo(
        title="Not found",
        message="The requested resource does not exist.",
        suggestion="Check the space id or wiki name and the resource number.",
    ),
    "server_error": ErrorInfo(
        title="Assembla server error",
        message="The Assembla server reported an error.",
        suggestion="This is probably temporary. Try again later.",
    ),
    "request_failed": ErrorInfo(
        title="Request failed",
        message="Assembla could not process the request.",
        suggestion="Run again with --verbose to see the request and response.",
    ),
    "bad_response": ErrorInfo(
        title="Unexpected response",
        message="The response from Assembla could not be read.",
        suggestion="Run again with --verbose to see the request and response.",
    ),
    "network_timeout": ErrorInfo(
        title="Connection timed out",
        message="Assembla did not answer in time.",
        suggestion="Check your connection or raise the timeout.",
        command="assembla config set timeout 60",
    ),
    "network_error": ErrorInfo(
        title="Network error",
        message="Could not connect to Assembla.",
        suggestion="Check your internet connection and the configured base_url.",
    ),
    "unknown": ErrorInfo(
        title="Unexpected error",
        message="An unexpected error occurred.",
        suggestion="Run again with --verbose for details.",
    ),
}


def get_error_type(error: Exception) -> str:
    """Determine error type from exception."""
    if isinstance(error, ConfigurationError):
        return "not_configured"
    elif isinstance(error, ValidationError):
        return "invalid_settings"
    elif isinstance(error, RequestFailedError):
        status = error.status_code
        if status == 401:
            return "unauthorized"
        elif status == 403:
            return "forbidden"
        elif status == 404:
            return "not_found"
        elif status >= 500:
            return "server_error"
        return "request_failed"
    elif isinstance(error, DecodeError):
        return "bad_response"
    elif isinstance(error, httpx.TimeoutException):
        return "network_timeout"
    elif isinstance(error, httpx.TransportError):
        return "network_error"

    return "unknown"


def format_error(
    error: Exception,
    console: Console,
    verbose: bool = False,
) -> None:
    """Format and display a user-friendly error message."""
    info = ERROR_MESSAGES[get_error_type(error)]

    content_lines = [f"[white]{info.message}[/white]"]

    # The API's own explanation, when the failure body had one
    api_message = getattr(error, "error_message", None)
    if api_message:
        content_lines.append(f"[dim]Assembla says:[/dim] {escape(api_message)}")

    content_lines += ["", f"[yellow]Suggestion:[/yellow] {info.suggestion}"]

    if info.command:
        content_lines.append("")
        content_lines.append(f"[cyan]{info.command}[/cyan]")

    if verbose:
        content_lines.append("")
        content_lines.append("[dim]" + "─" * 40 + "[/dim]")
        content_lines.append(f"[dim]Type: {type(error).__name__}[/dim]")
        content_lines.append(f"[dim]Details: {escape(str(error))}[/dim]")

    content = "\n".join(content_lines)

    console.print()
    console.print(Panel(
        content,
        title=f"[red bold]Error: {info.title}[/red bold]",
        border_style="red",
        padding=(1, 2),
    ))
    console.print()
