"""CLI utility functions and decorators."""

import logging
from functools import wraps
from typing import Callable, TypeVar

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from assembla_connector.api.exceptions import AssemblaError
from assembla_connector.cli.errors import format_error

console = Console()

F = TypeVar("F", bound=Callable)

# Set by the main callback before any command runs
state = {"verbose": False}


def configure_logging(level: str | int) -> None:
    """Send ``assembla_connector`` log records to stderr through rich."""
    package_logger = logging.getLogger("assembla_connector")
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    )
    package_logger.setLevel(level)
    package_logger.propagate = False


def handle_api_errors(f: F) -> F:
    """Decorator to handle common API errors in CLI commands.

    This decorator catches and handles:
    - ConfigurationError: Shows how to store credentials
    - RequestFailedError: Shows the status and the API's error message
    - DecodeError: Shows an unexpected-response message
    - httpx.TransportError: Shows a network message

    Usage:
        @app.command()
        @handle_api_errors
        def my_command(space: str):
            ...
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (AssemblaError, httpx.TransportError) as e:
            format_error(e, console, verbose=state["verbose"])
            raise typer.Exit(1)

    return wrapper  # type: ignore
