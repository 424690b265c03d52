"""Progress indicators for CLI operations."""

from contextlib import contextmanager
from typing import Generator

from rich.status import Status

from assembla_connector.cli.utils import console


@contextmanager
def api_spinner(message: str) -> Generator[Status, None, None]:
    """Spinner for API calls with unknown duration.

    Usage:
        with api_spinner("Fetching tickets..."):
            tickets = asyncio.run(fetch())

    Args:
        message: Status message to display during operation

    Yields:
        Rich Status object for updating the message if needed
    """
    with console.status(f"[bold green]{message}", spinner="dots") as status:
        yield status


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")
