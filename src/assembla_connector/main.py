"""Main CLI entry point for the Assembla connector."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from assembla_connector.api import AssemblaClient
from assembla_connector.cli.commands import config
from assembla_connector.cli.errors import format_error
from assembla_connector.cli.formatters import (
    format_documents_table,
    format_milestones_table,
    format_spaces_table,
    format_tags_table,
    format_tickets_table,
)
from assembla_connector.cli.progress import api_spinner, print_success
from assembla_connector.cli.utils import configure_logging, handle_api_errors, state
from assembla_connector.config import get_settings

console = Console()

app = typer.Typer(
    name="assembla",
    help="Browse Assembla spaces, tickets and files",
    no_args_is_help=True,
)

app.add_typer(config.app, name="config", help="Manage configuration")


class MilestoneStatus(str, Enum):
    all = "all"
    upcoming = "upcoming"
    completed = "completed"


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every request and response"),
    ] = False,
):
    """Assembla command line client."""
    state["verbose"] = verbose
    try:
        settings = get_settings()
    except ValidationError as e:
        format_error(e, console, verbose=verbose)
        raise typer.Exit(1)
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command("spaces")
@handle_api_errors
def spaces():
    """
    List the spaces you have access to.

    Examples:
        assembla spaces
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            return await client.spaces.list()

    with api_spinner("Fetching spaces..."):
        result = asyncio.run(fetch())

    format_spaces_table(result, console)


@app.command("milestones")
@handle_api_errors
def milestones(
    space: Annotated[str, typer.Argument(help="Space id or wiki name")],
    status: Annotated[
        MilestoneStatus,
        typer.Option("--status", "-s", help="Which milestones to show"),
    ] = MilestoneStatus.upcoming,
):
    """
    List milestones of a space.

    Examples:
        assembla milestones my-space
        assembla milestones my-space --status all
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            listing = getattr(client.milestones, status.value)
            return await listing(space)

    with api_spinner("Fetching milestones..."):
        result = asyncio.run(fetch())

    format_milestones_table(result, console)


@app.command("tickets")
@handle_api_errors
def tickets(
    space: Annotated[str, typer.Argument(help="Space id or wiki name")],
    milestone: Annotated[
        int | None,
        typer.Option("--milestone", "-m", help="Only tickets of this milestone"),
    ] = None,
    report: Annotated[
        int | None,
        typer.Option("--report", "-r", help="Assembla report id (0 = all, 1 = active)"),
    ] = None,
    page: Annotated[int | None, typer.Option("--page", help="Page number")] = None,
    per_page: Annotated[int | None, typer.Option("--per-page", help="Page size")] = None,
):
    """
    List tickets of a space.

    Examples:
        assembla tickets my-space
        assembla tickets my-space --milestone 42
        assembla tickets my-space --report 0 --page 2 --per-page 50
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            if milestone is not None:
                return await client.tickets.by_milestone(space, milestone, page, per_page)
            return await client.tickets.list(space, report, page, per_page)

    with api_spinner("Fetching tickets..."):
        result = asyncio.run(fetch())

    format_tickets_table(result, console)


@app.command("tags")
@handle_api_errors
def tags(
    space: Annotated[str, typer.Argument(help="Space id or wiki name")],
):
    """
    List tags of a space.

    Examples:
        assembla tags my-space
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            return await client.tags.list(space)

    with api_spinner("Fetching tags..."):
        result = asyncio.run(fetch())

    format_tags_table(result, console)


@app.command("files")
@handle_api_errors
def files(
    space: Annotated[str, typer.Argument(help="Space id or wiki name")],
):
    """
    List files of a space.

    Examples:
        assembla files my-space
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            return await client.files.list(space)

    with api_spinner("Fetching files..."):
        result = asyncio.run(fetch())

    format_documents_table(result, console)


@app.command("download")
@handle_api_errors
def download(
    space: Annotated[str, typer.Argument(help="Space id or wiki name")],
    document_id: Annotated[str, typer.Argument(help="File id")],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory"),
    ] = None,
):
    """
    Download a file.

    Examples:
        assembla download my-space dK3xbWm8Gr4ieHacwqjQWU
        assembla download my-space dK3xbWm8Gr4ieHacwqjQWU --output ./downloads
    """

    async def fetch():
        async with AssemblaClient.from_settings() as client:
            document = await client.files.get(space, document_id)
            if document is None:
                return None
            return await client.files.download_to(space, document, output_dir)

    with api_spinner("Downloading..."):
        path = asyncio.run(fetch())

    if path is None:
        console.print(f"[yellow]File {document_id} not found.[/yellow]")
        raise typer.Exit(1)

    print_success(f"Saved to {path}")


if __name__ == "__main__":
    app()
