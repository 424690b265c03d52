"""Rich output formatters for CLI display."""

from rich.console import Console
from rich.table import Table

from assembla_connector.api.models import Document, Milestone, Space, Tag, Ticket

TAG_STATES = {1: "proposed", 2: "active", 4: "hidden"}


def format_spaces_table(spaces: list[Space], console: Console) -> None:
    """Print spaces as a table."""
    if not spaces:
        console.print("[yellow]No spaces found.[/yellow]")
        return

    table = Table(title="Spaces", show_header=True)
    table.add_column("Wiki name", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Id", style="dim")
    table.add_column("Updated", style="dim")

    for space in spaces:
        updated = space.updated_at.strftime("%Y-%m-%d") if space.updated_at else "-"
        table.add_row(space.wiki_name, space.name, space.id, updated)

    console.print(table)


def format_milestones_table(milestones: list[Milestone], console: Console) -> None:
    """Print milestones as a table."""
    if not milestones:
        console.print("[yellow]No milestones found.[/yellow]")
        return

    table = Table(title="Milestones", show_header=True)
    table.add_column("Id", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Due", style="cyan")
    table.add_column("Done")

    for milestone in milestones:
        due = milestone.due_date.isoformat() if milestone.due_date else "-"
        done = "[green]yes[/green]" if milestone.is_completed else "no"
        table.add_row(str(milestone.id), milestone.title, due, done)

    console.print(table)


def format_tickets_table(tickets: list[Ticket], console: Console) -> None:
    """Print tickets as a table."""
    if not tickets:
        console.print("[yellow]No tickets found.[/yellow]")
        return

    table = Table(title="Tickets", show_header=True)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Summary", style="bold")
    table.add_column("Status")
    table.add_column("Priority", justify="right")
    table.add_column("Tags", style="dim")

    for ticket in tickets:
        status = ticket.status or ("Open" if ticket.is_open else "Closed")
        table.add_row(
            str(ticket.number),
            ticket.summary,
            status,
            str(ticket.priority),
            ", ".join(ticket.tags),
        )

    console.print(table)


def format_tags_table(tags: list[Tag], console: Console) -> None:
    """Print tags as a table."""
    if not tags:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table(title="Tags", show_header=True)
    table.add_column("Id", style="dim", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("State")

    for tag in tags:
        table.add_row(str(tag.id), tag.name, TAG_STATES.get(tag.state, str(tag.state)))

    console.print(table)


def format_documents_table(documents: list[Document], console: Console) -> None:
    """Print files as a table."""
    if not documents:
        console.print("[yellow]No files found.[/yellow]")
        return

    table = Table(title="Files", show_header=True)
    table.add_column("Id", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Size", justify="right")

    for document in documents:
        table.add_row(
            document.id,
            document.name or document.filename,
            document.content_type or "-",
            document.size_readable,
        )

    console.print(table)
