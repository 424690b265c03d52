"""Config CLI commands for managing settings."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from assembla_connector.config import (
    CONFIG_PATH,
    Settings,
    get_settings,
    load_config,
    reset_settings,
    save_config,
)

console = Console()
app = typer.Typer(help="Manage configuration")

# Settings that can be configured via the config command
CONFIGURABLE_KEYS = {
    "api_key": {
        "description": "Assembla API key",
        "type": "str",
        "secret": True,
    },
    "api_secret": {
        "description": "Assembla API secret",
        "type": "str",
        "secret": True,
    },
    "base_url": {
        "description": "API origin",
        "type": "str",
        "secret": False,
    },
    "timeout": {
        "description": "HTTP timeout in seconds (5-120)",
        "type": "int",
        "secret": False,
    },
    "log_level": {
        "description": "Log level (DEBUG, INFO, WARNING, ERROR)",
        "type": "str",
        "secret": False,
    },
}


def mask(value: object) -> str:
    """Show only the last four characters of a secret."""
    text = str(value)
    if len(text) <= 4:
        return "****"
    return "*" * (len(text) - 4) + text[-4:]


def parse_value(key: str, value: str) -> str | int:
    """Parse string value to appropriate type based on key."""
    if CONFIGURABLE_KEYS[key]["type"] == "int":
        try:
            return int(value)
        except ValueError:
            raise typer.BadParameter(f"'{value}' is not a valid number")
    return value


def validate_value(key: str, value: str | int) -> None:
    """Validate a config value."""
    if key == "timeout":
        if not isinstance(value, int) or not (5 <= value <= 120):
            raise typer.BadParameter("timeout must be between 5 and 120")
    elif key == "log_level":
        if not isinstance(logging.getLevelName(str(value).upper()), int):
            raise typer.BadParameter(f"unknown log level: {value}")
    elif key == "base_url":
        if not str(value).startswith(("http://", "https://")):
            raise typer.BadParameter("base_url must start with http:// or https://")


def display(key: str, value: object) -> str:
    return mask(value) if CONFIGURABLE_KEYS[key]["secret"] else str(value)


@app.command("show")
def config_show():
    """
    Show all configuration settings.

    Examples:
        assembla config show
    """
    config = load_config()
    settings = get_settings()
    defaults = Settings.model_fields

    table = Table(title="Assembla Connector Configuration", show_header=True)
    table.add_column("Setting", style="cyan", width=12)
    table.add_column("Value", style="green", width=28)
    table.add_column("Source", style="dim", width=12)
    table.add_column("Description", style="dim", width=40)

    for key, info in CONFIGURABLE_KEYS.items():
        file_value = config.get(key)
        effective_value = getattr(settings, key, None)

        if file_value is not None:
            source = "config.yaml"
            display_value = display(key, file_value)
        elif effective_value is not None and effective_value != defaults[key].default:
            source = "env var"
            display_value = display(key, effective_value)
        elif effective_value is not None:
            source = "default"
            display_value = f"[dim]{effective_value}[/dim]"
        else:
            source = "-"
            display_value = "[dim]not set[/dim]"

        table.add_row(key, display_value, source, info["description"])

    console.print(table)
    console.print()
    console.print(f"[dim]Config file: {CONFIG_PATH}[/dim]")


@app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="New value")],
):
    """
    Set a configuration value.

    Examples:
        assembla config set api_key 0123abcd
        assembla config set timeout 60
    """
    if key not in CONFIGURABLE_KEYS:
        console.print(f"[red]Unknown setting:[/red] {key}")
        console.print()
        console.print("[bold]Available settings:[/bold]")
        for k, info in CONFIGURABLE_KEYS.items():
            console.print(f"  [cyan]{k}[/cyan] - {info['description']}")
        raise typer.Exit(1)

    parsed_value = parse_value(key, value)
    validate_value(key, parsed_value)

    config = load_config()
    config[key] = parsed_value
    save_config(config)
    reset_settings()

    console.print(f"[green]✓[/green] {key} = {display(key, parsed_value)}")


@app.command("get")
def config_get(
    key: Annotated[str, typer.Argument(help="Setting name")],
):
    """
    Show a single configuration value.

    Examples:
        assembla config get base_url
    """
    if key not in CONFIGURABLE_KEYS:
        console.print(f"[red]Unknown setting:[/red] {key}")
        raise typer.Exit(1)

    file_value = load_config().get(key)
    effective_value = getattr(get_settings(), key, None)

    if file_value is not None:
        console.print(f"{key} = {display(key, file_value)} [dim](config.yaml)[/dim]")
    elif effective_value is not None:
        console.print(f"{key} = {display(key, effective_value)} [dim](default/env)[/dim]")
    else:
        console.print(f"{key} = [dim]not set[/dim]")
