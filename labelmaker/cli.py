"""Command-line interface for LabelMaker."""

import asyncio
import logging
import sys

import click

from labelmaker import __version__, messages
from labelmaker.config import get_settings
from labelmaker.connection import ConnectionSettings, SettingsStore
from labelmaker.history import HistoryStore
from labelmaker.service import get_print_service


def setup_logging(level: str) -> None:
    """Set up logging configuration.

    Args:
        level: Log level string.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool):
    """LabelMaker - send label text to a network label printer."""
    setup_logging("DEBUG" if verbose else get_settings().log_level)


@main.command()
@click.option(
    "--endpoint",
    "-e",
    prompt="Label printer endpoint",
    help="URL of the print service (e.g., https://printer.local/print)",
)
@click.option(
    "--token",
    "-t",
    prompt="Auth token",
    hide_input=True,
    help="Value sent in the Authorization header",
)
def configure(endpoint: str, token: str):
    """Save the print service endpoint and auth token."""
    SettingsStore().save(ConnectionSettings(endpoint=endpoint.strip(), auth_token=token))
    click.echo(f"\nConfiguration saved to {get_settings().preferences_file}")
    click.echo("\nRun 'labelmaker print TEXT' to print a label.")


@main.command()
def status():
    """Show current configuration and history size."""
    settings = SettingsStore().load()

    click.echo("\n=== LabelMaker Status ===\n")

    if not settings.is_configured():
        click.echo("Status: NOT CONFIGURED")
        click.echo("\nRun 'labelmaker configure' to set up the print service.")
        return

    click.echo(f"Endpoint: {settings.endpoint}")
    click.echo(f"Auth Token: {settings.masked_token}")
    click.echo(f"History: {len(HistoryStore().get_all())} labels")


@main.command("print")
@click.argument("text")
@click.option(
    "--qty",
    "-q",
    type=click.IntRange(1, 3),
    default=1,
    show_default=True,
    help="Number of copies",
)
def print_label(text: str, qty: int):
    """Print a label with TEXT."""
    service = get_print_service()
    message = asyncio.run(service.submit(text, qty))
    click.echo(message)

    if message != messages.PRINT_SUCCESS:
        sys.exit(1)


@main.command()
def history():
    """List previously printed labels, most recent first."""
    items = HistoryStore().get_all()
    if not items:
        click.echo("No labels printed yet.")
        return

    for i, item in enumerate(items, start=1):
        click.echo(f"{i:>2}. {item}")


@main.command("clear-history")
@click.confirmation_option(prompt="Delete all label history?")
def clear_history():
    """Delete all label history."""
    click.echo(get_print_service().clear_history())


@main.command()
def gui():
    """Open the LabelMaker window."""
    from labelmaker.app_entry import main as gui_main

    gui_main()


if __name__ == "__main__":
    main()
