"""
Main CLI entry point for awashtube.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.panel import Panel

from awashtube import __version__
from awashtube.cli.commands.api import api_app
from awashtube.cli.library_commands import library_app
from awashtube.cli.video_commands import video_app
from awashtube.config.settings import settings
from awashtube.container import container

console = Console()

app = typer.Typer(
    name="awashtube",
    help="Browse one YouTube channel's videos from the terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(video_app, name="videos", help="Browse and play the channel's videos")
app.add_typer(library_app, name="library", help="Favorites, history, playlist and watch later")
app.add_typer(api_app, name="api", help="Local API server commands")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Route awashtube log records to stderr at ``level``."""
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("awashtube").setLevel(level)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]awashtube[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.command()
def status() -> None:
    """Show application status."""
    current = container.settings
    stats = container.library_service.stats()

    lines = [f"[blue]i[/blue] Channel: {current.youtube_channel_id}"]
    if current.youtube_api_key:
        lines.insert(0, "[green]✓[/green] awashtube is ready to use")
    else:
        lines.insert(
            0, "[yellow]![/yellow] Set YOUTUBE_API_KEY to fetch the channel's videos"
        )
    lines.append(f"[blue]i[/blue] Library: {current.library_path}")
    lines.append(
        f"[blue]i[/blue] {stats.favorites} favorites, {stats.history} watched, "
        f"{stats.playlist} in playlist, {stats.watch_later} to watch later"
    )

    console.print(Panel("\n".join(lines), title="Status", border_style="green"))


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log debug messages"
    ),
) -> None:
    """
    awashtube - Browse one YouTube channel's videos.

    Lists the channel's latest uploads, searches them locally, and keeps
    favorites, history, playlist and watch-later lists on disk.
    """
    if version:
        console.print(f"awashtube v{__version__}")
        raise typer.Exit(code=0)

    configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'awashtube --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
