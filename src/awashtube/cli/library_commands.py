"""
Library CLI commands.

Shows and edits the locally persisted favorites, history, playlist and
watch-later lists and the selected tab.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from awashtube.cli.errors import exit_for_exception, exit_invalid_argument
from awashtube.container import container
from awashtube.exceptions import LibraryStorageError
from awashtube.models.enums import LibraryList, LibraryTab

console = Console()

library_app = typer.Typer(
    name="library",
    help="Favorites, history, playlist and watch-later lists",
    no_args_is_help=True,
)


@library_app.command()
def show() -> None:
    """Show every library list and the selected tab."""
    library = container.library_service
    stats = library.stats()

    table = Table(title=f"Library (tab: {library.active_tab.label})")
    table.add_column("List", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_column("Video IDs", style="white")

    for library_list in LibraryList:
        ids = library.get_list(library_list)
        table.add_row(library_list.label, str(len(ids)), ", ".join(ids))

    console.print(table)
    if not stats.has_data:
        console.print("[dim]The library is empty[/dim]")


def _toggle(library_list: LibraryList, video_id: str) -> None:
    added = container.library_service.toggle(library_list, video_id)
    if added:
        console.print(f"[green]Added {video_id} to {library_list.label}[/green]")
    else:
        console.print(f"[yellow]Removed {video_id} from {library_list.label}[/yellow]")


@library_app.command()
def favorite(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Add a video to favorites, or remove it if already there."""
    _toggle(LibraryList.FAVORITES, video_id)


@library_app.command()
def playlist(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Add a video to the playlist, or remove it if already there."""
    _toggle(LibraryList.PLAYLIST, video_id)


@library_app.command("watch-later")
def watch_later(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Add a video to watch later, or remove it if already there."""
    _toggle(LibraryList.WATCH_LATER, video_id)


@library_app.command()
def tab(
    name: str = typer.Argument(..., help="all, favorites, history, playlist or watchLater"),
) -> None:
    """Select the tab used when listing videos."""
    try:
        selected = LibraryTab(name)
    except ValueError:
        exit_invalid_argument(
            f'Invalid tab "{name}"',
            hint=f"Must be one of: {', '.join(t.value for t in LibraryTab)}",
        )

    container.library_service.set_active_tab(selected)
    console.print(f"[green]Selected tab: {selected.label}[/green]")


@library_app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Clear every library list and return to the All Videos tab."""
    confirmed = yes or typer.confirm(
        "Clear all favorites, history, playlist and watch later data?"
    )
    session = container.create_browser_session()
    if not session.clear_all_data(confirmed):
        console.print("[yellow]Nothing cleared[/yellow]")
        return

    try:
        container.library_store.clear()
    except LibraryStorageError as e:
        exit_for_exception(e)
    console.print("[green]Library cleared[/green]")
