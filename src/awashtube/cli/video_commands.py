"""
Video CLI commands for browsing the channel.

Lists the channel's videos with local search and library-tab filtering, and
runs the player actions (play, next, share, download) for a single video.
"""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Optional, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from awashtube.cli.errors import (
    ErrorCategory,
    exit_for_exception,
    exit_invalid_argument,
    exit_with_error,
)
from awashtube.container import container
from awashtube.exceptions import (
    EXIT_CODE_INTERRUPTED,
    EXIT_CODE_YOUTUBE_API_FAILED,
    AwashTubeError,
)
from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.video import Video
from awashtube.services.library_service import LibraryService

console = Console()

T = TypeVar("T")

video_app = typer.Typer(
    name="videos",
    help="Browse and play the channel's videos",
    no_args_is_help=True,
)

_VALID_TABS = [tab.value for tab in LibraryTab]
_MAX_PAGE_SIZE = 50

_LIST_MARKERS = {
    LibraryList.FAVORITES: "♥",
    LibraryList.PLAYLIST: "▶",
    LibraryList.WATCH_LATER: "⏱",
    LibraryList.HISTORY: "✓",
}


def _parse_tab(tab: str) -> LibraryTab:
    try:
        return LibraryTab(tab)
    except ValueError:
        exit_invalid_argument(
            f'Invalid tab "{tab}"',
            hint=f"Must be one of: {', '.join(_VALID_TABS)}",
        )


def _markers(library: LibraryService, video_id: str) -> str:
    """Symbols for the library lists that hold ``video_id``."""
    return " ".join(
        marker
        for library_list, marker in _LIST_MARKERS.items()
        if library.contains(library_list, video_id)
    )


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, mapping domain failures and Ctrl+C to exit codes."""
    try:
        return asyncio.run(coro)
    except AwashTubeError as e:
        exit_for_exception(e)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_CODE_INTERRUPTED)


@video_app.command("list")
def list_videos(
    query: str = typer.Option(
        "", "--query", "-q", help="Search text matched against title and description"
    ),
    tab: Optional[str] = typer.Option(
        None,
        "--tab",
        "-t",
        help=f"Restrict to a library tab: {', '.join(_VALID_TABS)} (default: the selected tab)",
    ),
    max_results: Optional[int] = typer.Option(
        None, "--max", "-n", help="Number of videos to request (1-50)"
    ),
    page_token: str = typer.Option(
        "", "--page-token", help="Page token from a previous listing"
    ),
) -> None:
    """
    List the channel's latest videos.

    Examples:
        awashtube videos list
        awashtube videos list -q tutorial
        awashtube videos list --tab favorites -n 25
    """
    library = container.library_service
    selected_tab = _parse_tab(tab) if tab is not None else library.active_tab
    page_size = max_results if max_results is not None else container.settings.page_size
    if not 1 <= page_size <= _MAX_PAGE_SIZE:
        exit_invalid_argument(
            f"--max must be between 1 and {_MAX_PAGE_SIZE}", hint=f"Got {page_size}"
        )

    page = _run(
        container.youtube_service.fetch_channel_videos(
            max_results=page_size, page_token=page_token
        )
    )

    videos = library.filter_videos(page.videos, query, selected_tab)

    if not videos:
        message = "No videos found"
        if query:
            message += f' matching "{query}"'
        console.print(f"[yellow]{message} in {selected_tab.label}[/yellow]")
    else:
        table = Table(title=f"{selected_tab.label} ({len(videos)} of {len(page.videos)})")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Published", style="dim")
        table.add_column("Duration", justify="right")
        table.add_column("Views", justify="right", style="green")
        table.add_column("Lists", justify="center")

        for video in videos:
            table.add_row(
                video.id,
                video.title,
                video.published_at,
                video.duration,
                video.view_count,
                _markers(library, video.id),
            )
        console.print(table)

    if page.next_page_token:
        console.print(f"[dim]Next page: --page-token {page.next_page_token}[/dim]")
    if page.prev_page_token:
        console.print(f"[dim]Previous page: --page-token {page.prev_page_token}[/dim]")


def _fetch_video(video_id: str) -> Video:
    return _run(container.youtube_service.fetch_video_details(video_id))


@video_app.command()
def show(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Show the details of a video."""
    video = _fetch_video(video_id)
    library = container.library_service

    lines = [
        f"[bold]{video.title}[/bold]",
        f"[dim]{video.channel_title}[/dim]",
        "",
        f"Published: {video.published_at}",
        f"Duration:  {video.duration}",
        f"Views:     {video.view_count}",
        f"Likes:     {video.like_count}",
        f"Qualities: {', '.join(video.qualities)}",
    ]
    lists = [
        library_list.label
        for library_list in LibraryList
        if library.contains(library_list, video.id)
    ]
    if lists:
        lines.append(f"In:        {', '.join(lists)}")
    if video.description:
        lines.extend(["", video.description])

    console.print(Panel("\n".join(lines), title=video.id, border_style="blue"))


@video_app.command()
def play(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Open a video: records it in the history and prints its player URL."""
    video = _fetch_video(video_id)
    session = container.create_browser_session()
    url = session.play_video(video)

    console.print(f"[green]▶ Playing[/green] [bold]{video.title}[/bold]")
    console.print(url)


@video_app.command("next")
def next_video(
    video_id: str = typer.Argument(..., help="The video that just ended"),
) -> None:
    """Play the playlist entry that follows a video."""
    session = container.create_browser_session()
    if _run(session.load_videos()) is None:
        exit_with_error(
            ErrorCategory.YOUTUBE_API,
            "Could not load the channel's videos; see the log for details",
            EXIT_CODE_YOUTUBE_API_FAILED,
        )

    current = session.find_video(video_id) or _fetch_video(video_id)
    session.current_video = current

    upcoming = session.handle_video_end()
    if upcoming is None:
        console.print("[yellow]End of playlist, player closed[/yellow]")
        return

    console.print(f"[green]▶ Up next[/green] [bold]{upcoming.title}[/bold]")
    console.print(session.player.embed_url(upcoming.id))


@video_app.command()
def share(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
) -> None:
    """Print the share text and link for a video."""
    video = _fetch_video(video_id)
    data = container.create_player_controller().share_data(video)

    console.print(
        Panel(f"{data.text}\n{data.url}", title=data.title, border_style="blue")
    )


@video_app.command()
def download(
    video_id: str = typer.Argument(..., help="YouTube video ID"),
    quality: Optional[str] = typer.Option(
        None, "--quality", help="Quality to download; defaults to the highest offered"
    ),
) -> None:
    """Request a download of a video."""
    video = _fetch_video(video_id)
    if quality is None and not video.qualities:
        exit_invalid_argument(f"No download qualities are offered for {video.id}")
    selected = quality or video.qualities[-1]

    try:
        request = container.create_player_controller().download(video, selected)
    except ValueError as e:
        exit_invalid_argument(str(e))

    console.print(f"[blue]{request.message}[/blue]")
