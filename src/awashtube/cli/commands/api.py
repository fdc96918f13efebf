"""CLI commands for the local JSON API server."""

from __future__ import annotations

from typing import Optional

import typer

from awashtube.config.settings import settings

api_app = typer.Typer(
    name="api",
    help="Local API server commands",
    no_args_is_help=True,
)


@api_app.command()
def start(
    port: Optional[int] = typer.Option(
        None, "--port", "-p", help="Port to run the server on"
    ),
    reload: bool = typer.Option(
        False, "--reload", help="Restart the server when source files change"
    ),
) -> None:
    """
    Start the awashtube API server.

    Examples:
        awashtube api start
        awashtube api start --port 3000
        awashtube api start -p 8080 --reload
    """
    import uvicorn

    uvicorn.run(
        "awashtube.api.main:app",
        host=settings.api_host,
        port=port if port is not None else settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
