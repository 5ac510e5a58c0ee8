"""Command line entry points: the ``stars`` client and the server runner."""

import asyncio
import logging
from collections.abc import Sequence

import typer

from rainbowroad.client import RainbowRoadClient, resolve_stars
from rainbowroad.config import RainbowRoadSettings
from rainbowroad.core.exceptions import RainbowRoadError
from rainbowroad.core.identifiers import is_valid_repo_name
from rainbowroad.core.models import FAILED_COUNT, RepoStars
from rainbowroad.logging_utils import configure_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: stars <git-repo-1> <git-repo-2> ..."
NAME_COLUMN_WIDTH = 50

app = typer.Typer(help="Show GitHub star counts for repositories.", add_completion=False)
server_app = typer.Typer(help="Run the Rainbow Road stars server.", add_completion=False)


def invalid_repo_errors(repos: Sequence[str]) -> list[str]:
    """One error line per identifier that is not ``<owner>/<name>``."""
    return [f"Error: Invalid repo name {repo}" for repo in repos if not is_valid_repo_name(repo)]


def render_table(results: Sequence[RepoStars]) -> str:
    """Render results as a two-column table, showing the error where a count is missing."""
    lines = [f"{'REPO':<{NAME_COLUMN_WIDTH}}STARS"]
    for result in results:
        value = result.error if result.stars == FAILED_COUNT else str(result.stars)
        lines.append(f"{result.name:<{NAME_COLUMN_WIDTH}}{value}")
    return "\n".join(lines)


async def _fetch(
    repos: Sequence[str],
    settings: RainbowRoadSettings,
    direct: bool,
) -> list[RepoStars]:
    if direct:
        return await resolve_stars(repos, settings=settings)

    async with RainbowRoadClient(settings) as client:
        return await client.get_stars(repos)


@app.command()
def stars(
    repos: list[str] | None = typer.Argument(
        None,
        help="Repositories in <owner>/<name> form.",
        show_default=False,
    ),
    direct: bool = typer.Option(
        False,
        "--direct",
        help="Query GitHub from this process instead of the stars server.",
    ),
) -> None:
    """Print the star count of every repository given."""
    repos = repos or []
    if not repos:
        typer.echo(USAGE)
        return

    # Fix every bad name before making any request
    errors = invalid_repo_errors(repos)
    if errors:
        typer.echo("\n".join(errors))
        raise typer.Exit(code=1)

    settings = RainbowRoadSettings()
    configure_logging(settings.log_level)

    try:
        results = asyncio.run(_fetch(repos, settings, direct))
    except RainbowRoadError as e:
        typer.echo(e.message)
        raise typer.Exit(code=1)

    typer.echo(render_table(results))


@server_app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default RAINBOW_ROAD_HOST)."),
    port: int | None = typer.Option(None, help="Port (default RAINBOW_ROAD_PORT)."),
) -> None:
    """Serve POST /stars, GET /health and GET /metrics."""
    import uvicorn

    from rainbowroad.api.app import create_app

    settings = RainbowRoadSettings()
    configure_logging(settings.log_level)

    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info(f"Starting Rainbow Road server on {bind_host}:{bind_port}")

    uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_config=None)


def main() -> None:
    app()


def server_main() -> None:
    server_app()
