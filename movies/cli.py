"""Command line interface for the movies manager."""

from pathlib import Path
from typing import List, Optional

import typer

from movies.config import load_settings
from movies.exceptions import ConfigError
from movies.logging_config import setup_logging
from movies.manager import MoviesManager

app = typer.Typer(help="Add movies and list them")


def _build_manager(
    titles: List[str], limit: Optional[int], config: Optional[Path]
) -> MoviesManager:
    try:
        settings = load_settings(config)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    setup_logging(settings.log_level)

    manager = MoviesManager(settings.limit if limit is None else limit)
    for title in titles:
        manager.add(title)
    return manager


@app.command("all")
def all_movies(
    titles: List[str] = typer.Argument(None, help="Movie titles in the order they are added."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file."),
) -> None:
    """Add ``titles`` and print every movie in insertion order."""

    manager = _build_manager(titles or [], None, config)
    for title in manager.find_all():
        typer.echo(title)


@app.command()
def last(
    titles: List[str] = typer.Argument(None, help="Movie titles in the order they are added."),
    limit: Optional[int] = typer.Option(None, "--limit", help="Override the configured limit."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file."),
) -> None:
    """Add ``titles`` and print the most recent ones, newest first."""

    manager = _build_manager(titles or [], limit, config)
    for title in manager.find_last():
        typer.echo(title)


if __name__ == "__main__":
    app()
