"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .bootstrap import build_catalog_service
from .errors import SettingsError
from .settings.manager import SettingsManager
from .shell import CatalogShell

app = typer.Typer(help="Browse and edit a JSON photo catalog", add_completion=False)


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SettingsError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.ERROR)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
@_handle_errors
def main(
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", help="Directory holding photos.json and albums.json", file_okay=False
    ),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file to read", dir_okay=False),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. INFO or DEBUG"),
) -> None:
    """Open the interactive photo management menu."""

    settings = SettingsManager(settings_path)
    settings.load()
    _configure_logging(log_level or settings.get("log_level"))

    root = data_dir or Path(settings.get("data_dir") or Path.cwd())
    console = Console()
    service = build_catalog_service(
        root,
        photos_file=settings.get("photos_file"),
        albums_file=settings.get("albums_file"),
        notifier=lambda message: console.print(message, markup=False, highlight=False),
    )
    CatalogShell(service, console=console).run()


if __name__ == "__main__":  # pragma: no cover
    app()
