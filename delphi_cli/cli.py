"""Typer-based CLI: look up an Elm identifier from the point of view of one file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config_manager import load_settings
from .errors import DelphiError, UsageError
from .models import SearchResult, results_to_json_ready
from .orchestrator import LookupOrchestrator

app = typer.Typer(
    help="Delphi: find Elm functions and types in your dependencies' documentation.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Delphi v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("delphi_cli")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_table(results: List[SearchResult]) -> None:
    console = Console()
    if not results:
        console.print("No matches found.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Signature")
    for item in results:
        table.add_row(item.full_name, item.signature)
    console.print(table)


@app.command()
def lookup(
    file: Optional[str] = typer.Argument(None, help="Elm file, relative to the project root."),
    query: Optional[str] = typer.Argument(None, help="Function or type name, optionally qualified (Dict.get)."),
    project_root: Optional[Path] = typer.Option(
        None, "--project-root", "-C", help="Directory holding elm.json (default: current directory)."
    ),
    package_store: Optional[Path] = typer.Option(
        None, "--package-store", help="Directory of installed Elm packages."
    ),
    elm_version: Optional[str] = typer.Option(None, "--elm-version", help="Elm toolchain version segment."),
    href: Optional[str] = typer.Option(None, "--href", help="Reference link template for results."),
    table: bool = typer.Option(False, "--table", help="Print a table instead of JSON."),
    verbose: bool = typer.Option(False, "--verbose", help="Log pipeline steps to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Print the documented values QUERY can refer to inside FILE, as JSON."""
    _configure_logging(verbose)

    try:
        if file is None:
            raise UsageError("An elm-file relative to elm path is required")
        if query is None:
            raise UsageError("A query is required. Either a function or a type name.")

        settings = load_settings(
            {"package_store": package_store, "elm_version": elm_version, "href": href}
        )
        orchestrator = LookupOrchestrator((project_root or Path.cwd()).resolve(), settings)
        results = orchestrator.lookup(file, query)
    except DelphiError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1)
    except (OSError, ValueError) as exc:
        typer.echo(f"Lookup failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if table:
        _print_table(results)
    else:
        typer.echo(json.dumps(results_to_json_ready(results), ensure_ascii=False, separators=(",", ":")))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
