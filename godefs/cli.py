"""CLI entry point for godefs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from godefs.collect import collect_packages
from godefs.exceptions import GoDefsError
from godefs.toon import encode

app = typer.Typer(
    name="godefs",
    help="List the type declarations of a Go module in TOON format.",
    no_args_is_help=False,
)


@app.command()
def main(
    root: Annotated[
        Path,
        typer.Argument(
            help="Go module root directory.",
            exists=True,
            file_okay=False,
            resolve_path=True,
        ),
    ] = Path("."),
    module: Annotated[
        str | None,
        typer.Option(
            "--module",
            "-m",
            help="Import path of the root (default: read from go.mod).",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            help="Gitignore-style pattern to skip; may be repeated.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each package as it is loaded."),
    ] = False,
) -> None:
    """Collect type definitions and print them to stdout."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        packages = collect_packages(root, module_path=module, extra_ignores=exclude)
    except GoDefsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not packages:
        typer.echo("No Go packages found.", err=True)
        raise typer.Exit(1)

    typer.echo(encode(root, packages))
