"""Glob preview command for the confcache CLI."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from confcache.cli.commands._settings import get_settings
from confcache.drivers import FileLocator
from confcache.kernel.exceptions import FileLocatorFileNotFoundError
from confcache.loader import ImportResolver, LoaderResolver

console = Console()


def glob(
    ctx: typer.Context,
    pattern: Annotated[str, typer.Argument(help="Import pattern, e.g. 'packages/*.yaml'")],
    directory: Annotated[
        Path,
        typer.Option("--dir", "-d", help="Current directory for relative patterns"),
    ] = Path("."),
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Let '**' cross directories"),
    ] = False,
) -> None:
    """List the paths an import pattern expands to.

    Examples
    --------
    confcache glob 'packages/*.yaml' --dir config
    confcache glob '**/*.yaml' --recursive
    """
    settings = get_settings(ctx)
    importer = ImportResolver(
        FileLocator(settings.paths), LoaderResolver(), current_dir=directory.resolve()
    )

    try:
        paths = list(importer.glob(pattern, recursive=recursive))
    except FileLocatorFileNotFoundError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1) from e

    for path in paths:
        console.print(path, markup=False, highlight=False, soft_wrap=True)
    console.print(f"[dim]{len(paths)} match(es)[/dim]")
