"""Directory walk command for the confcache CLI."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from confcache.resource import RecursiveDirectoryIterator

console = Console()


def walk(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to enumerate", file_okay=False),
    ],
) -> None:
    """List every path below a directory, depth first."""
    count = 0
    for path in RecursiveDirectoryIterator(directory):
        console.print(path, markup=False, highlight=False, soft_wrap=True)
        count += 1
    console.print(f"[dim]{count} path(s)[/dim]")
