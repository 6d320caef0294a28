"""Cache status command for the confcache CLI."""

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from confcache.cache import ConfigCache
from confcache.cli.commands._settings import get_settings

console = Console()


def status(
    ctx: typer.Context,
    cache_file: Annotated[
        Path,
        typer.Argument(help="Path to the cache file", dir_okay=False),
    ],
    debug: Annotated[
        bool | None,
        typer.Option(
            "--debug/--no-debug",
            help="Check tracked resources even if the cache exists (default: settings)",
        ),
    ] = None,
) -> None:
    """Report whether a configuration cache can be reused.

    Exits with code 1 when the cache is stale.

    Examples
    --------
    confcache status var/cache/config.json
    confcache status var/cache/config.json --debug
    """
    settings = get_settings(ctx)
    cache = ConfigCache(cache_file, settings.debug if debug is None else debug)
    fresh = cache.is_fresh()

    resources = cache.read_resources() or []
    if resources:
        timestamp = os.stat(cache.path).st_mtime if os.path.isfile(cache.path) else 0.0
        table = Table(title="Tracked resources")
        table.add_column("Kind", style="cyan")
        table.add_column("Resource", overflow="fold")
        table.add_column("Fresh", justify="center")
        for resource in resources:
            mark = "[green]✓[/green]" if resource.is_fresh(timestamp) else "[red]✗[/red]"
            table.add_row(resource.kind, str(resource), mark)
        console.print(table)

    mode = "debug" if cache.debug else "production"
    if fresh:
        console.print(f"[green]✓ Cache is fresh[/green] ({mode} mode)")
    else:
        console.print(f"[red]✗ Cache is stale[/red] ({mode} mode)")
        raise typer.Exit(1)
