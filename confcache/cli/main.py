"""confcache CLI - Main entrypoint."""

import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
except ImportError:
    print("Error: CLI dependencies not installed.")
    print("Please install with:")
    print("  pip install confcache[cli]")
    sys.exit(1)

from confcache.cli.commands import glob_cmd, status_cmd, walk_cmd
from confcache.kernel.config import load_config
from confcache.kernel.exceptions import ConfCacheError
from confcache.kernel.logging import configure_from_settings

app = typer.Typer(
    name="confcache",
    help="Inspect configuration caches and preview import glob expansion.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()

app.command(name="status", help="Check whether a configuration cache is fresh")(status_cmd.status)
app.command(name="glob", help="List the paths an import pattern expands to")(glob_cmd.glob)
app.command(name="walk", help="List every path below a directory")(walk_cmd.walk)


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a confcache configuration file"
    ),
) -> None:
    """confcache command line interface."""
    try:
        settings = load_config(config)
    except (OSError, ValueError, ConfCacheError) as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        raise typer.Exit(2) from e

    configure_from_settings(settings.logging, level="DEBUG" if verbose else None)
    ctx.obj = settings


def main() -> None:
    """Run the confcache CLI."""
    app()


if __name__ == "__main__":
    main()
