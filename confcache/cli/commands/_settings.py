"""Access to the settings loaded by the CLI callback."""

import typer

from confcache.kernel.config import ConfCacheConfig, load_config


def get_settings(ctx: typer.Context) -> ConfCacheConfig:
    """Return the settings stored on the context, loading them if needed."""
    root = ctx.find_root()
    if not isinstance(root.obj, ConfCacheConfig):
        root.obj = load_config()
    return root.obj
