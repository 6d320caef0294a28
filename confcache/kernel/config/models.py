"""Configuration data models for confcache."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

DEFAULT_CACHE_DIR = "var/cache"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration.

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.confcache.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export CONFCACHE_LOG_LEVEL=DEBUG
    export CONFCACHE_LOG_FORMAT=json
    export CONFCACHE_LOG_FILE=/var/log/app/confcache.log
    ```
    """

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True


@dataclass(frozen=True, slots=True)
class ConfCacheConfig:
    """Top-level confcache settings.

    Attributes
    ----------
    debug : bool
        Check tracked resources of existing caches (``CONFCACHE_DEBUG``).
    paths : tuple[str, ...]
        Search paths handed to the file locator.
    cache_dir : str
        Directory caches are written to by the CLI helpers.
    logging : LoggingConfig
        Logging settings.
    """

    debug: bool = False
    paths: tuple[str, ...] = ()
    cache_dir: str = DEFAULT_CACHE_DIR
    logging: LoggingConfig = field(default_factory=LoggingConfig)
