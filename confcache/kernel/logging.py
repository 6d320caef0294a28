"""Logging for confcache, built on Loguru.

Every module logs through ``get_logger(__name__)``; the module name is
bound as ``extra["module"]``. Until :func:`configure_logging` is called,
the first logger created applies ``CONFCACHE_LOG_LEVEL`` (default
``WARNING``) and ``CONFCACHE_LOG_FORMAT`` (default ``structured``).

Examples
--------
>>> from confcache.kernel.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Importing {resource}", resource="services.yaml")

Apply the settings loaded from ``[tool.confcache.logging]``::

    from confcache.kernel.config import load_config
    from confcache.kernel.logging import configure_from_settings
    configure_from_settings(load_config().logging)
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

    from confcache.kernel.config.models import LoggingConfig

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

_TIMESTAMP = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "


@dataclass(slots=True)
class _LoggingState:
    """Handlers installed by confcache and the settings they were built from."""

    settings: tuple[Any, ...] | None = None
    handler_ids: list[int] = field(default_factory=list)

    def clear(self) -> None:
        for handler_id in self.handler_ids:
            with suppress(ValueError):
                logger.remove(handler_id)
        self.handler_ids.clear()
        self.settings = None


_state = _LoggingState()


def _console_sink(level: str, use_color: bool, include_timestamp: bool) -> int:
    prefix = _TIMESTAMP if include_timestamp else ""
    return logger.add(
        sys.stderr,
        level=level,
        format=prefix + "{level: <8} | {name} | {message}",
        colorize=False,
    )


def _structured_sink(level: str, use_color: bool, include_timestamp: bool) -> int:
    prefix = _TIMESTAMP if include_timestamp else ""
    return logger.add(
        sys.stderr,
        level=level,
        format=prefix + "[<level>{level: <8}</level>]"
        "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>",
        colorize=use_color and sys.stderr.isatty(),
    )


def _json_sink(level: str, use_color: bool, include_timestamp: bool) -> int:
    return logger.add(sys.stderr, level=level, serialize=True)


def _rich_sink(level: str, use_color: bool, include_timestamp: bool) -> int:
    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=include_timestamp,
        show_path=True,
    )
    return logger.add(handler, level=level, format="{message}")


_SINKS: dict[str, Callable[[str, bool, bool], int]] = {
    "console": _console_sink,
    "json": _json_sink,
    "rich": _rich_sink,
    "structured": _structured_sink,
}


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "structured",
    output_file: str | Path | None = None,
    use_color: bool = True,
    include_timestamp: bool = True,
    force_reconfigure: bool = False,
    enable_stdlib_bridge: bool = False,
) -> None:
    """Install confcache's Loguru handlers.

    Calling it again with unchanged settings is a no-op; changed settings
    replace the handlers installed by the previous call. Handlers added by
    other code are left alone.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum level written by every handler
    format : LogFormat, default="structured"
        ``console`` plain lines, ``structured`` Loguru lines with source
        location, ``json`` serialized records, ``rich`` a Rich handler
    output_file : str | Path | None, default=None
        Also write serialized records to this file (rotated at 10 MB)
    use_color : bool, default=True
        Colorize ``structured`` output when stderr is a terminal
    include_timestamp : bool, default=True
        Prefix lines with the time
    force_reconfigure : bool, default=False
        Replace the handlers even if the settings did not change
    enable_stdlib_bridge : bool, default=False
        Route standard library ``logging`` records through Loguru

    Raises
    ------
    ValueError
        If ``format`` is unknown
    """
    settings = (
        level,
        format,
        str(output_file) if output_file else None,
        use_color,
        include_timestamp,
        enable_stdlib_bridge,
    )
    if settings == _state.settings and not force_reconfigure:
        return

    try:
        add_sink = _SINKS[format]
    except KeyError:
        expected = sorted(_SINKS)
        raise ValueError(f"Unknown log format {format!r}, expected one of {expected}") from None

    _state.clear()
    _state.handler_ids.append(add_sink(level, use_color, include_timestamp))

    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _state.handler_ids.append(
            logger.add(path, level=level, serialize=True, rotation="10 MB", retention="1 week")
        )

    if enable_stdlib_bridge:
        enable_stdlib_logging_bridge()

    _state.settings = settings


def configure_from_settings(config: LoggingConfig, level: LogLevel | None = None) -> None:
    """Apply a :class:`~confcache.kernel.config.models.LoggingConfig`.

    ``level`` overrides the configured level, e.g. for a ``--verbose`` flag.
    """
    configure_logging(
        level=level or config.level,
        format=config.format,
        output_file=config.output_file,
        use_color=config.use_color,
        include_timestamp=config.include_timestamp,
    )


@lru_cache(maxsize=256)
def get_logger(name: str) -> Logger:
    """Return the Loguru logger bound to a module name."""
    if _state.settings is None:
        _configure_from_env()
    return logger.bind(module=name)


class _InterceptHandler(logging.Handler):
    """Forward standard library records to Loguru, keeping the caller location."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def enable_stdlib_logging_bridge() -> None:
    """Replace the root ``logging`` handlers with a Loguru forwarder."""
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)


def reset_logging() -> None:
    """Remove confcache's handlers and forget the applied settings."""
    _state.clear()


def _configure_from_env() -> None:
    level = os.getenv("CONFCACHE_LOG_LEVEL", "WARNING").upper()
    format = os.getenv("CONFCACHE_LOG_FORMAT", "structured").lower()
    if format not in _SINKS:
        format = "structured"
    configure_logging(level=level, format=format)  # type: ignore[arg-type]
