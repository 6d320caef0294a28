"""Configuration loader for confcache settings.

Sources, first match wins:

1. explicit path, either a ``kind: Config`` YAML manifest or a TOML file;
2. ``CONFCACHE_CONFIG_PATH`` env var;
3. ``pyproject.toml`` ``[tool.confcache]`` in the working directory or a parent;
4. built-in defaults.

Environment variables override the file: ``CONFCACHE_DEBUG``,
``CONFCACHE_LOG_LEVEL``, ``CONFCACHE_LOG_FORMAT``, ``CONFCACHE_LOG_FILE``.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml

from confcache.kernel.config.models import DEFAULT_CACHE_DIR, ConfCacheConfig, LoggingConfig
from confcache.kernel.exceptions import ConfigurationError
from confcache.kernel.logging import get_logger

_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_LOG_FORMATS = frozenset({"console", "json", "structured", "rich"})

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse a boolean environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


class ConfigLoader:
    """Load :class:`ConfCacheConfig` from YAML, TOML and the environment."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load(self, path: str | Path | None = None) -> ConfCacheConfig:
        """Load settings, falling back to defaults when no file is found."""
        config_path = self._find_config_file(path)
        if config_path is None:
            logger.debug("No confcache configuration file found, using defaults")
            data: dict[str, Any] = {}
        else:
            data = self._read(config_path)
        return self._parse_config(self._substitute_env_vars(data))

    def _find_config_file(self, path: str | Path | None) -> Path | None:
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("CONFCACHE_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                return config_path
            logger.warning("CONFCACHE_CONFIG_PATH set but file not found: {}", config_path)

        current = Path.cwd()
        for directory in (current, *current.parents):
            pyproject = directory / "pyproject.toml"
            if pyproject.is_file():
                with pyproject.open("rb") as f:
                    if "confcache" in tomllib.load(f).get("tool", {}):
                        return pyproject
        return None

    def _read(self, config_path: Path) -> dict[str, Any]:
        logger.debug("Loading confcache configuration from {path}", path=config_path)
        if config_path.suffix in (".yaml", ".yml"):
            return self._read_yaml(config_path)
        return self._read_toml(config_path)

    def _read_yaml(self, config_path: Path) -> dict[str, Any]:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(
                str(config_path), f"expected a mapping, got {type(data).__name__}"
            )
        if data.get("kind") != "Config":
            raise ConfigurationError(
                str(config_path), f"YAML config must use 'kind: Config', got {data.get('kind')!r}"
            )

        spec = data.get("spec") or {}
        if not isinstance(spec, dict):
            raise ConfigurationError(str(config_path), "'spec' must be a mapping")
        return spec

    def _read_toml(self, config_path: Path) -> dict[str, Any]:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
        tool = data.get("tool", {})
        if "confcache" in tool:
            return tool["confcache"]
        if config_path.name == "pyproject.toml":
            logger.warning(
                "No [tool.confcache] section in {path}, using defaults", path=config_path
            )
            return {}
        return data

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` placeholders with environment values."""
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                value = os.environ.get(match.group(1))
                return match.group(0) if value is None else value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any]) -> ConfCacheConfig:
        debug = data.get("debug", False)
        if env_debug := os.getenv("CONFCACHE_DEBUG"):
            debug = _parse_bool_env(env_debug)
        elif isinstance(debug, str):
            debug = _parse_bool_env(debug)
        if not isinstance(debug, bool):
            raise ConfigurationError("debug", f"expected a boolean, got {debug!r}")

        paths = data.get("paths", [])
        if isinstance(paths, str):
            paths = [paths]
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ConfigurationError("paths", "expected a list of directory names")

        cache_dir = data.get("cache_dir", DEFAULT_CACHE_DIR)
        if not isinstance(cache_dir, str):
            raise ConfigurationError("cache_dir", f"expected a string, got {cache_dir!r}")

        return ConfCacheConfig(
            debug=debug,
            paths=tuple(paths),
            cache_dir=cache_dir,
            logging=self._parse_logging_config(data.get("logging") or {}),
        )

    def _parse_logging_config(self, data: dict[str, Any]) -> LoggingConfig:
        if not isinstance(data, dict):
            raise ConfigurationError("logging", "expected a mapping")

        level = str(os.getenv("CONFCACHE_LOG_LEVEL", data.get("level", "WARNING"))).upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError("logging", f"unknown level {level!r}")

        format = str(os.getenv("CONFCACHE_LOG_FORMAT", data.get("format", "structured"))).lower()
        if format not in _LOG_FORMATS:
            raise ConfigurationError("logging", f"unknown format {format!r}")

        return LoggingConfig(
            level=level,
            format=format,
            output_file=os.getenv("CONFCACHE_LOG_FILE", data.get("output_file")),
            use_color=bool(data.get("use_color", True)),
            include_timestamp=bool(data.get("include_timestamp", True)),
        )


def load_config(path: str | Path | None = None) -> ConfCacheConfig:
    """Load confcache settings. See :class:`ConfigLoader`."""
    return ConfigLoader().load(path)
