"""Tests for confcache settings loading.

Covers kind: Config YAML manifests, TOML files, pyproject.toml
[tool.confcache] discovery and environment variable overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from confcache.kernel.config import ConfCacheConfig, ConfigLoader, LoggingConfig, load_config
from confcache.kernel.config.loader import _parse_bool_env
from confcache.kernel.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CONFCACHE_CONFIG_PATH",
        "CONFCACHE_DEBUG",
        "CONFCACHE_LOG_LEVEL",
        "CONFCACHE_LOG_FORMAT",
        "CONFCACHE_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestParseBoolEnv:
    """Tests for _parse_bool_env function."""

    def test_truthy_values(self) -> None:
        for value in ["true", "True", "1", "yes", "on", "enabled", "  true  "]:
            assert _parse_bool_env(value) is True

    def test_falsy_values(self) -> None:
        for value in ["false", "FALSE", "0", "no", "off", "disabled"]:
            assert _parse_bool_env(value) is False

    def test_invalid_value_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid boolean value"):
            _parse_bool_env("maybe")


class TestDefaults:
    """Tests for the built-in defaults."""

    def test_no_configuration_file(self) -> None:
        assert load_config() == ConfCacheConfig()

    def test_default_values(self) -> None:
        config = ConfCacheConfig()

        assert config.debug is False
        assert config.paths == ()
        assert config.cache_dir == "var/cache"
        assert config.logging == LoggingConfig(level="WARNING", format="structured")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ConfCacheConfig().debug = True  # type: ignore[misc]


class TestYamlConfig:
    """Tests for kind: Config YAML manifests."""

    def test_full_manifest(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.yaml"
        path.write_text(
            """
kind: Config
metadata:
  name: app
spec:
  debug: true
  paths: [config, /etc/app]
  cache_dir: build/cache
  logging:
    level: debug
    format: rich
""",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.debug is True
        assert config.paths == ("config", "/etc/app")
        assert config.cache_dir == "build/cache"
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "rich"

    def test_wrong_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.yaml"
        path.write_text("kind: Pipeline\nspec: {}\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="kind: Config"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config(path)

    def test_manifest_without_settings(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.yaml"
        path.write_text("kind: Config\n", encoding="utf-8")

        assert load_config(path) == ConfCacheConfig()

    def test_env_var_substitution(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_CONFIG_DIR", "/srv/app/config")
        path = tmp_path / "confcache.yaml"
        path.write_text(
            "kind: Config\nspec:\n  paths: ['${APP_CONFIG_DIR}', '${UNSET_CONFCACHE_VAR}']\n",
            encoding="utf-8",
        )

        assert load_config(path).paths == ("/srv/app/config", "${UNSET_CONFCACHE_VAR}")


class TestTomlConfig:
    """Tests for TOML files and pyproject.toml discovery."""

    def test_pyproject_in_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "app"\n\n[tool.confcache]\ndebug = true\npaths = ["config"]\n',
            encoding="utf-8",
        )

        config = load_config()

        assert config.debug is True
        assert config.paths == ("config",)

    def test_pyproject_in_parent_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.confcache]\ncache_dir = "tmp/cache"\n', encoding="utf-8"
        )
        nested = tmp_path / "src" / "app"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert load_config().cache_dir == "tmp/cache"

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "app"\n', encoding="utf-8")
        assert load_config() == ConfCacheConfig()

    def test_explicit_pyproject_without_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "app"\n', encoding="utf-8")
        assert load_config(path) == ConfCacheConfig()

    def test_plain_toml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.toml"
        path.write_text('debug = "yes"\n\n[logging]\nlevel = "INFO"\n', encoding="utf-8")

        config = load_config(path)

        assert config.debug is True
        assert config.logging.level == "INFO"

    def test_config_path_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "settings" / "confcache.yaml"
        path.parent.mkdir()
        path.write_text("kind: Config\nspec:\n  debug: true\n", encoding="utf-8")
        monkeypatch.setenv("CONFCACHE_CONFIG_PATH", str(path))

        assert load_config().debug is True

    def test_missing_config_path_env_var_falls_back(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CONFCACHE_CONFIG_PATH", str(tmp_path / "missing.yaml"))
        assert load_config() == ConfCacheConfig()

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestValidation:
    """Tests for invalid settings."""

    def test_single_path_string(self, tmp_path: Path) -> None:
        path = tmp_path / "confcache.toml"
        path.write_text('paths = "config"\n', encoding="utf-8")
        assert load_config(path).paths == ("config",)

    @pytest.mark.parametrize(
        ("content", "component"),
        [
            ("paths = [1, 2]\n", "paths"),
            ("cache_dir = 3\n", "cache_dir"),
            ("debug = 3\n", "debug"),
            ('[logging]\nlevel = "LOUD"\n', "logging"),
            ('[logging]\nformat = "xml"\n', "logging"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str, component: str) -> None:
        path = tmp_path / "confcache.toml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert exc_info.value.component == component


class TestEnvironmentOverrides:
    """Tests for CONFCACHE_* environment variables."""

    def test_debug_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "confcache.toml"
        path.write_text("debug = true\n", encoding="utf-8")
        monkeypatch.setenv("CONFCACHE_DEBUG", "off")

        assert load_config(path).debug is False

    def test_invalid_debug_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFCACHE_DEBUG", "sometimes")

        with pytest.raises(ValueError):
            load_config()

    def test_logging_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFCACHE_LOG_LEVEL", "error")
        monkeypatch.setenv("CONFCACHE_LOG_FORMAT", "JSON")
        monkeypatch.setenv("CONFCACHE_LOG_FILE", "/var/log/confcache.log")

        logging_config = ConfigLoader().load().logging

        assert logging_config.level == "ERROR"
        assert logging_config.format == "json"
        assert logging_config.output_file == "/var/log/confcache.log"
