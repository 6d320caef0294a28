"""Tests for confcache logging configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from confcache.kernel import logging as confcache_logging
from confcache.kernel.config import LoggingConfig
from confcache.kernel.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    reset_logging()
    yield
    reset_logging()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_idempotent(self) -> None:
        configure_logging(level="INFO", format="console")
        handlers = list(confcache_logging._state.handler_ids)

        configure_logging(level="INFO", format="console")

        assert confcache_logging._state.handler_ids == handlers

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(level="INFO", format="console")
        configure_logging(level="DEBUG", format="json")

        assert len(confcache_logging._state.handler_ids) == 1

    def test_output_file_receives_json(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "confcache.log"
        configure_logging(level="INFO", format="console", output_file=log_file)

        get_logger("tests.logging").info("Rebuilding cache {file}", file="c.json")

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["record"]["message"] == "Rebuilding cache c.json"
        assert record["record"]["extra"]["module"] == "tests.logging"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown log format"):
            configure_logging(format="xml")  # type: ignore[arg-type]

    def test_from_settings(self, tmp_path) -> None:
        log_file = tmp_path / "confcache.log"
        config = LoggingConfig(level="ERROR", format="console", output_file=str(log_file))

        configure_from_settings(config, level="DEBUG")

        assert confcache_logging._state.settings[:3] == ("DEBUG", "console", str(log_file))
        assert len(confcache_logging._state.handler_ids) == 2

    def test_reset(self) -> None:
        configure_logging(level="INFO", format="console")
        reset_logging()

        assert confcache_logging._state.handler_ids == []
        assert confcache_logging._state.settings is None

    def test_stdlib_bridge(self, tmp_path) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        log_file = tmp_path / "confcache.log"
        configure_logging(
            level="INFO", format="console", output_file=log_file, enable_stdlib_bridge=True
        )
        try:
            logging.getLogger("thirdparty").warning("from stdlib")
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)

        assert "from stdlib" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Tests for get_logger."""

    def test_configures_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CONFCACHE_LOG_LEVEL", "debug")
        monkeypatch.setenv("CONFCACHE_LOG_FORMAT", "console")

        confcache_logging._configure_from_env()

        assert confcache_logging._state.settings is not None
        assert confcache_logging._state.settings[:2] == ("DEBUG", "console")

    def test_cached_per_name(self) -> None:
        assert get_logger("a") is get_logger("a")
