"""Tests for the confcache exception hierarchy."""

from __future__ import annotations

import pytest

from confcache.kernel.exceptions import (
    CircularImportError,
    ConfCacheError,
    ConfigurationError,
    FileLocatorFileNotFoundError,
    LoaderLoadError,
    LoaderNotFoundError,
)


class TestHierarchy:
    """All confcache errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("logging", "bad level"),
            FileLocatorFileNotFoundError("app.conf"),
            LoaderNotFoundError("app.conf"),
            CircularImportError(["a.conf"]),
            LoaderLoadError("app.conf"),
        ],
    )
    def test_base_class(self, error: Exception) -> None:
        assert isinstance(error, ConfCacheError)


class TestFileLocatorFileNotFoundError:
    def test_message_lists_paths(self) -> None:
        error = FileLocatorFileNotFoundError("app.conf", ["/etc/app", "/srv/app"])
        assert str(error) == "The file 'app.conf' does not exist (in: /etc/app, /srv/app)"
        assert error.paths == ("/etc/app", "/srv/app")

    def test_message_without_paths(self) -> None:
        error = FileLocatorFileNotFoundError("/abs.conf")
        assert str(error) == "The file '/abs.conf' does not exist"


class TestCircularImportError:
    """Tests for CircularImportError."""

    def test_chain_and_message(self) -> None:
        error = CircularImportError(["a.conf", "b.conf"])

        assert error.chain == ("a.conf", "b.conf")
        assert str(error) == "Circular reference detected in 'a.conf' (a.conf > b.conf > a.conf)"

    def test_empty_chain(self) -> None:
        assert str(CircularImportError([])) == "Circular reference detected"


class TestLoaderLoadError:
    """Tests for LoaderLoadError messages."""

    def test_wraps_cause(self) -> None:
        cause = ValueError("Unexpected token.")
        error = LoaderLoadError("db.conf", "app.conf", cause, "conf")

        assert str(error) == (
            "Unexpected token in 'db.conf' (which is being imported from 'app.conf')."
        )
        assert error.cause is cause
        assert error.type == "conf"

    def test_without_source(self) -> None:
        error = LoaderLoadError("db.conf", cause=ValueError("Unexpected token"))
        assert str(error) == "Unexpected token in 'db.conf'."

    def test_without_cause(self) -> None:
        assert str(LoaderLoadError("db.conf")) == "Failed to load resource 'db.conf'."

    def test_missing_loader_with_type(self) -> None:
        error = LoaderLoadError(
            "data.json", "app.conf", LoaderNotFoundError("data.json", "json"), "json"
        )

        assert str(error) == (
            "Cannot load resource 'data.json' imported from 'app.conf'. "
            "Make sure there is a loader supporting the 'json' type."
        )

    def test_missing_loader_without_type(self) -> None:
        error = LoaderLoadError("data.json", cause=LoaderNotFoundError("data.json"))
        assert str(error) == (
            "Cannot load resource 'data.json'. "
            "Make sure there is a loader supporting this resource."
        )

    def test_long_resource_is_truncated(self) -> None:
        error = LoaderLoadError("x" * 200)
        assert "x" * 117 + "..." in str(error)
        assert "x" * 118 not in str(error)

    def test_callable_resource_is_described_by_type(self) -> None:
        assert "function" in str(LoaderLoadError(lambda: None))
