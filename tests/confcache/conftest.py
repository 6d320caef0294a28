"""Shared fixtures for confcache tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from confcache.drivers import FileLocator
from confcache.loader import ImportContext, ImportResolver, LoaderResolver


class TextFileLoader:
    """Test loader for ``.conf`` files.

    Each ``import <name>`` line imports another resource, ``import? <name>``
    does the same with errors ignored. Loading returns the file path and
    the values of its imports.
    """

    def __init__(self, importer: ImportResolver) -> None:
        self._importer = importer
        self.loaded: list[str] = []

    @property
    def locator(self) -> FileLocator:
        return self._importer.locator

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return isinstance(resource, str) and resource.endswith(".conf") and type in (None, "conf")

    def load(self, resource: str, type: str | None = None) -> dict[str, Any]:
        self.loaded.append(resource)
        with open(resource, encoding="utf-8") as f:
            lines = [line.strip() for line in f]

        imports = []
        with self._importer.current_directory(os.path.dirname(resource)):
            for line in lines:
                if line.startswith("import? "):
                    value = self._importer.import_resource(
                        line[8:], ignore_errors=True, source_resource=resource
                    )
                elif line.startswith("import "):
                    value = self._importer.import_resource(line[7:], source_resource=resource)
                else:
                    continue
                imports.append(value)
        return {"path": resource, "imports": imports}


@pytest.fixture
def make_tree(tmp_path):
    """Return a helper creating files (and parent directories) below a root."""

    def make(files: dict[str, str], root: Path | None = None) -> Path:
        root = root or tmp_path
        for name, content in files.items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return make


@pytest.fixture
def import_context() -> ImportContext:
    return ImportContext()


@pytest.fixture
def loader_resolver() -> LoaderResolver:
    return LoaderResolver()


@pytest.fixture
def importer(tmp_path, loader_resolver, import_context) -> ImportResolver:
    """Import resolver rooted at tmp_path with an explicit import context."""
    return ImportResolver(
        FileLocator(), loader_resolver, current_dir=tmp_path, context=import_context
    )


@pytest.fixture
def text_loader(importer, loader_resolver) -> TextFileLoader:
    loader = TextFileLoader(importer)
    loader_resolver.add_loader(loader)
    return loader


@pytest.fixture
def make_text_importer():
    """Return a factory for an import resolver with a TextFileLoader and no fixed context."""

    def make(paths=(), current_dir=None) -> tuple[ImportResolver, TextFileLoader]:
        resolver = LoaderResolver()
        importer = ImportResolver(FileLocator(paths), resolver, current_dir=current_dir)
        loader = TextFileLoader(importer)
        resolver.add_loader(loader)
        return importer, loader

    return make


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
