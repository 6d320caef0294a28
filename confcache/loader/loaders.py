"""Loaders that do not interpret file content.

These loaders only route resources back through an
:class:`~confcache.loader.import_resolver.ImportResolver`; format-specific
loaders are expected to be registered alongside them. Loaders append the
resources they depend on to ``resources`` so the caller can record them as
cache dependencies.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from confcache.resource.file_resource import FileExistenceResource
from confcache.resource.glob_resource import GlobResource

if TYPE_CHECKING:
    from confcache.kernel.ports import FileLocator
    from confcache.loader.import_resolver import ImportResolver
    from confcache.resource.tracked import TrackedResource


class GlobFileLoader:
    """Import every path matched by a pattern (type ``"glob"``)."""

    def __init__(self, importer: ImportResolver) -> None:
        self._importer = importer
        self.resources: list[TrackedResource] = []

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return type == "glob"

    def load(self, resource: str, type: str | None = None) -> list[Any]:
        globs = self._importer.glob_resources(resource)
        self.resources.extend(globs)

        results = []
        for glob in globs:
            for path in glob.paths():
                value = self._importer.import_resource(path, source_resource=resource)
                if value is not None:
                    results.append(value)
        return results


class DirectoryLoader:
    """Import every non-hidden entry of a directory (type ``"directory"``).

    Sub-directories are imported as directories too, so a whole tree is
    loaded depth first. Entries are imported with the directory as current
    directory.
    """

    def __init__(self, importer: ImportResolver) -> None:
        self._importer = importer
        self.resources: list[TrackedResource] = []

    @property
    def locator(self) -> FileLocator:
        return self._importer.locator

    def supports(self, resource: Any, type: str | None = None) -> bool:
        if type == "directory":
            return True
        return type is None and isinstance(resource, str) and resource.endswith("/")

    def load(self, resource: str, type: str | None = None) -> list[Any]:
        path = self.locator.locate(resource, self._importer.current_dir)
        self.resources.append(FileExistenceResource(path=path))
        self.resources.append(GlobResource(prefix=path, pattern="/*"))

        results = []
        with self._importer.current_directory(path):
            for name in sorted(os.listdir(path)):
                if name.startswith("."):
                    continue
                entry = name + "/" if os.path.isdir(os.path.join(path, name)) else name
                value = self._importer.import_resource(entry, source_resource=path)
                if value is not None:
                    results.append(value)
        return results


class CallableLoader:
    """Load a callable resource by calling it with the import resolver."""

    def __init__(self, importer: ImportResolver) -> None:
        self._importer = importer

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return callable(resource) and type in (None, "callable")

    def load(self, resource: Any, type: str | None = None) -> Any:
        return resource(self._importer)
