"""Filesystem implementation of the FileLocator port.

Example
-------
.. code-block:: python

    locator = FileLocator(["/etc/app", "/srv/app/config"])
    locator.locate("services.yaml")                    # first match
    locator.locate("services.yaml", first=False)       # every match
    locator.locate("local.yaml", current_path="/srv")  # /srv searched first
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from confcache.kernel.exceptions import FileLocatorFileNotFoundError
from confcache.kernel.logging import get_logger

logger = get_logger(__name__)


class FileLocator:
    """Locate files in a current directory and a list of search paths."""

    def __init__(self, paths: str | os.PathLike[str] | Iterable[str | os.PathLike[str]] = ()):
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self._paths = [os.fspath(p) for p in paths]

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def locate(
        self, name: str, current_path: str | None = None, first: bool = True
    ) -> str | list[str]:
        """Return the absolute path(s) of an existing file or directory.

        Absolute names are only checked for existence. Relative names are
        searched in ``current_path`` first, then in the configured paths.

        Raises
        ------
        ValueError
            If ``name`` is empty
        FileLocatorFileNotFoundError
            If no candidate exists
        """
        if not name:
            raise ValueError("An empty file name is not valid to be located.")

        if os.path.isabs(name):
            if not os.path.exists(name):
                raise FileLocatorFileNotFoundError(name)
            path = os.path.normpath(name)
            return path if first else [path]

        search_paths = list(self._paths)
        if current_path is not None:
            search_paths.insert(0, current_path)

        found: list[str] = []
        for directory in search_paths:
            candidate = os.path.abspath(os.path.join(directory, name))
            if os.path.exists(candidate) and candidate not in found:
                if first:
                    return candidate
                found.append(candidate)

        if not found:
            logger.debug("Could not locate {name} in {paths}", name=name, paths=search_paths)
            raise FileLocatorFileNotFoundError(name, search_paths)

        return found
