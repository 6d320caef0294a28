"""Cache file whose freshness is decided by resource checkers.

The cache content lives in ``<file>``; the resources it was built from are
recorded in ``<file>.meta`` as JSON. The cache is fresh when the file
exists and every checker accepts every recorded resource it supports.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable, Sequence
from contextlib import suppress
from typing import TYPE_CHECKING

from pydantic import ValidationError

from confcache.kernel.logging import get_logger
from confcache.resource.tracked import dump_resources, load_resources

if TYPE_CHECKING:
    from confcache.kernel.ports import ResourceChecker
    from confcache.resource.tracked import TrackedResource

logger = get_logger(__name__)

META_SUFFIX = ".meta"


class ResourceCheckerConfigCache:
    """Cache file validated against the resources recorded with it.

    Parameters
    ----------
    file : str | os.PathLike[str]
        Path of the cache file.
    checkers : Iterable[ResourceChecker]
        Checkers consulted, in order, for every recorded resource. A cache
        without checkers is fresh as soon as the file exists.
    """

    def __init__(
        self, file: str | os.PathLike[str], checkers: Iterable[ResourceChecker] = ()
    ) -> None:
        self._file = os.fspath(file)
        self._checkers: tuple[ResourceChecker, ...] = tuple(checkers)

    @property
    def path(self) -> str:
        return self._file

    @property
    def meta_path(self) -> str:
        return self._file + META_SUFFIX

    @property
    def checkers(self) -> tuple[ResourceChecker, ...]:
        return self._checkers

    def is_fresh(self) -> bool:
        """Return True if the cache file exists and no recorded resource changed."""
        if not os.path.isfile(self._file):
            return False

        if not self._checkers:
            return True

        resources = self.read_resources()
        if resources is None:
            return False

        timestamp = os.stat(self._file).st_mtime
        for resource in resources:
            for checker in self._checkers:
                if not checker.supports(resource):
                    continue
                if checker.is_fresh(resource, timestamp):
                    continue
                logger.debug(
                    "Cache {file} is stale: {resource} changed", file=self._file, resource=resource
                )
                return False

        return True

    def read_resources(self) -> list[TrackedResource] | None:
        """Return the recorded resources, or None if the metadata is unusable."""
        try:
            with open(self.meta_path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(
                "Cannot read cache metadata {path}: {error}", path=self.meta_path, error=e
            )
            return None

        try:
            return load_resources(data)
        except ValidationError as e:
            logger.warning(
                "Invalid cache metadata {path}: {count} error(s)",
                path=self.meta_path,
                count=e.error_count(),
            )
            return None

    def write(
        self, content: str | bytes, resources: Sequence[TrackedResource] | None = None
    ) -> None:
        """Atomically write the cache file, and its metadata when resources are given."""
        _dump_file(self._file, content.encode() if isinstance(content, str) else content)

        if resources is not None:
            _dump_file(self.meta_path, dump_resources(resources))

        logger.debug(
            "Wrote cache {file} with {count} tracked resource(s)",
            file=self._file,
            count=len(resources) if resources is not None else 0,
        )


def _dump_file(path: str, data: bytes) -> None:
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".confcache-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        with suppress(OSError):
            os.unlink(tmp_path)
        raise
