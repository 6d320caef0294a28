"""Lazy depth-first enumeration of every path below a directory.

The walk keeps one cursor per directory level on an explicit stack instead
of nesting iterators, so deep trees never grow the Python call stack and
the position of an interrupted walk is plain data.
"""

from __future__ import annotations

import os
import stat
from collections import deque
from dataclasses import dataclass, field

from confcache.kernel.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class DirectoryCursor:
    """Position inside one directory of an ongoing walk.

    Attributes
    ----------
    path : str
        Directory being listed.
    pending : deque[str] | None
        Entry names not visited yet; None until the directory is listed.
    identity : tuple[int, int] | None
        ``(st_dev, st_ino)`` of the directory, used to refuse symlink loops.
    """

    path: str
    pending: deque[str] | None = None
    identity: tuple[int, int] | None = field(default=None, compare=False)


class RecursiveDirectoryIterator:
    """Iterate every path below ``path``, depth first.

    A sub-directory is exhausted before its parent's remaining siblings and
    its own path is produced after all of its descendants. Directories that
    cannot be listed contribute nothing, entries that cannot be stat'ed are
    skipped. The root itself is never produced.

    Examples
    --------
    >>> for path in RecursiveDirectoryIterator("/etc/app"):  # doctest: +SKIP
    ...     print(path)
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = os.fspath(path)
        self._stack: list[DirectoryCursor] = [
            DirectoryCursor(self._path, identity=_identity(self._path))
        ]

    @property
    def path(self) -> str:
        return self._path

    @property
    def cursors(self) -> tuple[DirectoryCursor, ...]:
        """Snapshot of the walk stack, root first."""
        return tuple(self._stack)

    def __iter__(self) -> RecursiveDirectoryIterator:
        return self

    def __next__(self) -> str:
        while self._stack:
            cursor = self._stack[-1]
            if cursor.pending is None:
                cursor.pending = deque(_list_directory(cursor.path))

            if not cursor.pending:
                self._stack.pop()
                if self._stack:
                    return cursor.path
                continue

            entry = os.path.join(cursor.path, cursor.pending.popleft())
            try:
                st = os.stat(entry)
            except OSError:
                continue

            if not stat.S_ISDIR(st.st_mode):
                return entry

            identity = (st.st_dev, st.st_ino)
            if any(c.identity == identity for c in self._stack):
                logger.debug("Skipping directory loop at {path}", path=entry)
                continue
            self._stack.append(DirectoryCursor(entry, identity=identity))

        raise StopIteration


def _list_directory(path: str) -> list[str]:
    try:
        return os.listdir(path)
    except OSError as e:
        logger.debug("Cannot list {path}: {error}", path=path, error=e)
        return []


def _identity(path: str) -> tuple[int, int] | None:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)
