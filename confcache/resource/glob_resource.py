"""Glob resource: expands a located prefix and a pattern into paths.

The resource walks the prefix directory with
:class:`~confcache.resource.directory_iterator.RecursiveDirectoryIterator`
and keeps the files whose path, relative to the prefix, matches the
pattern. It is also a self-checking resource: its freshness is a hash of
the matched paths and their modification times.
"""

from __future__ import annotations

import hashlib
import os
import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_serializer

from confcache.kernel.logging import get_logger
from confcache.resource.directory_iterator import RecursiveDirectoryIterator
from confcache.resource.glob_pattern import glob_to_regex

logger = get_logger(__name__)


class GlobResource(BaseModel):
    """Files below ``prefix`` matching ``pattern``.

    Attributes
    ----------
    prefix : str
        Located directory (or file) the pattern is relative to.
    pattern : str
        Remainder pattern, usually starting with ``/``.
    recursive : bool
        Let ``**`` cross directories and expand matched directories.
    for_exclusion : bool
        Produce the members of ``excluded`` that do NOT match instead of
        the matches.
    excluded : tuple[str, ...]
        Paths (files or directories) to leave out of the matches, or the
        candidate set when ``for_exclusion`` is set.
    hash : str | None
        Recorded fingerprint; filled in when the resource is serialized.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["glob"] = "glob"
    prefix: str
    pattern: str = ""
    recursive: bool = False
    for_exclusion: bool = False
    excluded: tuple[str, ...] = ()
    hash: str | None = None

    def paths(self) -> list[str]:
        """Return the expanded paths, sorted."""
        matches = self._matches()
        if self.for_exclusion:
            matched = set(matches)
            return [path for path in self.excluded if path not in matched]
        if self.excluded:
            matches = [path for path in matches if not self._is_excluded(path)]
        return matches

    def compute_hash(self) -> str:
        digest = hashlib.sha256()
        for path in self.paths():
            try:
                mtime = os.stat(path).st_mtime_ns
            except OSError:
                mtime = -1
            digest.update(f"{path}\0{mtime}\n".encode())
        return digest.hexdigest()

    def is_fresh(self, timestamp: float) -> bool:
        return self.hash is not None and self.compute_hash() == self.hash

    @field_serializer("hash")
    def _serialize_hash(self, value: str | None) -> str:
        return value if value is not None else self.compute_hash()

    def __str__(self) -> str:
        return f"glob.{self.prefix}{self.pattern}"

    def _matches(self) -> list[str]:
        if not os.path.exists(self.prefix):
            return []
        if not os.path.isdir(self.prefix):
            return [self.prefix] if not self.pattern else []
        if not self.recursive and not self.pattern:
            return []

        regex = glob_to_regex(self.pattern, self.recursive) if self.pattern else None
        start = len(self.prefix)
        matches: list[str] = []

        for path in RecursiveDirectoryIterator(self.prefix):
            relative = path[start:]
            if self.recursive:
                if os.path.isdir(path):
                    continue
                if regex is None or _matches_path_or_parent(regex, relative):
                    matches.append(path)
            elif regex is not None and regex.fullmatch(relative) and not os.path.isdir(path):
                matches.append(path)

        matches.sort()
        logger.debug(
            "Glob {prefix}{pattern} matched {count} path(s)",
            prefix=self.prefix,
            pattern=self.pattern,
            count=len(matches),
        )
        return matches

    def _is_excluded(self, path: str) -> bool:
        return any(
            path == excluded or path.startswith(excluded.rstrip(os.sep) + os.sep)
            for excluded in self.excluded
        )


def _matches_path_or_parent(regex: re.Pattern[str], relative: str) -> bool:
    end = relative.find("/", 1)
    while end != -1:
        if regex.fullmatch(relative[:end]):
            return True
        end = relative.find("/", end + 1)
    return regex.fullmatch(relative) is not None
