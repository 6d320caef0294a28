"""Glob pattern helpers.

Splits a wildcard pattern into the literal directory prefix that can be
located on disk and the remainder that has to be matched, and translates
the remainder into a regular expression.

Supported syntax: ``*`` and ``?`` (never crossing ``/``), ``**`` (any
number of directories, recursive mode only), ``[abc]``, ``[!abc]`` and
``{yaml,yml}`` alternation.
"""

from __future__ import annotations

import posixpath
import re
from functools import lru_cache

WILDCARD_CHARS = "*?{["


def find_wildcard(value: str) -> int:
    """Return the index of the first wildcard character, or ``len(value)``.

    >>> find_wildcard("config/*.yaml")
    7
    >>> find_wildcard("config/app.yaml")
    15
    """
    for i, char in enumerate(value):
        if char in WILDCARD_CHARS:
            return i
    return len(value)


def is_glob(value: object) -> bool:
    """Return True if ``value`` is a string containing a wildcard character."""
    return isinstance(value, str) and find_wildcard(value) != len(value)


def split_pattern(pattern: str) -> tuple[str, str]:
    """Split a glob pattern into a literal prefix and a remainder.

    A wildcard in the first path segment anchors the pattern to the current
    directory (``"."``).

    >>> split_pattern("config/packages/*.yaml")
    ('config/packages', '/*.yaml')
    >>> split_pattern("*.yaml")
    ('.', '/*.yaml')
    >>> split_pattern("config/app.yaml")
    ('config/app.yaml', '')
    """
    i = find_wildcard(pattern)
    if i == len(pattern):
        return pattern, ""
    if i == 0 or "/" not in pattern[:i]:
        return ".", "/" + pattern

    prefix = posixpath.dirname(pattern[: i + 1])
    return prefix, pattern[len(prefix) :]


def is_subpath_pattern(pattern: str) -> bool:
    """Return True if a separator precedes the first wildcard of ``pattern``."""
    i = find_wildcard(pattern)
    return i != 0 and "/" in pattern[:i]


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str, recursive: bool = True) -> re.Pattern[str]:
    """Compile a glob pattern into an anchored regular expression.

    Raises
    ------
    ValueError
        If the pattern contains unbalanced braces
    """
    parts: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "*":
            if pattern.startswith("**", i) and recursive:
                if pattern.startswith("/", i + 2):
                    parts.append("(?:.*/)?")
                    i += 3
                else:
                    parts.append(".*")
                    i += 2
                continue
            parts.append("[^/]*")
            while i + 1 < n and pattern[i + 1] == "*":
                i += 1
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            end = _class_end(pattern, i)
            if end == -1:
                parts.append(re.escape(char))
            else:
                parts.append(_translate_class(pattern[i + 1 : end]))
                i = end
        elif char == "{":
            depth += 1
            parts.append("(?:")
        elif char == "," and depth:
            parts.append("|")
        elif char == "}" and depth:
            depth -= 1
            parts.append(")")
        elif char == "\\" and i + 1 < n:
            i += 1
            parts.append(re.escape(pattern[i]))
        else:
            parts.append(re.escape(char))
        i += 1

    if depth:
        raise ValueError(f"Unbalanced braces in glob pattern: {pattern!r}")

    return re.compile("".join(parts))


def _class_end(pattern: str, start: int) -> int:
    i = start + 1
    if i < len(pattern) and pattern[i] in "!^":
        i += 1
    # A leading "]" is part of the class
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    return pattern.find("]", i)


def _translate_class(content: str) -> str:
    negated = content[:1] in ("!", "^")
    if negated:
        content = content[1:]
    content = content.replace("\\", "\\\\").replace("]", "\\]")
    if negated:
        return f"[^/{content}]"
    if content.startswith("^"):
        content = "\\" + content
    return f"[{content}]"
