"""Tracking of in-flight imports for cycle detection.

An :class:`ImportContext` is an ordered stack of the resources whose load
is in progress. The context of the running import operation is kept in a
:class:`contextvars.ContextVar`, so loaders that import further resources
share it while unrelated import operations (other threads, other top-level
calls) each get their own.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from confcache.kernel.logging import get_logger

logger = get_logger(__name__)

_active_context: contextvars.ContextVar[ImportContext | None] = contextvars.ContextVar(
    "confcache_import_context", default=None
)


class ImportContext:
    """Resources currently being loaded, in the order their loads started."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Any] = []

    def __contains__(self, resource: Any) -> bool:
        return resource in self._stack

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        return f"ImportContext(in_flight={self._stack!r})"

    @property
    def in_flight(self) -> tuple[Any, ...]:
        return tuple(self._stack)

    @contextmanager
    def loading(self, resource: Any) -> Iterator[None]:
        """Mark ``resource`` as in flight for the duration of the block."""
        self._stack.append(resource)
        logger.debug(
            "Loading {resource} (depth {depth})", resource=resource, depth=len(self._stack)
        )
        try:
            yield
        finally:
            self._stack.pop()


@contextmanager
def import_scope(context: ImportContext | None = None) -> Iterator[ImportContext]:
    """Activate an import context for the duration of the block.

    Without an explicit context the already active one is reused, or a
    fresh one is created for a top-level import.
    """
    active = _active_context.get()
    if context is None:
        context = active if active is not None else ImportContext()
    if context is active:
        yield context
        return

    token = _active_context.set(context)
    try:
        yield context
    finally:
        _active_context.reset(token)


def current_import_context() -> ImportContext | None:
    """Return the context of the import operation in progress, if any."""
    return _active_context.get()
