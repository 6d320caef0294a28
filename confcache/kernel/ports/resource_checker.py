"""Resource checker port."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResourceChecker(Protocol):
    """Port for deciding whether a tracked resource changed since a timestamp.

    A cache asks every checker about every tracked resource. Checkers skip
    the resources they do not support.
    """

    def supports(self, resource: Any) -> bool:
        """Return True if this checker knows how to check the resource."""
        ...

    def is_fresh(self, resource: Any, timestamp: float) -> bool:
        """Return True if the resource has not changed since ``timestamp``."""
        ...


@runtime_checkable
class SelfCheckingResource(Protocol):
    """A resource that can check its own freshness."""

    def is_fresh(self, timestamp: float) -> bool:
        """Return True if the resource has not changed since ``timestamp``."""
        ...
