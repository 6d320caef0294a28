"""Resource checkers."""

from __future__ import annotations

from typing import Any

from confcache.kernel.ports import SelfCheckingResource


class SelfCheckingResourceChecker:
    """Check resources that know how to check their own freshness."""

    def supports(self, resource: Any) -> bool:
        return isinstance(resource, SelfCheckingResource)

    def is_fresh(self, resource: SelfCheckingResource, timestamp: float) -> bool:
        return resource.is_fresh(timestamp)
