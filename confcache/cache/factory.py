"""Factories returning up-to-date caches."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from confcache.cache.config_cache import ConfigCache
from confcache.cache.resource_checker_cache import ResourceCheckerConfigCache
from confcache.kernel.logging import get_logger

if TYPE_CHECKING:
    from confcache.kernel.ports import ResourceChecker

logger = get_logger(__name__)


class ConfigCacheFactory:
    """Create :class:`ConfigCache` instances, rebuilding stale ones.

    Examples
    --------
    .. code-block:: python

        def build(cache: ConfigCache) -> None:
            cache.write(render(), resources)

        cache = ConfigCacheFactory(debug=True).cache("var/cache/app.json", build)
    """

    def __init__(self, debug: bool) -> None:
        self._debug = debug

    def cache(
        self,
        file: str | os.PathLike[str],
        callback: Callable[[ConfigCache], object],
    ) -> ConfigCache:
        """Return a cache for ``file``, calling ``callback(cache)`` when it is stale."""
        cache = ConfigCache(file, self._debug)
        if not cache.is_fresh():
            logger.info("Rebuilding configuration cache {file}", file=cache.path)
            callback(cache)
        return cache


class ResourceCheckerConfigCacheFactory:
    """Create :class:`ResourceCheckerConfigCache` instances sharing checkers."""

    def __init__(self, checkers: Iterable[ResourceChecker] = ()) -> None:
        self._checkers = tuple(checkers)

    def cache(
        self,
        file: str | os.PathLike[str],
        callback: Callable[[ResourceCheckerConfigCache], object],
    ) -> ResourceCheckerConfigCache:
        """Return a cache for ``file``, calling ``callback(cache)`` when it is stale."""
        cache = ResourceCheckerConfigCache(file, self._checkers)
        if not cache.is_fresh():
            logger.info("Rebuilding configuration cache {file}", file=cache.path)
            callback(cache)
        return cache
