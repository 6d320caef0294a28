"""Configuration cache gate.

Outside debug mode an existing cache file is trusted without looking at its
dependencies: no stat call per tracked resource on every start. Stale
caches then have to be removed by deployment tooling. In debug mode every
tracked resource is checked.

Examples
--------
.. code-block:: python

    cache = ConfigCache("var/cache/config.json", debug=settings.debug)
    if not cache.is_fresh():
        content, resources = compile_configuration()
        cache.write(content, resources)
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

from confcache.cache.checkers import SelfCheckingResourceChecker
from confcache.cache.resource_checker_cache import ResourceCheckerConfigCache
from confcache.kernel.logging import get_logger

if TYPE_CHECKING:
    from confcache.kernel.ports import ResourceChecker

logger = get_logger(__name__)


class ConfigCache(ResourceCheckerConfigCache):
    """Cache gate that only checks dependencies in debug mode.

    Parameters
    ----------
    file : str | os.PathLike[str]
        Path of the cache file.
    debug : bool
        Check tracked resources even when the cache file exists.
    checkers : Iterable[ResourceChecker] | None
        Checkers to use; defaults to a :class:`SelfCheckingResourceChecker`
        in debug mode and none otherwise.
    """

    def __init__(
        self,
        file: str | os.PathLike[str],
        debug: bool,
        checkers: Iterable[ResourceChecker] | None = None,
    ) -> None:
        if checkers is None:
            checkers = [SelfCheckingResourceChecker()] if debug else []
        super().__init__(file, checkers)
        self._debug = debug

    @property
    def debug(self) -> bool:
        return self._debug

    def is_fresh(self) -> bool:
        if not self._debug and os.path.isfile(self.path):
            logger.debug("Trusting existing cache {file} (debug off)", file=self.path)
            return True

        return super().is_fresh()
