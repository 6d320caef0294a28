"""Configuration cache freshness gate."""

from confcache.cache.checkers import SelfCheckingResourceChecker
from confcache.cache.config_cache import ConfigCache
from confcache.cache.factory import ConfigCacheFactory, ResourceCheckerConfigCacheFactory
from confcache.cache.resource_checker_cache import ResourceCheckerConfigCache

__all__ = [
    "ConfigCache",
    "ConfigCacheFactory",
    "ResourceCheckerConfigCache",
    "ResourceCheckerConfigCacheFactory",
    "SelfCheckingResourceChecker",
]
