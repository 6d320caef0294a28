"""Port protocols consumed by the cache gate and the import resolver."""

from confcache.kernel.ports.loader import FileBasedLoader, Loader, LoaderResolver
from confcache.kernel.ports.locator import FileLocator
from confcache.kernel.ports.resource_checker import ResourceChecker, SelfCheckingResource

__all__ = [
    "FileBasedLoader",
    "FileLocator",
    "Loader",
    "LoaderResolver",
    "ResourceChecker",
    "SelfCheckingResource",
]
