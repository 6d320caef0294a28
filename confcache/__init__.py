"""confcache: configuration cache freshness and import resolution.

Decides whether a compiled configuration cache can be reused and resolves
configuration imports, including glob patterns and cycle detection.
"""

try:
    from importlib.metadata import version

    __version__ = version("confcache")
except Exception:
    __version__ = "0.0.0.dev0"

from confcache.cache import (
    ConfigCache,
    ConfigCacheFactory,
    ResourceCheckerConfigCache,
    ResourceCheckerConfigCacheFactory,
    SelfCheckingResourceChecker,
)
from confcache.drivers import FileLocator
from confcache.kernel.exceptions import (
    CircularImportError,
    ConfCacheError,
    FileLocatorFileNotFoundError,
    LoaderLoadError,
    LoaderNotFoundError,
)
from confcache.loader import (
    CallableLoader,
    DelegatingLoader,
    DirectoryLoader,
    GlobFileLoader,
    ImportContext,
    ImportOutcome,
    ImportResolver,
    ImportResult,
    LoaderResolver,
)
from confcache.resource import (
    FileExistenceResource,
    FileResource,
    GlobResource,
    RecursiveDirectoryIterator,
)

__all__ = [
    "CallableLoader",
    "CircularImportError",
    "ConfCacheError",
    "ConfigCache",
    "ConfigCacheFactory",
    "DelegatingLoader",
    "DirectoryLoader",
    "FileExistenceResource",
    "FileLocator",
    "FileLocatorFileNotFoundError",
    "FileResource",
    "GlobFileLoader",
    "GlobResource",
    "ImportContext",
    "ImportOutcome",
    "ImportResolver",
    "ImportResult",
    "LoaderLoadError",
    "LoaderNotFoundError",
    "LoaderResolver",
    "RecursiveDirectoryIterator",
    "ResourceCheckerConfigCache",
    "ResourceCheckerConfigCacheFactory",
    "SelfCheckingResourceChecker",
    "__version__",
]
