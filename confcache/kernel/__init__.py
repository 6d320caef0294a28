"""confcache kernel: exceptions, logging, settings and port protocols."""

from confcache.kernel.config import ConfCacheConfig, ConfigLoader, LoggingConfig, load_config
from confcache.kernel.exceptions import (
    CircularImportError,
    ConfCacheError,
    ConfigurationError,
    FileLocatorFileNotFoundError,
    LoaderLoadError,
    LoaderNotFoundError,
)
from confcache.kernel.logging import configure_from_settings, configure_logging, get_logger
from confcache.kernel.ports import (
    FileBasedLoader,
    FileLocator,
    Loader,
    LoaderResolver,
    ResourceChecker,
    SelfCheckingResource,
)

__all__ = [
    "CircularImportError",
    "ConfCacheConfig",
    "ConfCacheError",
    "ConfigLoader",
    "ConfigurationError",
    "FileBasedLoader",
    "FileLocator",
    "FileLocatorFileNotFoundError",
    "Loader",
    "LoaderLoadError",
    "LoaderNotFoundError",
    "LoaderResolver",
    "LoggingConfig",
    "ResourceChecker",
    "SelfCheckingResource",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "load_config",
]
