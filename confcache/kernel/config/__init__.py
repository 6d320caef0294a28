"""confcache settings."""

from confcache.kernel.config.loader import ConfigLoader, load_config
from confcache.kernel.config.models import ConfCacheConfig, LoggingConfig

__all__ = ["ConfCacheConfig", "ConfigLoader", "LoggingConfig", "load_config"]
