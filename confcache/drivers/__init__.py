"""Concrete implementations of confcache ports."""

from confcache.drivers.file_locator import FileLocator

__all__ = ["FileLocator"]
