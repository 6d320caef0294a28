"""Exception hierarchy for confcache.

All confcache exceptions inherit from ConfCacheError for easy exception
handling.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

# ============================================================================
# Base Exception
# ============================================================================


class ConfCacheError(Exception):
    """Base exception for all confcache errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(ConfCacheError):
    """Raised when confcache settings are invalid.

    Examples
    --------
    Example usage::

        raise ConfigurationError("logging", "level must be a string")
    """

    def __init__(self, component: str, reason: str) -> None:
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


# ============================================================================
# Locator Errors
# ============================================================================


class FileLocatorFileNotFoundError(ConfCacheError):
    """Raised when a locator cannot resolve a name to an existing path.

    Examples
    --------
    Example usage::

        raise FileLocatorFileNotFoundError("services.yaml", ["/etc/app", "/srv/app"])
    """

    def __init__(self, name: str, paths: Sequence[str] = ()) -> None:
        if paths:
            msg = f"The file '{name}' does not exist (in: {', '.join(paths)})"
        else:
            msg = f"The file '{name}' does not exist"
        super().__init__(msg)
        self.name = name
        self.paths = tuple(paths)


# ============================================================================
# Loader Errors
# ============================================================================


class LoaderNotFoundError(ConfCacheError):
    """Raised when no registered loader supports a resource."""

    def __init__(self, resource: Any, type: str | None = None) -> None:
        msg = f"Cannot find a loader for resource {_describe(resource)}"
        if type is not None:
            msg += f" of type '{type}'"
        super().__init__(msg)
        self.resource = resource
        self.type = type


class CircularImportError(ConfCacheError):
    """Raised when an import chain reaches a resource that is still loading.

    The ``chain`` attribute holds the in-flight resources in the order
    their loads started.

    Examples
    --------
    Example usage::

        raise CircularImportError(["a.yaml", "b.yaml"])
    """

    def __init__(self, chain: Sequence[Any]) -> None:
        self.chain = tuple(chain)
        if self.chain:
            path = " > ".join(str(r) for r in (*self.chain, self.chain[0]))
            msg = f"Circular reference detected in {_describe(self.chain[0])} ({path})"
        else:
            msg = "Circular reference detected"
        super().__init__(msg)


class LoaderLoadError(ConfCacheError):
    """Raised when a resource cannot be resolved or loaded.

    Wraps the underlying failure while keeping the resource that failed,
    the resource that requested it and the requested type.
    """

    def __init__(
        self,
        resource: Any,
        source_resource: Any = None,
        cause: BaseException | None = None,
        type: str | None = None,
    ) -> None:
        self.resource = resource
        self.source_resource = source_resource
        self.cause = cause
        self.type = type
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        resource = _describe(self.resource)
        if isinstance(self.cause, LoaderNotFoundError):
            msg = f"Cannot load resource {resource}"
            if self.source_resource is not None:
                msg += f" imported from {_describe(self.source_resource)}"
            if self.type is not None:
                msg += f". Make sure there is a loader supporting the '{self.type}' type"
            else:
                msg += ". Make sure there is a loader supporting this resource"
            return msg + "."

        cause = str(self.cause).rstrip(".") if self.cause is not None else ""
        msg = f"{cause} in {resource}" if cause else f"Failed to load resource {resource}"
        if self.source_resource is not None:
            msg += f" (which is being imported from {_describe(self.source_resource)})"
        return msg + "."


def _describe(resource: Any) -> str:
    if isinstance(resource, str):
        text = resource if len(resource) <= 120 else resource[:117] + "..."
        return f"'{text}'"
    return type(resource).__name__ if callable(resource) else repr(resource)
