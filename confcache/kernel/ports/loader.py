"""Loader ports.

A loader turns one resource into a usable artifact. Loaders are selected
by their :meth:`Loader.supports` predicate through a :class:`LoaderResolver`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from confcache.kernel.ports.locator import FileLocator


@runtime_checkable
class Loader(Protocol):
    """Port for anything that can load a resource."""

    def supports(self, resource: Any, type: str | None = None) -> bool:
        """Return True if this loader can load the given resource."""
        ...

    def load(self, resource: Any, type: str | None = None) -> Any:
        """Load a resource and return the resulting artifact.

        Implementations may themselves import further resources.
        """
        ...


@runtime_checkable
class FileBasedLoader(Loader, Protocol):
    """A loader whose resources are files found through a locator."""

    @property
    def locator(self) -> FileLocator:
        """Locator used to resolve this loader's resources."""
        ...


@runtime_checkable
class LoaderResolver(Protocol):
    """Port for selecting the loader responsible for a resource."""

    def resolve(self, resource: Any, type: str | None = None) -> Loader | None:
        """Return a loader able to load the resource, or None."""
        ...
