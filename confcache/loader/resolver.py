"""Loader selection by capability."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from confcache.kernel.exceptions import LoaderLoadError, LoaderNotFoundError
from confcache.kernel.ports import Loader


class LoaderResolver:
    """Pick the first registered loader whose ``supports()`` accepts a resource.

    Examples
    --------
    >>> resolver = LoaderResolver()
    >>> resolver.resolve("app.yaml") is None
    True
    """

    def __init__(self, loaders: Iterable[Loader] = ()) -> None:
        self._loaders: list[Loader] = []
        for loader in loaders:
            self.add_loader(loader)

    @property
    def loaders(self) -> tuple[Loader, ...]:
        return tuple(self._loaders)

    def add_loader(self, loader: Loader) -> None:
        self._loaders.append(loader)

    def resolve(self, resource: Any, type: str | None = None) -> Loader | None:
        for loader in self._loaders:
            if loader.supports(resource, type):
                return loader
        return None


class DelegatingLoader:
    """Loader that forwards to whichever loader a resolver selects."""

    def __init__(self, resolver: LoaderResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> LoaderResolver:
        return self._resolver

    def supports(self, resource: Any, type: str | None = None) -> bool:
        return self._resolver.resolve(resource, type) is not None

    def load(self, resource: Any, type: str | None = None) -> Any:
        """Load ``resource`` with the loader that supports it.

        Raises
        ------
        LoaderLoadError
            If no loader supports the resource
        """
        loader = self._resolver.resolve(resource, type)
        if loader is None:
            raise LoaderLoadError(resource, cause=LoaderNotFoundError(resource, type), type=type)
        return loader.load(resource, type)
