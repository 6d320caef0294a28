"""Import resolution engine.

:class:`ImportResolver` resolves the resources named by configuration
"import" statements. Glob patterns are expanded into concrete paths, every
resource is handed to the loader that supports it, relative paths are
re-located against the current directory and import cycles are detected
through the active :class:`~confcache.loader.context.ImportContext`.

Examples
--------
.. code-block:: python

    locator = FileLocator("/etc/app")
    resolver = LoaderResolver()
    importer = ImportResolver(locator, resolver, current_dir="/etc/app")
    resolver.add_loader(DirectoryLoader(importer))

    importer.import_resource("packages/*.yaml")
    importer.import_resource("optional.yaml", ignore_errors=True)
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from confcache.kernel.exceptions import (
    CircularImportError,
    FileLocatorFileNotFoundError,
    LoaderLoadError,
    LoaderNotFoundError,
)
from confcache.kernel.logging import get_logger
from confcache.kernel.ports import FileBasedLoader, FileLocator, LoaderResolver
from confcache.loader.context import ImportContext, import_scope
from confcache.loader.import_result import ImportResult
from confcache.resource.glob_pattern import is_glob, is_subpath_pattern, split_pattern
from confcache.resource.glob_resource import GlobResource

logger = get_logger(__name__)

_NOTHING = object()


class ImportResolver:
    """Resolve, locate and load imported resources.

    Parameters
    ----------
    locator : FileLocator
        Locator used to find glob prefixes.
    resolver : LoaderResolver
        Selects the loader responsible for each resource.
    current_dir : str | None
        Directory relative resources are resolved against.
    context : ImportContext | None
        Fixed in-flight tracking context. When omitted, the context of the
        import operation in progress is used, or a fresh one per top-level
        import.
    """

    def __init__(
        self,
        locator: FileLocator,
        resolver: LoaderResolver,
        current_dir: str | os.PathLike[str] | None = None,
        context: ImportContext | None = None,
    ) -> None:
        self._locator = locator
        self._resolver = resolver
        self._current_dir = os.fspath(current_dir) if current_dir is not None else None
        self._context = context

    @property
    def locator(self) -> FileLocator:
        return self._locator

    @property
    def resolver(self) -> LoaderResolver:
        return self._resolver

    @property
    def current_dir(self) -> str | None:
        return self._current_dir

    @current_dir.setter
    def current_dir(self, path: str | os.PathLike[str] | None) -> None:
        self._current_dir = os.fspath(path) if path is not None else None

    @contextmanager
    def current_directory(self, path: str | os.PathLike[str] | None) -> Iterator[None]:
        """Temporarily resolve relative resources against ``path``."""
        previous = self._current_dir
        self.current_dir = path
        try:
            yield
        finally:
            self._current_dir = previous

    def import_resource(
        self,
        resource: Any,
        type: str | None = None,
        ignore_errors: bool = False,
        source_resource: Any = None,
    ) -> Any:
        """Import a resource, or every resource matched by a glob pattern.

        Returns
        -------
        Any
            The loaded value, a list of values when a pattern matched more
            than one resource, or None when nothing was loaded.

        Raises
        ------
        CircularImportError
            If the resource is already being loaded, even with ``ignore_errors``
        LoaderLoadError
            If resolving or loading fails and ``ignore_errors`` is False
        FileLocatorFileNotFoundError
            If the directory part of a sub-path pattern cannot be located
        """
        return self.try_import(resource, type, ignore_errors, source_resource).unwrap()

    def try_import(
        self,
        resource: Any,
        type: str | None = None,
        ignore_errors: bool = False,
        source_resource: Any = None,
    ) -> ImportResult:
        """Import like :meth:`import_resource` but return a tagged result."""
        with import_scope(self._context) as context:
            if is_glob(resource) and type != "glob":
                return self._import_glob(resource, type, ignore_errors, source_resource, context)
            return self._do_import(resource, type, ignore_errors, source_resource, context)

    def glob_resources(
        self,
        pattern: str,
        recursive: bool = False,
        ignore_errors: bool = False,
        for_exclusion: bool = False,
        excluded: Iterable[str] = (),
    ) -> list[GlobResource]:
        """Locate the literal prefix of ``pattern`` and build one glob per location.

        Raises
        ------
        FileLocatorFileNotFoundError
            If the prefix cannot be located and ``ignore_errors`` is False
        """
        prefix, remainder = split_pattern(pattern)
        try:
            located = self._locator.locate(prefix, self._current_dir, first=False)
        except FileLocatorFileNotFoundError:
            if not ignore_errors:
                raise
            logger.debug("Glob prefix {prefix} not found, ignoring", prefix=prefix)
            return []

        if isinstance(located, str):
            located = [located]
        return [
            GlobResource(
                prefix=path,
                pattern=remainder,
                recursive=recursive,
                for_exclusion=for_exclusion,
                excluded=tuple(excluded),
            )
            for path in located
        ]

    def glob(
        self,
        pattern: str,
        recursive: bool = False,
        ignore_errors: bool = False,
        for_exclusion: bool = False,
        excluded: Iterable[str] = (),
    ) -> Iterator[str]:
        """Yield the paths matched by ``pattern``, each once.

        With ``for_exclusion`` the members of ``excluded`` that no located
        prefix matches are yielded instead.
        """
        excluded = tuple(excluded)
        resources = self.glob_resources(pattern, recursive, ignore_errors, False, excluded)

        if for_exclusion:
            matched: set[str] = set()
            for resource in resources:
                matched.update(resource.model_copy(update={"excluded": ()}).paths())
            yield from (path for path in excluded if path not in matched)
            return

        seen: set[str] = set()
        for resource in resources:
            for path in resource.paths():
                if path not in seen:
                    seen.add(path)
                    yield path

    def _import_glob(
        self,
        pattern: str,
        type: str | None,
        ignore_errors: bool,
        source_resource: Any,
        context: ImportContext,
    ) -> ImportResult:
        subpath = is_subpath_pattern(pattern)
        try:
            paths = list(self.glob(pattern, False, ignore_errors or not subpath))
        except FileLocatorFileNotFoundError as e:
            return ImportResult.failure(pattern, e)
        except ValueError as e:
            if not subpath:
                logger.debug("Not expanding {pattern}: {error}", pattern=pattern, error=e)
                return self._do_import(pattern, type, ignore_errors, source_resource, context)
            if ignore_errors:
                logger.debug(
                    "Ignoring invalid pattern {pattern}: {error}", pattern=pattern, error=e
                )
                return ImportResult.suppressed(pattern)
            error = LoaderLoadError(pattern, source_resource, e, type)
            error.__cause__ = e
            return ImportResult.failure(pattern, error)

        if not paths and not subpath:
            # A bare pattern may name a non-file resource; let a loader decide
            return self._do_import(pattern, type, ignore_errors, source_resource, context)

        values = []
        for path in paths:
            result = self._do_import(path, type, ignore_errors, source_resource, context)
            if not result.ok:
                return result
            if result.value is not None:
                values.append(result.value)

        if not values:
            return ImportResult.suppressed(pattern)
        return ImportResult.loaded(pattern, values if len(values) > 1 else values[0])

    def _do_import(
        self,
        resource: Any,
        type: str | None,
        ignore_errors: bool,
        source_resource: Any,
        context: ImportContext,
    ) -> ImportResult:
        target = resource
        try:
            loader = self._resolver.resolve(resource, type)
            if loader is None:
                raise LoaderNotFoundError(resource, type)

            if isinstance(loader, FileBasedLoader) and self._current_dir is not None:
                resource = loader.locator.locate(resource, self._current_dir, first=False)

            candidates = resource if isinstance(resource, (list, tuple)) else [resource]
            pending = next((c for c in candidates if c not in context), _NOTHING)
            if pending is _NOTHING:
                raise CircularImportError(context.in_flight)
            target = pending

            with context.loading(target):
                value = loader.load(target, type)
            return ImportResult.loaded(target, value)

        except CircularImportError as e:
            return ImportResult.failure(target, e)
        except Exception as e:
            if ignore_errors:
                logger.debug(
                    "Ignoring failed import of {resource}: {error}", resource=target, error=e
                )
                return ImportResult.suppressed(target)
            # Nested imports already produced a complete error
            if isinstance(e, LoaderLoadError):
                return ImportResult.failure(target, e)
            error = LoaderLoadError(target, source_resource, e, type)
            error.__cause__ = e
            return ImportResult.failure(target, error)
