"""Tagged outcome of a single import call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from confcache.kernel.exceptions import (
    CircularImportError,
    ConfCacheError,
    FileLocatorFileNotFoundError,
)


class ImportOutcome(StrEnum):
    """How an import ended."""

    LOADED = "loaded"
    SUPPRESSED = "suppressed"
    NOT_FOUND = "not_found"
    CIRCULAR = "circular"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Result of :meth:`ImportResolver.try_import`.

    ``SUPPRESSED`` means the import produced nothing: its errors were
    ignored, or a glob matched no resource.

    Examples
    --------
    >>> result = ImportResult.loaded("app.yaml", {"debug": True})
    >>> result.ok, result.unwrap()
    (True, {'debug': True})
    """

    outcome: ImportOutcome
    resource: Any
    value: Any = None
    error: ConfCacheError | None = None

    @classmethod
    def loaded(cls, resource: Any, value: Any) -> ImportResult:
        return cls(ImportOutcome.LOADED, resource, value)

    @classmethod
    def suppressed(cls, resource: Any) -> ImportResult:
        return cls(ImportOutcome.SUPPRESSED, resource)

    @classmethod
    def failure(cls, resource: Any, error: ConfCacheError) -> ImportResult:
        if isinstance(error, CircularImportError):
            outcome = ImportOutcome.CIRCULAR
        elif isinstance(error, FileLocatorFileNotFoundError):
            outcome = ImportOutcome.NOT_FOUND
        else:
            outcome = ImportOutcome.FAILED
        return cls(outcome, resource, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, raising the recorded error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value
