"""File locator port."""

from __future__ import annotations

from typing import Literal, Protocol, overload, runtime_checkable


@runtime_checkable
class FileLocator(Protocol):
    """Port for mapping a resource name to existing absolute paths."""

    @overload
    def locate(
        self, name: str, current_path: str | None = None, first: Literal[True] = True
    ) -> str: ...

    @overload
    def locate(
        self, name: str, current_path: str | None = None, first: Literal[False] = ...
    ) -> list[str]: ...

    def locate(
        self, name: str, current_path: str | None = None, first: bool = True
    ) -> str | list[str]:
        """Return the full path (or every matching path) for a resource name.

        Parameters
        ----------
        name : str
            Resource name, relative or absolute
        current_path : str | None
            Directory searched before the locator's own search paths
        first : bool
            Return only the first match instead of all of them

        Raises
        ------
        FileLocatorFileNotFoundError
            If the name cannot be resolved to an existing path
        """
        ...
