"""Self-checking resources backed by a single filesystem path."""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class FileResource(BaseModel):
    """A file whose modification time must not be newer than the cache.

    Examples
    --------
    >>> resource = FileResource(path="config/services.yaml")  # doctest: +SKIP
    >>> resource.is_fresh(cache_mtime)  # doctest: +SKIP
    True
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        return os.path.abspath(value)

    def is_fresh(self, timestamp: float) -> bool:
        try:
            return os.stat(self.path).st_mtime <= timestamp
        except OSError:
            return False

    def __str__(self) -> str:
        return self.path


class FileExistenceResource(BaseModel):
    """Tracks whether a path exists, regardless of its content.

    The existence state is captured when the resource is created; the
    resource is fresh as long as that state has not flipped.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["file_existence"] = "file_existence"
    path: str
    exists: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _capture_existence(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("exists") is None and "path" in data:
            data = {**data, "exists": os.path.exists(data["path"])}
        return data

    def is_fresh(self, timestamp: float) -> bool:
        return os.path.exists(self.path) == self.exists

    def __str__(self) -> str:
        return self.path
