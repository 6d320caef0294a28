"""Serialization of tracked resources for cache metadata files."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated

from pydantic import Field, TypeAdapter

from confcache.resource.file_resource import FileExistenceResource, FileResource
from confcache.resource.glob_resource import GlobResource

TrackedResource = Annotated[
    FileResource | FileExistenceResource | GlobResource,
    Field(discriminator="kind"),
]

_ADAPTER: TypeAdapter[list[TrackedResource]] = TypeAdapter(list[TrackedResource])


def dump_resources(resources: Iterable[TrackedResource]) -> bytes:
    """Serialize tracked resources to JSON bytes."""
    return _ADAPTER.dump_json(list(resources))


def load_resources(data: str | bytes) -> list[TrackedResource]:
    """Deserialize tracked resources.

    Raises
    ------
    pydantic.ValidationError
        If the payload is not a list of known resource kinds
    """
    return _ADAPTER.validate_json(data)
