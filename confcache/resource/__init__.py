"""Tracked resources and the directory/glob enumeration they rely on."""

from confcache.resource.directory_iterator import DirectoryCursor, RecursiveDirectoryIterator
from confcache.resource.file_resource import FileExistenceResource, FileResource
from confcache.resource.glob_pattern import (
    find_wildcard,
    glob_to_regex,
    is_glob,
    is_subpath_pattern,
    split_pattern,
)
from confcache.resource.glob_resource import GlobResource
from confcache.resource.tracked import TrackedResource, dump_resources, load_resources

__all__ = [
    "DirectoryCursor",
    "FileExistenceResource",
    "FileResource",
    "GlobResource",
    "RecursiveDirectoryIterator",
    "TrackedResource",
    "dump_resources",
    "find_wildcard",
    "glob_to_regex",
    "is_glob",
    "is_subpath_pattern",
    "load_resources",
    "split_pattern",
]
