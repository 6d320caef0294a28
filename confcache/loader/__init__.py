"""Import resolution and loader selection."""

from confcache.loader.context import ImportContext, current_import_context, import_scope
from confcache.loader.import_resolver import ImportResolver
from confcache.loader.import_result import ImportOutcome, ImportResult
from confcache.loader.loaders import CallableLoader, DirectoryLoader, GlobFileLoader
from confcache.loader.resolver import DelegatingLoader, LoaderResolver

__all__ = [
    "CallableLoader",
    "DelegatingLoader",
    "DirectoryLoader",
    "GlobFileLoader",
    "ImportContext",
    "ImportOutcome",
    "ImportResolver",
    "ImportResult",
    "LoaderResolver",
    "current_import_context",
    "import_scope",
]
