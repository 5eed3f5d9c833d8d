"""Candidate selection and import resolution."""

from .selector import select_candidates, is_exported, has_wrapper_prefix, returns_error
from .references import collect_func_references, build_import_needs
from .aliases import (
    AliasStrategy,
    AliasTables,
    SegmentAlias,
    AssumedNameAlias,
    get_alias_strategy,
    build_alias_table,
)
from .resolver import MergeOutcome, merge_import, resolve_imports

__all__ = [
    # Selector
    "select_candidates",
    "is_exported",
    "has_wrapper_prefix",
    "returns_error",
    # References
    "collect_func_references",
    "build_import_needs",
    # Aliases
    "AliasStrategy",
    "AliasTables",
    "SegmentAlias",
    "AssumedNameAlias",
    "get_alias_strategy",
    "build_alias_table",
    # Resolver
    "MergeOutcome",
    "merge_import",
    "resolve_imports",
]
