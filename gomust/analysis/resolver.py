"""Merge the imports needed by candidates of many files into one table."""

from enum import Enum
import logging
from typing import List, Mapping, Optional, Tuple

from ..quoting import go_quote
from ..source.models import Diagnostic, FileImportNeed, ImportEntry, Resolution
from .aliases import AliasStrategy, AliasTables

logger = logging.getLogger(__name__)


class MergeOutcome(Enum):
    ADDED = "added"
    SATISFIED = "satisfied"  # already established by the same file
    MATCHED = "matched"  # another file established the same path
    UNRESOLVED = "unresolved"
    CONFLICT = "conflict"


def merge_import(
    current: Mapping[str, ImportEntry],
    entry: ImportEntry,
) -> Tuple[Mapping[str, ImportEntry], MergeOutcome]:
    """
    Check entry against the merged imports and insert it if it is new.

    Pure: current is never mutated. The returned mapping is a new dict when
    the entry was added and current itself otherwise. entry.path is None
    when the entry's file has no import for the alias.
    """
    existing = current.get(entry.alias)
    if existing is not None and existing.file.path == entry.file.path:
        return current, MergeOutcome.SATISFIED
    if entry.path is None:
        return current, MergeOutcome.UNRESOLVED
    if existing is None:
        updated = dict(current)
        updated[entry.alias] = entry
        return updated, MergeOutcome.ADDED
    if existing.path != entry.path:
        return current, MergeOutcome.CONFLICT
    return current, MergeOutcome.MATCHED


def _diagnostic(entry: ImportEntry, outcome: MergeOutcome,
                existing: Optional[ImportEntry]) -> Diagnostic:
    if outcome is MergeOutcome.UNRESOLVED:
        message = f"can't find import path for package {go_quote(entry.alias)}"
    else:
        message = (
            f"import conflict for alias {go_quote(entry.alias)} with "
            f"{existing.source.name}({existing.file.name}): "
            f"{go_quote(entry.path)} vs {go_quote(existing.path)}"
        )
    return Diagnostic(
        kind=outcome.value,
        function=entry.source.name,
        file=entry.file.name,
        message=message,
    )


def resolve_file(
    need: FileImportNeed,
    merged: Mapping[str, ImportEntry],
    tables: AliasTables,
) -> Tuple[Mapping[str, ImportEntry], List[Diagnostic]]:
    """Resolve the aliases one file needs against the imports merged so far."""
    diagnostics = []
    for alias in sorted(need.aliases):
        existing = merged.get(alias)
        if existing is not None and existing.file.path == need.file.path:
            continue  # Already resolved from this file

        entry = ImportEntry(alias=alias, path=tables.lookup(need.file, alias), source=need.source)
        merged, outcome = merge_import(merged, entry)
        logger.debug(f"{need.file.name}: {alias} -> {entry.path} ({outcome.value})")

        if outcome in (MergeOutcome.UNRESOLVED, MergeOutcome.CONFLICT):
            diagnostics.append(_diagnostic(entry, outcome, existing))
    return merged, diagnostics


def resolve_imports(
    needs: Mapping[str, FileImportNeed],
    strategy: Optional[AliasStrategy] = None,
    tables: Optional[AliasTables] = None,
) -> Resolution:
    """
    Resolve every file's qualifiers into a single alias -> path table.

    Files are processed in path order. The first file to resolve an alias
    establishes it; other files must resolve it to the same path. Errors
    are accumulated, never fatal.

    Args:
        needs: File path -> FileImportNeed (see build_import_needs)
        strategy: Alias derivation for unrenamed imports
        tables: Alias table cache (created from strategy if omitted)

    Returns:
        Resolution with the merged imports and all diagnostics
    """
    tables = tables or AliasTables(strategy)
    merged: Mapping[str, ImportEntry] = {}
    diagnostics: List[Diagnostic] = []

    for path in sorted(needs):
        merged, found = resolve_file(needs[path], merged, tables)
        diagnostics.extend(found)

    logger.debug(f"Resolved {len(merged)} imports with {len(diagnostics)} errors")
    return Resolution(imports=dict(merged), diagnostics=diagnostics)
