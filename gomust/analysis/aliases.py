"""Per-file import alias tables.

The local name of an unrenamed import is really the name in the imported
package's package clause, which is only known after loading that package.
Both strategies here guess it from the import path alone:

- ``segment``: last slash-delimited element, cut at the first dot
  ("gopkg.in/yaml.v2" -> "yaml"). Wrong for "/v2" major-version suffixes
  and for packages whose name differs from their directory.
- ``assumed``: the guess goimports makes. Skips a trailing "/vN" element,
  strips a "go-" prefix and cuts at the first character that cannot appear
  in an identifier ("github.com/go-yaml/yaml/v3" -> "yaml").
  Still wrong for packages whose name differs from their directory.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..source.models import ImportSpec, SourceFile

# Import names that never produce a usable qualifier
DISCARD_NAME = "_"
DOT_NAME = "."


class AliasStrategy(ABC):
    """Derives the local alias of an import that has no explicit name."""

    name = ""

    @abstractmethod
    def derive(self, import_path: str) -> str:
        """Return the assumed local name for import_path."""
        pass


class SegmentAlias(AliasStrategy):
    """Last path segment, truncated at its first dot."""

    name = "segment"

    def derive(self, import_path: str) -> str:
        alias = import_path.rsplit("/", 1)[-1]
        return alias.split(".", 1)[0]


def _is_identifier_char(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


class AssumedNameAlias(AliasStrategy):
    """goimports-style guess that understands major-version suffixes."""

    name = "assumed"

    def derive(self, import_path: str) -> str:
        parts = import_path.split("/")
        base = parts[-1]
        if base.startswith("v") and base[1:].isdigit() and len(parts) > 1:
            base = parts[-2]
        if base.startswith("go-"):
            base = base[len("go-"):]
        for i, ch in enumerate(base):
            if not _is_identifier_char(ch):
                return base[:i]
        return base


ALIAS_STRATEGIES = {
    SegmentAlias.name: SegmentAlias,
    AssumedNameAlias.name: AssumedNameAlias,
}


def get_alias_strategy(name: str) -> AliasStrategy:
    """Instantiate an alias strategy by name."""
    try:
        return ALIAS_STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown alias strategy {name!r} (expected one of: {', '.join(sorted(ALIAS_STRATEGIES))})"
        ) from None


def build_alias_table(imports: Iterable[ImportSpec], strategy: AliasStrategy) -> Dict[str, str]:
    """
    Map local alias -> import path for one file's imports.

    Dot and blank imports are left out, so references through them never
    resolve. A later import with the same alias replaces an earlier one.
    """
    table = {}
    for spec in imports:
        if spec.name is not None:
            if spec.name in (DISCARD_NAME, DOT_NAME):
                continue
            alias = spec.name
        else:
            alias = strategy.derive(spec.path)
        table[alias] = spec.path
    return table


class AliasTables:
    """Alias tables built on first lookup and cached per file."""

    def __init__(self, strategy: Optional[AliasStrategy] = None):
        self.strategy = strategy or SegmentAlias()
        self._tables: Dict[str, Dict[str, str]] = {}

    def is_built(self, source_file: SourceFile) -> bool:
        return source_file.path in self._tables

    def table_for(self, source_file: SourceFile) -> Dict[str, str]:
        table = self._tables.get(source_file.path)
        if table is None:
            table = build_alias_table(source_file.imports, self.strategy)
            self._tables[source_file.path] = table
        return table

    def lookup(self, source_file: SourceFile, alias: str) -> Optional[str]:
        """Import path that alias names in source_file, or None."""
        return self.table_for(source_file).get(alias)
