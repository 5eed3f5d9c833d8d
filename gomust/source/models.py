"""Data models for Go source scanning and import resolution."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set


@dataclass(frozen=True)
class ImportSpec:
    """One import declaration of a file."""
    path: str
    name: Optional[str] = None  # Explicit local name, including "." and "_"
    line_number: int = 0


@dataclass
class Field:
    """Parameter or result entry: zero or more names sharing one type node."""
    names: List[str]
    type_node: Any  # tree_sitter.Node
    variadic: bool = False


@dataclass
class FuncDecl:
    """A top-level function or method declaration."""
    name: str
    params: List[Field]
    results: List[Field]
    line_number: int
    receiver: Optional[str] = None
    doc_comment: List[str] = field(default_factory=list)
    column: int = 1  # Column of the name

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass
class SourceFile:
    """A parsed Go file."""
    path: str
    package: str
    imports: List[ImportSpec] = field(default_factory=list)
    functions: List[FuncDecl] = field(default_factory=list)
    source: bytes = b""

    @property
    def name(self) -> str:
        """Base file name, as used in diagnostics."""
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]

    def text(self, node) -> str:
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


@dataclass
class Package:
    """Files of one directory declaring the same package name."""
    name: str
    files: Dict[str, SourceFile] = field(default_factory=dict)  # keyed by path


@dataclass(frozen=True)
class Candidate:
    """A function selected for wrapper generation."""
    name: str
    decl: FuncDecl = field(compare=False)
    file: SourceFile = field(compare=False)

    @property
    def doc(self) -> str:
        """Doc comment lines followed by an empty line, or ""."""
        if not self.decl.doc_comment:
            return ""
        return "\n".join(self.decl.doc_comment + [""])


@dataclass
class FileImportNeed:
    """Qualifiers referenced by the candidates of one file."""
    source: Candidate  # Representative candidate, used in messages
    aliases: Set[str] = field(default_factory=set)

    @property
    def file(self) -> SourceFile:
        return self.source.file


@dataclass(frozen=True)
class ImportEntry:
    """A merged import: alias -> path, with the candidate that established it."""
    alias: str
    path: Optional[str]
    source: Candidate

    @property
    def file(self) -> SourceFile:
        return self.source.file


@dataclass(frozen=True)
class Diagnostic:
    """An accumulated (non-fatal) resolution error."""
    kind: str  # "unresolved" | "conflict"
    function: str
    file: str
    message: str

    def __str__(self) -> str:
        return f"{self.function}({self.file}): {self.message}"


@dataclass
class Resolution:
    """Merged imports and the errors found while merging them."""
    imports: Dict[str, ImportEntry] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def import_paths(self) -> Dict[str, str]:
        """Alias -> path mapping of the merged imports."""
        return {alias: entry.path for alias, entry in self.imports.items()}
