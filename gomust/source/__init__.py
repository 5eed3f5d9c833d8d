"""Go source loading and parsing."""

from .models import (
    ImportSpec,
    Field,
    FuncDecl,
    SourceFile,
    Package,
    Candidate,
    FileImportNeed,
    ImportEntry,
    Diagnostic,
    Resolution,
)
from .parser import GoSyntaxError, get_parser, parse_source
from .loader import PackageLoadError, load_package_dir

__all__ = [
    # Models
    "ImportSpec",
    "Field",
    "FuncDecl",
    "SourceFile",
    "Package",
    "Candidate",
    "FileImportNeed",
    "ImportEntry",
    "Diagnostic",
    "Resolution",
    # Parser
    "GoSyntaxError",
    "get_parser",
    "parse_source",
    # Loader
    "PackageLoadError",
    "load_package_dir",
]
