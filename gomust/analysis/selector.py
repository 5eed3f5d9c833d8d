"""Select the functions that get a Must wrapper."""

import logging
from typing import Dict, Iterable, Optional

from ..config import GeneratorConfig
from ..source.models import Candidate, FuncDecl, Package, SourceFile

logger = logging.getLogger(__name__)


def is_exported(name: str) -> bool:
    return name[:1].isupper()


def has_wrapper_prefix(name: str, prefix: str = "Must") -> bool:
    """
    True for names already shaped like a wrapper.

    MustFoo -> True, Mustache -> False (lower-case after the prefix),
    Must -> False.
    """
    if not name.startswith(prefix):
        return False
    return name[len(prefix):len(prefix) + 1].isupper()


def returns_error(decl: FuncDecl, source_file: SourceFile, error_type: str = "error") -> bool:
    """True if the last result type is exactly the bare error identifier."""
    if not decl.results:
        return False
    last = decl.results[-1].type_node
    if last is None or last.type != 'type_identifier':
        return False
    return source_file.text(last) == error_type


def skip_reason(decl: FuncDecl, source_file: SourceFile, config: GeneratorConfig) -> Optional[str]:
    """Why a declaration does not qualify, or None if it does."""
    if decl.is_method:
        return "method"
    if not is_exported(decl.name):
        return "not exported"
    if not decl.results:
        return "no results"
    if has_wrapper_prefix(decl.name, config.wrapper_prefix):
        return "already a wrapper"
    if not returns_error(decl, source_file, config.error_type):
        return f"last result is not {config.error_type}"
    return None


def select_candidates(
    packages: Dict[str, Package],
    config: Optional[GeneratorConfig] = None,
) -> Dict[str, Candidate]:
    """
    Collect qualifying functions keyed by name.

    Packages are visited in name order and files in path order; when two
    files declare the same name, the later one wins and a warning is logged.
    """
    config = config or GeneratorConfig()
    selected: Dict[str, Candidate] = {}

    for package_name in sorted(packages):
        package = packages[package_name]
        for path in sorted(package.files):
            source_file = package.files[path]
            for candidate in _qualifying(source_file, config):
                previous = selected.get(candidate.name)
                if previous is not None:
                    logger.warning(
                        f"{candidate.name}: {candidate.file.name} overrides "
                        f"declaration in {previous.file.name}"
                    )
                selected[candidate.name] = candidate

    logger.debug(f"Selected {len(selected)} functions")
    return selected


def _qualifying(source_file: SourceFile, config: GeneratorConfig) -> Iterable[Candidate]:
    for decl in source_file.functions:
        reason = skip_reason(decl, source_file, config)
        if reason:
            logger.debug(f"Skipping {decl.name} ({source_file.name}:{decl.line_number}): {reason}")
            continue
        yield Candidate(name=decl.name, decl=decl, file=source_file)
