"""Collect the package qualifiers used by function signatures."""

from typing import Dict, Mapping, Set

from ..source.models import Candidate, FileImportNeed, FuncDecl, SourceFile


def collect_type_qualifiers(collector: Set[str], node, source_file: SourceFile) -> None:
    """
    Add every package qualifier found under a type node to collector.

    Covers qualified types (pkg.Type) and selector expressions on a bare
    identifier, which appear in array lengths (e.g. [unsafe.Sizeof(x)]byte).
    """
    if node is None:
        return

    def walk_tree(n):
        if n.type == 'qualified_type':
            package = n.child_by_field_name('package')
            if package is not None:
                collector.add(source_file.text(package))
        elif n.type == 'selector_expression':
            operand = n.child_by_field_name('operand')
            if operand is not None and operand.type == 'identifier':
                collector.add(source_file.text(operand))

        for child in n.children:
            walk_tree(child)

    walk_tree(node)


def collect_func_references(decl: FuncDecl, source_file: SourceFile) -> Set[str]:
    """Qualifiers referenced by the parameter and result types of a function."""
    collector: Set[str] = set()
    for entry in decl.params:
        collect_type_qualifiers(collector, entry.type_node, source_file)
    for entry in decl.results:
        collect_type_qualifiers(collector, entry.type_node, source_file)
    return collector


def build_import_needs(candidates: Mapping[str, Candidate]) -> Dict[str, FileImportNeed]:
    """
    Merge the referenced qualifiers of all candidates per owning file.

    Returns:
        Dict of file path -> FileImportNeed; the representative candidate of
        each file is its first candidate in name order.
    """
    needs: Dict[str, FileImportNeed] = {}
    for name in sorted(candidates):
        candidate = candidates[name]
        aliases = collect_func_references(candidate.decl, candidate.file)

        need = needs.get(candidate.file.path)
        if need is None:
            needs[candidate.file.path] = FileImportNeed(source=candidate, aliases=aliases)
        else:
            need.aliases.update(aliases)
    return needs
