"""Tree-sitter based Go code parsing."""

from typing import List, Optional
import ast

try:
    import tree_sitter_go as tsgo
    from tree_sitter import Language, Parser
    TREE_SITTER_AVAILABLE = True
except ImportError:
    TREE_SITTER_AVAILABLE = False

from .models import Field, FuncDecl, ImportSpec, SourceFile


class GoSyntaxError(Exception):
    """A Go file that does not parse."""

    def __init__(self, path: str, line: int, column: int, message: str):
        super().__init__(f"{path}:{line}:{column}: {message}")
        self.path = path
        self.line = line
        self.column = column
        self.message = message


def get_parser() -> "Parser":
    """Get tree-sitter parser for Go."""
    if not TREE_SITTER_AVAILABLE:
        raise ImportError(
            "tree-sitter and tree-sitter-go are required. "
            "Install with: pip install tree-sitter tree-sitter-go"
        )
    language = Language(tsgo.language())
    return Parser(language)


def _get_node_text(node, source_bytes: bytes) -> str:
    """Get text content of a tree-sitter node."""
    return source_bytes[node.start_byte:node.end_byte].decode('utf-8', errors='replace')


def _find_child_by_type(node, type_name: str):
    """Find first child of a specific type."""
    for child in node.children:
        if child.type == type_name:
            return child
    return None


def find_syntax_error(node):
    """Return the first ERROR or missing node under node, or None."""
    if node.type == 'ERROR' or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = find_syntax_error(child)
        if found is not None:
            return found
    return None


def extract_leading_comment(node, source_bytes: bytes) -> List[str]:
    """
    Extract the doc comment group immediately preceding a declaration.

    Each comment is returned verbatim ("// text" or the whole "/* ... */"
    block). The group stops at a blank line, and a comment trailing the
    previous declaration on its own line is not part of it.
    """
    comments = []
    current = node
    prev = node.prev_named_sibling

    while prev is not None and prev.type == 'comment':
        if current.start_point[0] - prev.end_point[0] > 1:
            break

        before = prev.prev_named_sibling
        if (before is not None and before.type != 'comment'
                and before.end_point[0] == prev.start_point[0]):
            break

        comments.insert(0, _get_node_text(prev, source_bytes))
        current = prev
        prev = before

    return comments


def unquote_string(literal: str) -> str:
    """Decode a Go string literal (interpreted or raw)."""
    if literal.startswith('`'):
        return literal[1:-1]
    return ast.literal_eval(literal)


def extract_package_name(root, source_bytes: bytes) -> Optional[str]:
    """Name declared by the package clause, if any."""
    clause = _find_child_by_type(root, 'package_clause')
    if clause is None:
        return None
    ident = _find_child_by_type(clause, 'package_identifier')
    return _get_node_text(ident, source_bytes) if ident else None


def _iter_import_specs(decl):
    for child in decl.named_children:
        if child.type == 'import_spec':
            yield child
        elif child.type == 'import_spec_list':
            for spec in child.named_children:
                if spec.type == 'import_spec':
                    yield spec


def extract_imports(root, source_bytes: bytes) -> List[ImportSpec]:
    """Extract all import specs of a file, in source order."""
    imports = []
    for decl in root.children:
        if decl.type != 'import_declaration':
            continue
        for spec in _iter_import_specs(decl):
            path_node = spec.child_by_field_name('path')
            name_node = spec.child_by_field_name('name')
            imports.append(ImportSpec(
                path=unquote_string(_get_node_text(path_node, source_bytes)),
                name=_get_node_text(name_node, source_bytes) if name_node else None,
                line_number=spec.start_point[0] + 1,
            ))
    return imports


def _parse_fields(list_node, source_bytes: bytes) -> List[Field]:
    """Parse a parameter_list into Field objects."""
    fields = []
    for child in list_node.named_children:
        if child.type not in ('parameter_declaration', 'variadic_parameter_declaration'):
            continue
        fields.append(Field(
            names=[_get_node_text(n, source_bytes) for n in child.children_by_field_name('name')],
            type_node=child.child_by_field_name('type'),
            variadic=child.type == 'variadic_parameter_declaration',
        ))
    return fields


def _extract_func_decl(node, source_bytes: bytes) -> Optional[FuncDecl]:
    """Extract a FuncDecl from a function_declaration or method_declaration node."""
    name_node = node.child_by_field_name('name')
    if name_node is None:
        return None

    receiver = None
    if node.type == 'method_declaration':
        receiver_node = node.child_by_field_name('receiver')
        receiver = _get_node_text(receiver_node, source_bytes) if receiver_node else ""

    params_node = node.child_by_field_name('parameters')
    params = _parse_fields(params_node, source_bytes) if params_node else []

    # The result is either a parenthesized list or a single bare type
    result_node = node.child_by_field_name('result')
    if result_node is None:
        results = []
    elif result_node.type == 'parameter_list':
        results = _parse_fields(result_node, source_bytes)
    else:
        results = [Field(names=[], type_node=result_node)]

    return FuncDecl(
        name=_get_node_text(name_node, source_bytes),
        params=params,
        results=results,
        line_number=node.start_point[0] + 1,
        receiver=receiver,
        doc_comment=extract_leading_comment(node, source_bytes),
        column=name_node.start_point[1] + 1,
    )


def extract_functions(root, source_bytes: bytes) -> List[FuncDecl]:
    """Extract all top-level function and method declarations."""
    functions = []
    for child in root.children:
        if child.type in ('function_declaration', 'method_declaration'):
            decl = _extract_func_decl(child, source_bytes)
            if decl:
                functions.append(decl)
    return functions


def parse_source(source_bytes: bytes, path: str, parser=None) -> SourceFile:
    """
    Parse one Go file.

    Raises:
        GoSyntaxError: the file has a syntax error, no package clause, or
            declares the same free function twice
    """
    parser = parser or get_parser()
    tree = parser.parse(source_bytes)
    root = tree.root_node

    bad = find_syntax_error(root)
    if bad is not None:
        line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
        if bad.is_missing:
            message = f"expected {bad.type!r}"
        else:
            snippet = _get_node_text(bad, source_bytes).strip().split('\n')[0][:40]
            message = f"unexpected {snippet!r}" if snippet else "syntax error"
        raise GoSyntaxError(path, line, column, message)

    package = extract_package_name(root, source_bytes)
    if not package:
        raise GoSyntaxError(path, 1, 1, "expected 'package'")

    functions = extract_functions(root, source_bytes)
    check_redeclared(functions, path)

    return SourceFile(
        path=path,
        package=package,
        imports=extract_imports(root, source_bytes),
        functions=functions,
        source=source_bytes,
    )


def check_redeclared(functions: List[FuncDecl], path: str) -> None:
    """Reject a free function declared twice in one file.

    init and the blank name may repeat; methods are keyed by receiver
    type and are not checked here.
    """
    seen = set()
    for decl in functions:
        if decl.is_method or decl.name in ('init', '_'):
            continue
        if decl.name in seen:
            raise GoSyntaxError(path, decl.line_number, decl.column,
                                f"{decl.name} redeclared in this block")
        seen.add(decl.name)
