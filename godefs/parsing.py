"""Tree-sitter parsing of Go files and type declaration extraction."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from tree_sitter import Node

from godefs.exceptions import SourceSyntaxError
from godefs.languages import GO, TreeSitterLanguage
from godefs.models import FUNCTION_DECLARATION_TYPES, FileInfo, SourceFile, TypeSpecDef

_TYPE_SPEC_TYPES: frozenset[str] = frozenset({"type_spec", "type_alias"})


def parse_source_file(
    file_path: Path, language: TreeSitterLanguage = GO
) -> SourceFile:
    """Parse a file into a SourceFile, keeping comments.

    Args:
        file_path: Path to the source file.
        language: The tree-sitter language configuration.

    Returns:
        The parsed SourceFile.

    Raises:
        FileNotFoundError: If file_path does not exist.
        SourceSyntaxError: If the tree contains a syntax error.
    """
    source = file_path.read_bytes()
    tree = language.get_parser().parse(source)

    if tree.root_node.has_error:
        error_node = _first_error(tree.root_node) or tree.root_node
        row, column = error_node.start_point[0], error_node.start_point[1]
        if error_node.is_missing:
            detail = f"missing {error_node.type}"
        else:
            detail = "syntax error"
        raise SourceSyntaxError(file_path, row + 1, column + 1, detail)

    return SourceFile(path=file_path, source=source, tree=tree)


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def extract_type_specs(file_info: FileInfo) -> list[TypeSpecDef]:
    """Find every type declaration in a file, including function-local ones.

    Args:
        file_info: The parsed file and its package import path.

    Returns:
        One TypeSpecDef per declared type, in source order.
    """
    return [
        TypeSpecDef(
            file=file_info.file,
            type_spec=type_spec,
            pkg_path=file_info.package_path,
            parent_spec=parent,
        )
        for type_spec, parent in _walk_type_specs(file_info.file.root_node, None)
    ]


def _walk_type_specs(
    node: Node, parent: Node | None
) -> Iterator[tuple[Node, Node | None]]:
    if node.type in FUNCTION_DECLARATION_TYPES:
        parent = node
    elif node.type in _TYPE_SPEC_TYPES:
        yield node, parent
    for child in node.named_children:
        yield from _walk_type_specs(child, parent)
