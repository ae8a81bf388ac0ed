"""Core data structures for godefs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tree_sitter import Node, Tree

FUNCTION_DECLARATION_TYPES: frozenset[str] = frozenset(
    {"function_declaration", "method_declaration"}
)


def node_text(node: Node | None) -> str:
    """Return the source text of a node, or an empty string."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def _name_of(node: Node | None) -> str:
    if node is None:
        return ""
    return node_text(node.child_by_field_name("name"))


@dataclass(frozen=True, eq=False)
class SourceFile:
    """A parsed Go source file: its bytes and the syntax tree built from them.

    Comment nodes are part of the tree.
    """

    path: Path
    source: bytes
    tree: Tree

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    @property
    def package_name(self) -> str:
        """Name from the file's ``package`` clause, or "" if it has none."""
        for child in self.root_node.children:
            if child.type == "package_clause":
                for ident in child.children:
                    if ident.type == "package_identifier":
                        return node_text(ident)
        return ""

    def comments(self) -> list[Node]:
        """Return all comment nodes in source order."""
        return list(_iter_comments(self.root_node))


def _iter_comments(node: Node) -> Iterator[Node]:
    if node.type == "comment":
        yield node
    for child in node.children:
        yield from _iter_comments(child)


@dataclass(frozen=True)
class FileInfo:
    """A parsed file together with where it came from."""

    file: SourceFile
    path: Path
    package_path: str


@dataclass(eq=False)
class TypeSpecDef:
    """One declared type: the file it lives in and its declaration node.

    ``parent_spec`` is set only for types declared inside a function or
    method body and is the nearest such declaration enclosing the type.
    The same ``file`` may back any number of descriptors.
    """

    file: SourceFile
    type_spec: Node | None
    pkg_path: str
    parent_spec: Node | None = None

    def name(self) -> str:
        """The declared identifier, or "" when no declaration is bound."""
        if self.type_spec is None:
            return ""
        return _name_of(self.type_spec)

    def full_name(self) -> str:
        """Cross-reference name, qualified by the enclosing function if any.

        Returns:
            ``pkg.Func.Type`` for function-scoped types, ``pkg.Type`` otherwise,
            where ``pkg`` is the declaring file's package name.
        """
        package_name = self.file.package_name
        if (
            self.parent_spec is not None
            and self.parent_spec.type in FUNCTION_DECLARATION_TYPES
        ):
            return f"{package_name}.{_name_of(self.parent_spec)}.{self.name()}"
        return f"{package_name}.{self.name()}"

    def full_path(self) -> str:
        """Import path qualified name.

        Function scope is not part of this name, so same-named types in
        different functions of one package share a full path.
        """
        return f"{self.pkg_path}.{self.name()}"

    @property
    def line(self) -> int:
        """1-based line of the declared identifier (0 if unbound)."""
        if self.type_spec is None:
            return 0
        name_node = self.type_spec.child_by_field_name("name") or self.type_spec
        return name_node.start_point[0] + 1


@dataclass
class Schema:
    """A JSON schema fragment plus the package and definition name it was emitted under.

    ``pkg_path`` and ``name`` let a later pass rename definitions when two
    packages declare types with the same name.
    """

    schema: dict[str, Any] = field(default_factory=dict)
    pkg_path: str = ""
    name: str = ""

    def get(self, key: str, default: Any = None) -> Any:
        return self.schema.get(key, default)

    @property
    def type(self) -> str | list[str] | None:
        return self.schema.get("type")

    @property
    def ref(self) -> str | None:
        return self.schema.get("$ref")

    @property
    def properties(self) -> dict[str, Any]:
        return self.schema.get("properties", {})
