"""Rust syntax parsing with tree-sitter.

Only structure is inspected: nodes are matched by kind and field role, and
their source text is read back from the parsed bytes.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from pathlib import Path

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser, Tree

from crate_triage.exceptions import ParseFailure, StructuralError

_RUST_LANGUAGE = Language(tsrust.language())

FUNCTION_ITEM = "function_item"
VISIBILITY_MODIFIER = "visibility_modifier"


class ItemKind(Enum):
    """Top-level item kinds that can carry a visibility modifier."""

    FUNCTION = "function_item"
    CONST = "const_item"
    ENUM = "enum_item"
    FOREIGN_MODULE = "foreign_mod_item"
    MODULE = "mod_item"
    STRUCT = "struct_item"
    STATIC = "static_item"
    TRAIT = "trait_item"
    TYPE_ALIAS = "type_item"
    USE = "use_declaration"

    @classmethod
    def from_node(cls, node: Node) -> ItemKind | None:
        return _KIND_BY_NODE_TYPE.get(node.type)


_KIND_BY_NODE_TYPE: dict[str, ItemKind] = {kind.value: kind for kind in ItemKind}


def parse_source(content: bytes, path: Path | None = None) -> Tree:
    """Parse Rust source into a concrete syntax tree.

    A fresh parser is used for every call; nothing is reused between files.

    Raises:
        ParseFailure: if tree-sitter produces no tree.
    """
    parser = Parser(_RUST_LANGUAGE)
    tree = parser.parse(content)
    if tree is None:
        raise ParseFailure(path)
    return tree


def top_level_items(tree: Tree) -> Iterator[Node]:
    """Yield the direct children of the root node, in source order."""
    yield from tree.root_node.children


def describe(node: Node) -> str:
    return f"{node.type} at bytes {node.start_byte}..{node.end_byte}"


def node_text(node: Node, path: Path | None = None) -> str:
    """Source text covered by *node*, decoded as UTF-8."""
    try:
        return (node.text or b"").decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseFailure(path, f"{describe(node)} is not valid UTF-8: {e}") from e


def required_field(node: Node, role: str, path: Path | None = None) -> Node:
    """Return the child of *node* in field *role*, or raise StructuralError."""
    child = node.child_by_field_name(role)
    if child is None:
        raise StructuralError(path, describe(node), role)
    return child


def find_child(node: Node, kind: str) -> Node | None:
    """First direct child of the given kind."""
    for child in node.children:
        if child.type == kind:
            return child
    return None
