"""Tests for the tree-sitter wrapper."""

from __future__ import annotations

from pathlib import Path

import pytest

from crate_triage.exceptions import StructuralError
from crate_triage.syntax import (
    ItemKind,
    find_child,
    node_text,
    parse_source,
    required_field,
    top_level_items,
)

SOURCE = b"""\
use std::fmt;
pub struct S;
impl S {}
fn main() {}
"""


class TestParseSource:
    def test_top_level_items_in_order(self):
        tree = parse_source(SOURCE)
        kinds = [n.type for n in top_level_items(tree)]
        assert kinds == ["use_declaration", "struct_item", "impl_item", "function_item"]

    def test_malformed_input_still_yields_tree(self):
        tree = parse_source(b"fn main( {{{")
        assert tree.root_node is not None

    def test_function_fields(self):
        tree = parse_source(b"fn main() { let x = 1; }")
        func = next(top_level_items(tree))
        assert node_text(required_field(func, "name")) == "main"
        assert node_text(required_field(func, "body")) == "{ let x = 1; }"


class TestItemKind:
    def test_decodes_known_kinds(self):
        tree = parse_source(SOURCE)
        decoded = [ItemKind.from_node(n) for n in top_level_items(tree)]
        assert decoded == [ItemKind.USE, ItemKind.STRUCT, None, ItemKind.FUNCTION]

    def test_every_kind_has_grammar_name(self):
        assert {k.value for k in ItemKind} == {
            "function_item",
            "const_item",
            "enum_item",
            "foreign_mod_item",
            "mod_item",
            "struct_item",
            "static_item",
            "trait_item",
            "type_item",
            "use_declaration",
        }


class TestHelpers:
    def test_required_field_missing(self):
        tree = parse_source(b"struct S;")
        item = next(top_level_items(tree))
        with pytest.raises(StructuralError) as exc:
            required_field(item, "body", Path("lib.rs"))
        assert exc.value.missing == "body"
        assert "struct_item" in exc.value.node
        assert "lib.rs" in str(exc.value)

    def test_find_child(self):
        tree = parse_source(b"pub(crate) fn f() {}")
        item = next(top_level_items(tree))
        vis = find_child(item, "visibility_modifier")
        assert vis is not None
        assert node_text(vis) == "pub(crate)"
        assert find_child(item, "nonexistent") is None
