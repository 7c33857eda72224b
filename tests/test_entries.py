"""Tests for parsing the builtin declaration table."""

import pytest

from dmfront.builtins import (
    BUILTIN_ENTRIES, TypeDeclaration, VariableDeclaration,
    check_entry_order, parse_entry,
)
from dmfront.builtins.entries import number, prefab, string
from dmfront.objtree import EmptySegmentError, ObjectTreeError, UnresolvedReferenceError
from dmfront.parser import NumberNode, PrefabNode, StringNode


class TestParseEntry:
    """Tests for turning a declaration path into an Entry."""

    def test_type_declaration(self):
        item = parse_entry("atom/movable")
        assert item.declaration == TypeDeclaration(('atom', 'movable'))
        assert item.default is None
        assert not item.is_var

    def test_parent_type_override(self):
        """parent_type with a type path becomes an override, not a child type."""
        item = parse_entry("obj/parent_type", prefab("/atom/movable"))
        assert isinstance(item.declaration, TypeDeclaration)
        assert item.declaration.path == ('obj',)
        assert item.declaration.parent_type == PrefabNode(('atom', 'movable'))
        assert item.default is None

    def test_plain_var(self):
        item = parse_entry("atom/var/alpha")
        assert item.is_var
        assert item.declaration == VariableDeclaration(owner=('atom',), name='alpha')

    def test_typed_var(self):
        item = parse_entry("atom/var/icon/icon")
        assert item.declaration.name == 'icon'
        assert item.declaration.type_path == ('icon',)

    def test_static_is_a_modifier(self):
        item = parse_entry("world/var/static/fps", number(10))
        decl = item.declaration
        assert decl.owner == ('world',)
        assert decl.name == 'fps'
        assert decl.modifiers == ('static',)
        assert decl.type_path == ()
        assert item.default == NumberNode(10)

    def test_static_typed_var(self):
        decl = parse_entry("world/var/static/area/area", prefab("/area")).declaration
        assert decl.modifiers == ('static',)
        assert decl.type_path == ('area',)
        assert decl.name == 'area'

    def test_root_var(self):
        decl = parse_entry("var/static/world/world").declaration
        assert decl.owner == ()
        assert decl.type_path == ('world',)

    def test_var_named_parent_type(self):
        """A var called parent_type is still a var."""
        decl = parse_entry("atom/var/parent_type").declaration
        assert isinstance(decl, VariableDeclaration)
        assert decl.name == 'parent_type'

    def test_str_round_trips_source(self):
        assert str(parse_entry("world/var/static/name", string("byond"))) == \
            'world/var/static/name = "byond"'
        assert str(parse_entry("datum")) == "datum"


class TestMalformedEntries:
    """Tests for entries that must be rejected before touching a tree."""

    @pytest.mark.parametrize("path", ["", "atom//movable", "/atom", "atom/", "atom/var//x"])
    def test_empty_segment(self, path):
        with pytest.raises(EmptySegmentError):
            parse_entry(path)

    def test_empty_segment_in_prefab_default(self):
        with pytest.raises(EmptySegmentError):
            parse_entry("obj/parent_type", prefab("/atom//movable"))

    @pytest.mark.parametrize("path", ["atom/var", "world/var/static"])
    def test_missing_var_name(self, path):
        with pytest.raises(ObjectTreeError, match="Missing var name"):
            parse_entry(path)

    def test_parent_type_needs_type_path(self):
        with pytest.raises(ObjectTreeError, match="must be a type path"):
            parse_entry("obj/parent_type", number(3))

    def test_type_declaration_cannot_have_value(self):
        with pytest.raises(ObjectTreeError, match="Only parent_type"):
            parse_entry("atom/name", string("thing"))

    def test_bare_parent_type_override(self):
        with pytest.raises(ObjectTreeError):
            parse_entry("parent_type", prefab("/datum"))

    def test_relative_prefab_is_rejected(self):
        with pytest.raises(ValueError):
            prefab("atom")


class TestBuiltinTable:
    """Tests for the builtin table itself."""

    def test_declaration_order_is_consistent(self):
        check_entry_order(BUILTIN_ENTRIES)

    def test_out_of_order_reference_is_detected(self):
        entries = [
            parse_entry("obj/parent_type", prefab("/atom/movable")),
            parse_entry("atom/movable"),
        ]
        with pytest.raises(UnresolvedReferenceError, match="before it is declared"):
            check_entry_order(entries)

    def test_var_default_reference_is_checked(self):
        entries = [parse_entry("world/var/static/mob/mob", prefab("/mob"))]
        with pytest.raises(UnresolvedReferenceError):
            check_entry_order(entries)

    def test_no_duplicate_declarations(self):
        sources = [item.source for item in BUILTIN_ENTRIES]
        assert len(sources) == len(set(sources))

    def test_literal_defaults(self):
        defaults = {item.source: item.default for item in BUILTIN_ENTRIES if item.default is not None}
        assert defaults["world/var/static/fps"] == NumberNode(10)
        assert defaults["world/var/static/view"] == NumberNode(5)
        assert defaults["world/var/static/icon_size"] == NumberNode(32)
        assert defaults["world/var/static/tick_lag"] == NumberNode(1)
        assert defaults["world/var/static/name"] == StringNode("byond")
        assert defaults["client/var/default_verb_category"] == StringNode("Commands")
