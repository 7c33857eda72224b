"""
Test fixtures and helpers for the builtin bootstrap tests.

- tree / builtin_tree / defines: fresh baselines per test
- AssertEntries: fluent helper that registers a small declaration table
  into a tree and checks the outcome
"""

import re
import sys
from pathlib import Path
from typing import List, Optional, Type, Union

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dmfront.builtins import BuiltinRegistrar, Entry, default_defines, parse_entry, register_builtins
from dmfront.objtree import ObjectTree
from dmfront.parser import ASTNode


RawEntry = Union[str, tuple, Entry]


@pytest.fixture
def tree() -> ObjectTree:
    return ObjectTree()


@pytest.fixture
def builtin_tree() -> ObjectTree:
    tree = ObjectTree()
    register_builtins(tree)
    return tree


@pytest.fixture
def defines() -> dict:
    defines = {}
    default_defines(defines)
    return defines


class AssertEntries:
    """
    Registers declaration entries and asserts on the result.

    Entries are given as "path" strings, ("path", default) tuples or
    already parsed Entry objects. Strings are parsed only when an
    assertion runs, so parse errors are checked the same way as
    registration errors.

        AssertEntries("datum", ("atom/parent_type", prefab("/datum"))).registers()
        AssertEntries("a//b").fails_with(EmptySegmentError)
    """

    def __init__(self, *entries: RawEntry):
        self.raw_entries = list(entries)
        self.tree = ObjectTree()

    def on(self, tree: ObjectTree) -> 'AssertEntries':
        """Register into an existing tree instead of a fresh one."""
        self.tree = tree
        return self

    def _parse(self) -> List[Entry]:
        parsed = []
        for raw in self.raw_entries:
            if isinstance(raw, Entry):
                parsed.append(raw)
            elif isinstance(raw, tuple):
                parsed.append(parse_entry(*raw))
            else:
                parsed.append(parse_entry(raw))
        return parsed

    def _run(self):
        BuiltinRegistrar(self.tree).register(self._parse())

    def registers(self) -> ObjectTree:
        """Registration succeeds; returns the tree."""
        self._run()
        return self.tree

    def fails_with(self, error: Type[Exception], match: Optional[str] = None) -> ObjectTree:
        """Registration raises `error` (optionally matching `match`)."""
        with pytest.raises(error) as info:
            self._run()
        if match is not None:
            assert re.search(match, str(info.value)), \
                f"{str(info.value)!r} does not match {match!r}"
        return self.tree


def var_default(tree: ObjectTree, type_path: str, name: str) -> Optional[ASTNode]:
    """Default expression of var `name` declared on `type_path`."""
    node = tree.expect(type_path)
    assert name in node.vars, f"{type_path} has no var {name}"
    return node.vars[name].default
