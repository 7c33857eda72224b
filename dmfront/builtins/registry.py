"""
Registers the builtin types and vars into an object tree.

The registrar walks BUILTIN_ENTRIES in order and turns each one into an
ObjectTree.add_entry or ObjectTree.add_var call, stamped with the
builtins location. Any error aborts the whole registration.
"""

import sys
from typing import Iterable, Optional

from ..location import Location
from ..objtree.objtree import ObjectTree
from .entries import BUILTIN_ENTRIES, Entry, TypeDeclaration


class BuiltinRegistrar:
    """Feeds declaration entries into an object tree."""

    def __init__(self, tree: ObjectTree, verbose: bool = False):
        self.tree = tree
        self.verbose = verbose
        self.location = Location.builtins()
        self.types_declared = 0
        self.vars_declared = 0

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[dmfront] {message}", file=sys.stderr)

    def register(self, entries: Optional[Iterable[Entry]] = None):
        """Register every entry, in order. Defaults to the builtin table."""
        if entries is None:
            entries = BUILTIN_ENTRIES
        for item in entries:
            self.register_entry(item)
        self.log(f"Registered {self.types_declared} type declarations "
                 f"and {self.vars_declared} vars")

    def register_entry(self, item: Entry):
        """Apply a single entry to the tree."""
        decl = item.declaration
        if isinstance(decl, TypeDeclaration):
            node = self.tree.add_entry(self.location, decl.path, decl.parent_type)
            self.types_declared += 1
            if decl.parent_type is not None:
                self.log(f"  {node.path_str} : {decl.parent_type}")
            else:
                self.log(f"  {node.path_str}")
        else:
            self.tree.add_var(
                self.location,
                decl.owner,
                decl.name,
                type_path=decl.type_path,
                modifiers=decl.modifiers,
                default=item.default,
            )
            self.vars_declared += 1


def register_builtins(tree: ObjectTree, verbose: bool = False):
    """
    Register BYOND's builtin types and vars into `tree`.

    Must run once, on a fresh tree, before any user code is added.

    Raises:
        ObjectTreeError: the builtin table is inconsistent
    """
    BuiltinRegistrar(tree, verbose=verbose).register()
