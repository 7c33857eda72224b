"""
DM object tree.

The object tree is DM's namespace of types. Every type lives at a path
(/atom/movable), owns a set of vars, and inherits from a parent type.
The parent is normally the type one path segment up; `parent_type`
overrides it, which is how /obj ends up under /atom/movable.

Types and vars are only ever added. Builtins are registered first, then
user code layers on top of them.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..location import Location
from ..parser.ast_nodes import ASTNode, PrefabNode
from .errors import (
    ObjectTreeError, EmptySegmentError, KindConflictError,
    DuplicateVariableError, UnresolvedReferenceError, format_path,
)

# Segments that may follow `var/` without being part of the var's type
VAR_MODIFIERS = ('static', 'global', 'const', 'tmp')

# Top-level types inherit from /datum unless told otherwise
DATUM = 'datum'

PathLike = Union[str, Sequence[str]]


def split_path(path: PathLike) -> Tuple[str, ...]:
    """Turn "/atom/movable", "atom/movable" or a segment list into a tuple."""
    if isinstance(path, str):
        if path in ('', '/'):
            return ()
        if path.startswith('/'):
            path = path[1:]
        return tuple(path.split('/'))
    return tuple(path)


def check_segments(path: Sequence[str], location: Optional[Location] = None):
    """Raise EmptySegmentError if any segment is empty."""
    for segment in path:
        if not segment:
            raise EmptySegmentError(
                f"Empty segment in path {format_path(path)!r}", path, location)


@dataclass
class TypeVar:
    """A var declared on a type."""
    name: str
    location: Location
    type_path: Tuple[str, ...] = ()
    modifiers: Tuple[str, ...] = ()
    default: Optional[ASTNode] = None

    @property
    def is_static(self) -> bool:
        return 'static' in self.modifiers or 'global' in self.modifiers

    def declaration(self) -> str:
        """DM spelling of the declaration, e.g. var/static/area/area = /area"""
        text = '/'.join(('var',) + self.modifiers + self.type_path + (self.name,))
        if self.default is not None:
            text += f" = {self.default}"
        return text

    def __str__(self):
        return self.declaration()


class TypeNode:
    """A single type in the object tree."""

    def __init__(self, name: str, path: Tuple[str, ...],
                 lexical_parent: Optional['TypeNode'], location: Location):
        self.name = name
        self.path = path
        self.lexical_parent = lexical_parent
        self.location = location
        self.parent_type: Optional['TypeNode'] = None
        self.children: Dict[str, 'TypeNode'] = {}
        self.vars: Dict[str, TypeVar] = {}

    @property
    def is_root(self) -> bool:
        return self.lexical_parent is None

    @property
    def path_str(self) -> str:
        return format_path(self.path)

    @property
    def parent(self) -> Optional['TypeNode']:
        """The type this one inherits from."""
        if self.parent_type is not None:
            return self.parent_type
        lexical = self.lexical_parent
        if lexical is None:
            return None
        if lexical.is_root and self.name != DATUM:
            datum = lexical.children.get(DATUM)
            if datum is not None:
                return datum
        return lexical

    def ancestors(self) -> Iterator['TypeNode']:
        """Yield the parent chain, nearest first, ending at the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_subtype_of(self, other: 'TypeNode') -> bool:
        return self is other or any(a is other for a in self.ancestors())

    def get_var(self, name: str) -> Optional[TypeVar]:
        """Look up a var here or on the nearest ancestor declaring it."""
        if name in self.vars:
            return self.vars[name]
        for ancestor in self.ancestors():
            if name in ancestor.vars:
                return ancestor.vars[name]
        return None

    def __repr__(self):
        return f"TypeNode({self.path_str})"


class ObjectTree:
    """Builds and queries the tree of DM types."""

    def __init__(self):
        self.root = TypeNode('', (), None, Location.builtins())

    def find(self, path: PathLike) -> Optional[TypeNode]:
        """Return the type at `path`, or None."""
        node = self.root
        for segment in split_path(path):
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def expect(self, path: PathLike, location: Optional[Location] = None) -> TypeNode:
        """Return the type at `path`, raising if it has not been declared."""
        segments = split_path(path)
        check_segments(segments, location)
        node = self.find(segments)
        if node is None:
            raise UnresolvedReferenceError(
                f"Undefined type {format_path(segments)}", segments, location)
        return node

    def iter_types(self) -> Iterator[TypeNode]:
        """Yield every type except the root, depth first, in declaration order."""
        stack: List[TypeNode] = list(reversed(self.root.children.values()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def add_entry(self, location: Location, path: Sequence[str],
                  parent_type: Optional[PrefabNode] = None) -> TypeNode:
        """
        Ensure the type at `path` exists, creating missing types on the way.

        Args:
            location: Where the declaration came from
            path: Segments of the type path
            parent_type: Optional type-path override for the type's parent

        Returns:
            The declared type
        """
        path = tuple(path)
        if not path:
            raise EmptySegmentError("Empty type path", path, location)
        node = self._ensure_type(location, path)
        if parent_type is not None:
            target = self.expect(parent_type.path, location)
            self._set_parent_type(node, target, location)
        return node

    def add_var(self, location: Location, owner: Sequence[str], name: str,
                type_path: Sequence[str] = (), modifiers: Sequence[str] = (),
                default: Optional[ASTNode] = None) -> TypeVar:
        """
        Declare a new var on the type at `owner`, creating the type if needed.

        Args:
            location: Where the declaration came from
            owner: Segments of the owning type's path (empty for the root)
            name: Bare var name
            type_path: Declared type of the var (`icon` in var/icon/icon)
            modifiers: static, global, const, tmp
            default: Default value expression

        Returns:
            The new var
        """
        owner = tuple(owner)
        type_path = tuple(type_path)
        full_path = owner + ('var',) + tuple(modifiers) + type_path + (name,)
        check_segments(full_path, location)

        node = self._ensure_type(location, owner)
        if name in node.vars:
            raise DuplicateVariableError(
                f"Duplicate var {name!r} on {node.path_str}", full_path, location)
        child = node.children.get(name)
        if child is not None and type_path != child.path:
            raise KindConflictError(
                f"{name!r} on {node.path_str} is already a type", full_path, location)
        if isinstance(default, PrefabNode):
            self.expect(default.path, location)

        var = TypeVar(name, location, type_path, tuple(modifiers), default)
        node.vars[name] = var
        return var

    def _ensure_type(self, location: Location, path: Tuple[str, ...]) -> TypeNode:
        check_segments(path, location)
        node = self.root
        for segment in path:
            child = node.children.get(segment)
            if child is None:
                child_path = node.path + (segment,)
                var = node.vars.get(segment)
                # var/world/world on the root may sit beside /world itself
                if var is not None and var.type_path != child_path:
                    raise KindConflictError(
                        f"{segment!r} on {node.path_str} is already a var",
                        child_path, location)
                child = TypeNode(segment, child_path, node, location)
                node.children[segment] = child
            node = child
        return node

    def _set_parent_type(self, node: TypeNode, target: TypeNode, location: Location):
        if node.parent_type is target:
            return
        if node.parent_type is not None:
            raise ObjectTreeError(
                f"{node.path_str} already has parent_type {node.parent_type.path_str}",
                node.path, location)
        if target.is_subtype_of(node):
            raise ObjectTreeError(
                f"Inheritance cycle: {node.path_str} cannot inherit from {target.path_str}",
                node.path, location)
        node.parent_type = target

    def dump(self) -> List[str]:
        """Render the tree as text, one line per type and var."""
        lines = []
        for node in [self.root] + list(self.iter_types()):
            header = node.path_str
            if node.parent is not None:
                header += f" : {node.parent.path_str}"
            lines.append(header)
            for var in node.vars.values():
                lines.append(f"    {var}")
        return lines
