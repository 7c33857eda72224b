"""DM object tree: types, their vars, and inheritance links."""

from .objtree import ObjectTree, TypeNode, TypeVar, VAR_MODIFIERS
from .errors import (
    ObjectTreeError, EmptySegmentError, KindConflictError,
    DuplicateVariableError, UnresolvedReferenceError, format_path,
)

__all__ = [
    'ObjectTree', 'TypeNode', 'TypeVar', 'VAR_MODIFIERS',
    'ObjectTreeError', 'EmptySegmentError', 'KindConflictError',
    'DuplicateVariableError', 'UnresolvedReferenceError', 'format_path',
]
