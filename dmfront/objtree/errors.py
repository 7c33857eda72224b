"""
Object tree errors.

Raised while types and vars are registered. For the builtin bootstrap
every one of these means the builtin table itself is wrong.
"""

from typing import Optional, Sequence

from ..location import Location


def format_path(path: Sequence[str]) -> str:
    """Render a segment list the way DM spells it."""
    return '/' + '/'.join(path)


class ObjectTreeError(ValueError):
    """Structural error while registering into the object tree."""

    def __init__(self, message: str, path: Sequence[str] = (),
                 location: Optional[Location] = None):
        self.path = tuple(path)
        self.location = location
        self.message = message
        if location is not None:
            message = f"{location}: {message}"
        super().__init__(message)


class EmptySegmentError(ObjectTreeError):
    """A path is empty or contains an empty segment (e.g. "atom//x")."""


class KindConflictError(ObjectTreeError):
    """A name is declared both as a type and as a var on the same node."""


class DuplicateVariableError(KindConflictError):
    """A var is declared twice on the same type."""


class UnresolvedReferenceError(ObjectTreeError):
    """A type path names a type that does not exist (yet)."""
