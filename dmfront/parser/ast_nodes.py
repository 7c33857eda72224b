"""
Abstract Syntax Tree node definitions for DM expressions.

Only the literal forms needed for var defaults are modeled: numbers,
strings, and prefabs (type-path literals such as /atom/movable).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
from enum import Enum, auto


class NodeType(Enum):
    """AST node types."""
    # Literals
    NUMBER = auto()
    STRING = auto()
    PREFAB = auto()        # /type/path


@dataclass(eq=False)
class ASTNode:
    """Base class for all AST nodes."""
    node_type: NodeType
    line: int = 0
    column: int = 0

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}(...)"


class NumberNode(ASTNode):
    """Number literal node."""
    def __init__(self, value: int, line: int = 0, column: int = 0):
        super().__init__(NodeType.NUMBER, line, column)
        self.value = value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Number({self.value})"


class StringNode(ASTNode):
    """String literal node."""
    def __init__(self, value: str, line: int = 0, column: int = 0):
        super().__init__(NodeType.STRING, line, column)
        self.value = value

    def __str__(self):
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'

    def __repr__(self):
        return f"String({self.value!r})"


class PrefabNode(ASTNode):
    """Type-path literal (/datum, /atom/movable)."""
    def __init__(self, path: Sequence[str], line: int = 0, column: int = 0):
        super().__init__(NodeType.PREFAB, line, column)
        self.path: Tuple[str, ...] = tuple(path)

    @classmethod
    def parse(cls, text: str) -> 'PrefabNode':
        """Build a prefab from its source spelling, e.g. "/atom/movable"."""
        if not text.startswith('/'):
            raise ValueError(f"Type path must be absolute: {text!r}")
        return cls(text[1:].split('/'))

    def __str__(self):
        return '/' + '/'.join(self.path)

    def __repr__(self):
        return f"Prefab({self})"
