"""
DM token representation.

Only the token value types are defined here; the preprocessor's define
table stores its substitutions as lists of these tokens.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """DM token types."""
    # Literals
    INT = auto()         # 123, -456
    STRING = auto()      # "text"

    # Names
    IDENT = auto()       # identifier


@dataclass(frozen=True)
class Token:
    """Represents a single token."""
    type: TokenType
    value: Any
    line: int = 0
    column: int = 0

    @classmethod
    def integer(cls, value: int) -> 'Token':
        return cls(TokenType.INT, value)

    @classmethod
    def string(cls, value: str) -> 'Token':
        return cls(TokenType.STRING, value)

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
