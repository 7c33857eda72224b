"""
Preprocessor macro definitions.

A define is either a constant (#define NAME tokens...) or a function-like
macro (#define NAME(a, b) tokens...). The define table maps macro names to
these definitions and is what macro expansion consults.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..lexer.tokens import Token


@dataclass
class Define:
    """Base class for macro definitions."""
    subst: List[Token] = field(default_factory=list)


@dataclass
class ConstantDefine(Define):
    """Object-like macro: the name expands to `subst`."""

    @classmethod
    def of(cls, token: Token) -> 'ConstantDefine':
        """Single-token constant."""
        return cls(subst=[token])

    def __repr__(self):
        return f"ConstantDefine({self.subst!r})"


@dataclass
class FunctionDefine(Define):
    """Function-like macro with named parameters."""
    params: List[str] = field(default_factory=list)
    variadic: bool = False

    def __repr__(self):
        params = ", ".join(self.params + (["..."] if self.variadic else []))
        return f"FunctionDefine(({params}), {self.subst!r})"


DefineMap = Dict[str, Define]
