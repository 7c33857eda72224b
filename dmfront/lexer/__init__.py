"""DM lexical tokens."""

from .tokens import Token, TokenType

__all__ = ['Token', 'TokenType']
