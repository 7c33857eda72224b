"""BYOND builtin constants, types and vars."""

from .constants import default_defines, BUILTIN_CONSTANTS
from .entries import (
    Entry, TypeDeclaration, VariableDeclaration, BUILTIN_ENTRIES,
    parse_entry, check_entry_order,
)
from .registry import BuiltinRegistrar, register_builtins

__all__ = [
    'default_defines', 'BUILTIN_CONSTANTS',
    'Entry', 'TypeDeclaration', 'VariableDeclaration', 'BUILTIN_ENTRIES',
    'parse_entry', 'check_entry_order',
    'BuiltinRegistrar', 'register_builtins',
]
