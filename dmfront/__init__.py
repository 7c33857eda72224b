"""
DM front end (dmfront) - Builtin symbols for the BYOND DM language.

This package seeds the two baselines every DM compile starts from: the
preprocessor's builtin constant macros and the object tree of builtin
types (datum, atom, obj, mob, world, client, ...) with their vars.
"""

__version__ = "0.1.0"
__author__ = "dmfront Project"
