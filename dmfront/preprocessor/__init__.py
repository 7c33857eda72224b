"""DM preprocessor define table."""

from .defines import Define, ConstantDefine, FunctionDefine, DefineMap

__all__ = ['Define', 'ConstantDefine', 'FunctionDefine', 'DefineMap']
