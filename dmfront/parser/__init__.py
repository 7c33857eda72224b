"""DM expression nodes used for var default values."""

from .ast_nodes import *

__all__ = ['NodeType', 'ASTNode', 'NumberNode', 'StringNode', 'PrefabNode']
