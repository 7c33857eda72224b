"""
Compile context.

Owns the object tree and the define table for one tool run and seeds both
with BYOND's builtins before any user file is read.
"""

import sys
from typing import Optional

from .builtins import default_defines, register_builtins
from .objtree import ObjectTree, ObjectTreeError
from .lexer import Token, TokenType
from .preprocessor import DefineMap


def token_text(token: Token) -> str:
    """Source spelling of a literal token."""
    if token.type == TokenType.STRING:
        return f'"{token.value}"'
    return str(token.value)


class Context:
    """Per-run state shared by the DM front end."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.tree = ObjectTree()
        self.defines: DefineMap = {}
        self.bootstrapped = False

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[dmfront] {message}", file=sys.stderr)

    def bootstrap(self):
        """Register builtin defines and types. Later calls do nothing."""
        if self.bootstrapped:
            return
        self.log("Registering builtin defines...")
        default_defines(self.defines)
        self.log(f"  {len(self.defines)} defines")

        self.log("Registering builtin types...")
        register_builtins(self.tree, verbose=self.verbose)
        self.bootstrapped = True

    def dump_defines(self) -> str:
        lines = []
        for name in sorted(self.defines):
            tokens = ' '.join(token_text(token) for token in self.defines[name].subst)
            lines.append(f"#define {name} {tokens}")
        return '\n'.join(lines)

    def dump_tree(self) -> str:
        return '\n'.join(self.tree.dump())


def main(argv: Optional[list] = None):
    """Command-line interface: print the builtin baseline."""
    import argparse

    parser = argparse.ArgumentParser(
        description='DM front end - show the builtin defines and object tree'
    )
    parser.add_argument('--dump-tree', action='store_true',
                        help='Print the builtin object tree')
    parser.add_argument('--dump-defines', action='store_true',
                        help='Print the builtin constant macros')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    context = Context(verbose=args.verbose)
    try:
        context.bootstrap()
    except ObjectTreeError as e:
        print(f"Builtin registration error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    if args.dump_defines:
        print(context.dump_defines())
    if args.dump_tree:
        print(context.dump_tree())
    sys.exit(0)


if __name__ == '__main__':
    main()
