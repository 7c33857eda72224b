#!/usr/bin/env python3
"""
DM front end entry point.

Usage: python dmfront.py [--dump-tree] [--dump-defines] [--verbose]
"""

from dmfront.context import main

if __name__ == '__main__':
    main()
