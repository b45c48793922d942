"""
dungeon_lib - Shared library for the gh-dungeon explorer

This package contains the modular components for gh-dungeon, a text
adventure that walks a remote repository tree as if it were a building:
navigation state, command parsing, content providers and the REPL loop.
"""

__version__ = "0.3.0"
