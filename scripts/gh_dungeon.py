#!/usr/bin/env python3
"""
gh_dungeon.py - Explore a GitHub repository as a text adventure

Walk a repository's directory tree as rooms and staircases, pick up its
files as papers, and shift back through its history.
"""

import sys

from dungeon_lib.cli import main


if __name__ == "__main__":
    sys.exit(main())
