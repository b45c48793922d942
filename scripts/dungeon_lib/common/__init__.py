"""
dungeon_lib.common - Shared utilities for gh-dungeon

This module provides:
- colors: ANSI color codes, player-facing print helpers and logging setup
"""

from .colors import Colors, warn, error, info, narrate, configure_logging

__all__ = [
    'Colors', 'warn', 'error', 'info', 'narrate', 'configure_logging',
]
