"""
dungeon_lib.repl - REPL components for gh-dungeon

This package contains the modular components for the interactive session:
- commands: Command parsing
- state: Navigation state (path, reference, cached listing) and prompt text
- protocols: The REPL capability interface
- terminal: Interactive prompt_toolkit REPL
- scripted: Scripted REPL for tests and automation
- completer: Tab completion
- loop: DungeonSession, the main session loop
"""

from .commands import Command, CommandKind, Direction, parse_command
from .state import NavigationState, get_prompt_text, join_path, split_path
from .protocols import REPL
from .scripted import ScriptedREPL
from .loop import DungeonSession

__all__ = [
    'Command',
    'CommandKind',
    'Direction',
    'parse_command',
    'NavigationState',
    'get_prompt_text',
    'join_path',
    'split_path',
    'REPL',
    'ScriptedREPL',
    'DungeonSession',
]
