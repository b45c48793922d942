"""
Scripted REPL for gh-dungeon.

Feeds a fixed sequence of lines and selections to a session. Used by the
test suite and for driving a session from a script.
"""

from collections import deque
from typing import Iterable, Optional, Sequence, Union

from dungeon_lib.errors import SelectionCancelled


# A selection may be given as an index or as the option text
Choice = Union[int, str, None]


class ScriptedREPL:
    """REPL that replays canned input and records what it was asked."""

    def __init__(self, lines: Iterable[str] = (), selections: Iterable[Choice] = ()):
        self.lines = deque(lines)
        self.selections = deque(selections)
        self.prompts: list[str] = []
        self.offered: list[list[str]] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.popleft()

    def select_one(self, prompt: str, options: Sequence[str]) -> int:
        self.prompts.append(prompt)
        self.offered.append(list(options))
        choice: Optional[Choice] = self.selections.popleft() if self.selections else None
        if choice is None:
            raise SelectionCancelled()
        if isinstance(choice, str):
            if choice not in options:
                raise SelectionCancelled(f"{choice!r} is not one of the options")
            return list(options).index(choice)
        if not 0 <= choice < len(options):
            raise SelectionCancelled(f"option {choice} out of range")
        return choice
