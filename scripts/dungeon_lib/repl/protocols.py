"""Capability protocol for the input side of a session.

The session loop only needs to read a line and to have the player pick
one option from a list. TerminalREPL and ScriptedREPL both satisfy this
protocol without sharing a base class.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class REPL(Protocol):
    """Source of player input."""

    def read_line(self, prompt: str) -> str:
        """Read one line. Raises EOFError at end of input."""
        ...

    def select_one(self, prompt: str, options: Sequence[str]) -> int:
        """Return the index of the chosen option. Raises SelectionCancelled."""
        ...
