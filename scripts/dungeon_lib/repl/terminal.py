"""
Interactive terminal REPL for gh-dungeon.

Wraps a prompt_toolkit PromptSession for command input, and offers
numbered selection lists for picking doors and papers.
"""

from pathlib import Path
from typing import Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from dungeon_lib.common import Colors, warn
from dungeon_lib.errors import SelectionCancelled

from .completer import VerbCompleter


DUNGEON_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'completion-menu.completion': 'bg:#333333 #ffffff',
    'completion-menu.completion.current': 'bg:#00aa00 #000000',
})


class TerminalREPL:
    """REPL reading from the terminal through prompt_toolkit."""

    def __init__(self, history_file: Optional[Path] = None):
        history = FileHistory(str(history_file)) if history_file else InMemoryHistory()
        self.completer = VerbCompleter()
        self.session = PromptSession(
            history=history,
            completer=self.completer,
            style=DUNGEON_STYLE,
        )

    def read_line(self, prompt: str) -> str:
        # prompt() keeps per-call arguments, so put the verb completer back
        # EOFError (Ctrl+D) and KeyboardInterrupt propagate to the session loop
        return self.session.prompt(prompt, completer=self.completer)

    def select_one(self, prompt: str, options: Sequence[str]) -> int:
        """
        Show a numbered list and read a choice by number or name.

        Empty input, Ctrl+C or Ctrl+D cancel the selection.
        """
        if not options:
            raise SelectionCancelled("nothing to choose from")

        print()
        for i, option in enumerate(options, 1):
            print(f"  {Colors.CYAN}{i:>3}{Colors.NC}  {option}")
        print()

        completer = WordCompleter(list(options), sentence=True)
        while True:
            try:
                answer = self.session.prompt(f"{prompt} ", completer=completer).strip()
            except (KeyboardInterrupt, EOFError):
                print()
                raise SelectionCancelled()

            if not answer:
                raise SelectionCancelled()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            if answer in options:
                return list(options).index(answer)
            warn(f"'{answer}' is not one of the choices")
