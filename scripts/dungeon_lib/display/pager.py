"""
File viewer for gh-dungeon.

Shows the text of an examined file with syntax highlighting, paging it
when it is longer than the terminal.
"""

from typing import Optional

from rich.console import Console
from rich.rule import Rule
from rich.syntax import Syntax


def show_file(title: str, text: str, console: Optional[Console] = None) -> None:
    """Display file content with paging if it exceeds terminal height."""
    console = console or Console()
    lexer = Syntax.guess_lexer(title, code=text)
    syntax = Syntax(text, lexer, line_numbers=True, word_wrap=False)

    # Leave room for the prompt
    if len(text.splitlines()) <= console.height - 5:
        console.print()
        console.print(Rule(title))
        console.print(syntax)
        console.print()
        return

    with console.pager(styles=True):
        console.print(Rule(title))
        console.print(syntax)
