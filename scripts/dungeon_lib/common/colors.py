"""
ANSI color codes and output helpers for gh-dungeon.

The print helpers are for player-facing messages. Diagnostics go through
the logging module, configured once by configure_logging().
"""

import logging
import sys


class Colors:
    """ANSI escapes used by the dungeon's prompts and messages."""
    RED = "\033[0;31m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    NC = "\033[0m"


def _tagged(color: str, tag: str, msg: str) -> None:
    print(f"{color}{tag}{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Something the player did that the dungeon could not follow."""
    _tagged(Colors.YELLOW, "[!]", msg)


def error(msg: str) -> None:
    """A failure that ends the session."""
    _tagged(Colors.RED, "[ERROR]", msg)


def info(msg: str) -> None:
    _tagged(Colors.CYAN, "[i]", msg)


def narrate(msg: str) -> None:
    """Print a line of story text."""
    print(msg)


def configure_logging(debug: bool = False) -> None:
    """Send diagnostics to stderr so they never interleave with the prompt."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
