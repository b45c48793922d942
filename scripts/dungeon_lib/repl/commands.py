"""
Command parsing for the gh-dungeon REPL.

parse_command() turns a line of player input into a Command, or raises
UnknownCommandError with a hint for the player. It has no side effects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dungeon_lib.errors import UnknownCommandError


class CommandKind(Enum):
    LOOK = "look"
    GO = "go"
    EXAMINE = "examine"
    SHIFT = "shift"
    QUIT = "quit"
    HELP = "help"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    BACK = "back"
    FORWARD = "forward"


@dataclass(frozen=True)
class Command:
    """A parsed player command."""
    kind: CommandKind
    raw: str
    args: list[str] = field(default_factory=list)
    direction: Optional[Direction] = None


GO_HINT = "try 'go down' or 'go up'"
SHIFT_HINT = "try 'shift back' or 'shift forward'"

# Verbs that take no argument, checked in order
BARE_VERBS = [
    ("look", CommandKind.LOOK),
    ("examine", CommandKind.EXAMINE),
    ("quit", CommandKind.QUIT),
    ("q", CommandKind.QUIT),
]

# Verbs that take exactly one direction: verb -> (kind, allowed, hint)
DIRECTED_VERBS = {
    "go": (CommandKind.GO, (Direction.DOWN, Direction.UP), GO_HINT),
    "shift": (CommandKind.SHIFT, (Direction.BACK, Direction.FORWARD), SHIFT_HINT),
}

# For completion and help
VERBS = ["look", "go", "examine", "shift", "quit", "?"]
DIRECTIONS = {
    verb: [d.value for d in allowed]
    for verb, (_, allowed, _) in DIRECTED_VERBS.items()
}


def _parse_directed(verb: str, text: str, raw: str) -> Command:
    kind, allowed, hint = DIRECTED_VERBS[verb]
    parts = text.split(" ")
    if len(parts) != 2:
        raise UnknownCommandError(raw, hint)
    for direction in allowed:
        if parts[1] == direction.value:
            return Command(kind=kind, raw=raw, args=[parts[1]], direction=direction)
    raise UnknownCommandError(raw, hint)


def parse_command(raw: str) -> Command:
    """
    Parse a line of input into a Command.

    Matching is case-sensitive on the trimmed text, while Command.raw keeps
    the line exactly as typed. Bare verbs must match the whole line. 'go'
    and 'shift' need one space and exactly one direction; anything else
    that starts with those verbs gets a hint.

    Raises:
        UnknownCommandError: if the text is not a command
    """
    text = raw.strip()

    for verb, kind in BARE_VERBS:
        if text == verb:
            return Command(kind=kind, raw=raw)

    verb = text.split(" ", 1)[0]
    if verb in DIRECTED_VERBS:
        return _parse_directed(verb, text, raw)

    if text == "?":
        return Command(kind=CommandKind.HELP, raw=raw)

    raise UnknownCommandError(raw)
