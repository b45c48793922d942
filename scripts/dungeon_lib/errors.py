"""
Error taxonomy for gh-dungeon.

Every error raised by the core carries an ErrorKind. The session loop
decides how to react by inspecting the kind, never the concrete class.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure the session loop knows how to handle."""
    UNKNOWN_COMMAND = "unknown_command"
    AT_ROOT = "at_root"
    NO_PRIOR_HISTORY = "no_prior_history"
    UNSUPPORTED = "unsupported"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"


class DungeonError(Exception):
    """Base class for all gh-dungeon errors."""
    kind: ErrorKind = ErrorKind.TRANSPORT

    @property
    def recoverable(self) -> bool:
        """Transport failures are the only kind the loop cannot absorb."""
        return self.kind is not ErrorKind.TRANSPORT


class UnknownCommandError(DungeonError):
    """Raised when input text does not parse into a command."""
    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, raw: str, hint: str = ""):
        super().__init__("i did not understand :( supported verbs: look, go, examine, shift, quit")
        self.raw = raw
        self.hint = hint


class AtRootError(DungeonError):
    """Raised when ascending from the root of the tree."""
    kind = ErrorKind.AT_ROOT

    def __init__(self, message: str = "already at the root"):
        super().__init__(message)


class NoPriorHistoryError(DungeonError):
    """Raised when a path has no change before the current reference."""
    kind = ErrorKind.NO_PRIOR_HISTORY

    def __init__(self, path: str, ref: Optional[str] = None):
        where = f"'{path}'" if path else "the root"
        at = f" before {ref}" if ref else ""
        super().__init__(f"no earlier history for {where}{at}")
        self.path = path
        self.ref = ref


class UnsupportedOperationError(DungeonError):
    """Raised for operations the current design cannot perform."""
    kind = ErrorKind.UNSUPPORTED


class NotFoundError(DungeonError):
    """Raised when a path does not exist at the requested reference."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, ref: Optional[str] = None, message: str = ""):
        if not message:
            where = path or "/"
            message = f"{where} not found" + (f" at {ref}" if ref else "")
        super().__init__(message)
        self.path = path
        self.ref = ref


class TransportError(DungeonError):
    """Raised on network or service failure."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class SelectionCancelled(DungeonError):
    """Raised when the user backs out of a selection prompt."""
    kind = ErrorKind.CANCELLED

    def __init__(self, message: str = "selection cancelled"):
        super().__init__(message)
