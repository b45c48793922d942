"""
Content provider interface for gh-dungeon.

A provider answers three questions about a remote tree: what is in this
directory, what is this file, and which change to this path came before
the current reference. Providers keep no state between calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence


class EntryKind(Enum):
    """Tag on a directory entry."""
    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class FileEntry:
    """A single child of a directory."""
    name: str
    kind: EntryKind
    sha: str = ""
    path: str = ""
    download_url: Optional[str] = None  # Content locator
    content: Optional[str] = None  # Inline text when the service returned it


@dataclass(frozen=True)
class DirectoryListing:
    """Immediate children of a path at a reference."""
    path: tuple[str, ...]
    requested_ref: Optional[str] = None
    ref: Optional[str] = None  # Ref name the service reported, e.g. a branch
    files: tuple[FileEntry, ...] = field(default_factory=tuple)
    dirs: tuple[FileEntry, ...] = field(default_factory=tuple)

    @property
    def dir_names(self) -> list[str]:
        return [d.name for d in self.dirs]

    @property
    def file_names(self) -> list[str]:
        return [f.name for f in self.files]

    @property
    def has_files(self) -> bool:
        return bool(self.files)

    @property
    def has_dirs(self) -> bool:
        return bool(self.dirs)


def partition_entries(entries: Sequence[FileEntry]) -> tuple[tuple[FileEntry, ...], tuple[FileEntry, ...]]:
    """Split entries into (files, dirs), each sorted by name."""
    files = sorted((e for e in entries if e.kind is EntryKind.FILE), key=lambda e: e.name)
    dirs = sorted((e for e in entries if e.kind is EntryKind.DIR), key=lambda e: e.name)
    return tuple(files), tuple(dirs)


class ContentProvider(ABC):
    """Abstract interface over a remote tree and its history."""

    @abstractmethod
    def list_directory(self, path: str, ref: Optional[str] = None) -> DirectoryListing:
        """
        List the children of a directory.

        Raises:
            NotFoundError: path does not exist (or is not a directory) at ref
            TransportError: network or service failure
        """

    @abstractmethod
    def get_file(self, path: str, ref: Optional[str] = None) -> FileEntry:
        """
        Describe a single file, including where its content can be fetched.

        Raises:
            NotFoundError: path does not exist (or is not a file) at ref
            TransportError: network or service failure
        """

    @abstractmethod
    def read_file(self, entry: FileEntry) -> str:
        """Return the text of a file entry."""

    @abstractmethod
    def previous_reference(self, path: str, ref: Optional[str] = None) -> str:
        """
        Find the change to path immediately before ref.

        The history for a path is ordered newest first, starting at ref (or
        at the head when ref is empty). Its first entry is ref itself, or the
        latest change at or before it, so the answer is the second entry.

        Raises:
            NoPriorHistoryError: fewer than two entries in the history
            TransportError: network or service failure
        """
