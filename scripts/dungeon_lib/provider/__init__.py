"""
dungeon_lib.provider - Content providers for gh-dungeon

This package contains:
- base: FileEntry, DirectoryListing and the ContentProvider interface
- github: GitHubContentProvider over the GitHub REST API
"""

from .base import (
    EntryKind,
    FileEntry,
    DirectoryListing,
    ContentProvider,
    partition_entries,
)

from .github import GitHubContentProvider

__all__ = [
    'EntryKind',
    'FileEntry',
    'DirectoryListing',
    'ContentProvider',
    'partition_entries',
    'GitHubContentProvider',
]
