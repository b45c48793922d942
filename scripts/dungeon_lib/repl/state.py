"""
Navigation state for the gh-dungeon REPL.

This module contains:
- NavigationState: where the player is (path segments) and when (reference)
- join_path / split_path: conversion between segments and "a/b" form
- get_prompt_text: prompt string for the current position
"""

from typing import Optional

from dungeon_lib.errors import AtRootError, UnsupportedOperationError
from dungeon_lib.provider import ContentProvider, DirectoryListing


def join_path(segments) -> str:
    """Join path segments into the form the provider expects."""
    return "/".join(segments)


def split_path(joined: str) -> list[str]:
    """Split a joined path back into segments. The root is []."""
    return [s for s in joined.split("/") if s]


def short_ref(ref: Optional[str]) -> str:
    """Abbreviate a commit SHA for display."""
    if not ref:
        return "latest"
    if len(ref) == 40 and all(c in "0123456789abcdef" for c in ref):
        return ref[:7]
    return ref


class NavigationState:
    """Current path, historical reference and cached listing for a session."""

    def __init__(self, ref: Optional[str] = None):
        self._segments: list[str] = []
        self._ref: Optional[str] = ref or None
        self._forward: list[Optional[str]] = []  # Refs left behind by shift back
        self._listing: Optional[DirectoryListing] = None
        self._listing_key = None

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._segments)

    @property
    def joined_path(self) -> str:
        return join_path(self._segments)

    @property
    def ref(self) -> Optional[str]:
        return self._ref

    @property
    def is_root(self) -> bool:
        return not self._segments

    def label(self, repo: str) -> str:
        """Name on the sign in the current room."""
        return self._segments[-1] if self._segments else repo

    # -- listing cache -----------------------------------------------------

    def _key(self):
        return (self.path, self._ref)

    @property
    def listing(self) -> Optional[DirectoryListing]:
        """The cached listing, or None if it was fetched for another position."""
        if self._listing is not None and self._listing_key == self._key():
            return self._listing
        return None

    def store_listing(self, listing: DirectoryListing) -> None:
        """Cache a listing fetched for the current position."""
        if listing.path != self.path:
            raise ValueError(f"listing for /{join_path(listing.path)} does not match /{self.joined_path}")
        self._listing = listing
        self._listing_key = self._key()

    def invalidate(self) -> None:
        self._listing = None
        self._listing_key = None

    # -- transitions -------------------------------------------------------

    def descend(self, segment: str) -> None:
        """Step into a child directory."""
        if not segment or "/" in segment:
            raise ValueError(f"invalid path segment: {segment!r}")
        self._segments.append(segment)
        self.invalidate()

    def ascend(self) -> str:
        """Step out to the parent directory. Returns the segment left."""
        if not self._segments:
            raise AtRootError()
        segment = self._segments.pop()
        self.invalidate()
        return segment

    def reset_to_root(self) -> None:
        self._segments.clear()
        self.invalidate()

    def reset_to_latest(self) -> None:
        self._ref = None
        self._forward.clear()
        self.invalidate()

    def shift_to_previous(self, provider: ContentProvider) -> str:
        """
        Move the reference to the change before it for the current path.

        NoPriorHistoryError and provider failures propagate with the state
        untouched.
        """
        previous = provider.previous_reference(self.joined_path, self._ref)
        self._forward.append(self._ref)
        self._ref = previous
        self.invalidate()
        return previous

    def shift_to_next(self) -> Optional[str]:
        """
        Undo the most recent shift back.

        The history service cannot answer "what changed after X", so only
        references this session has already left can be returned to.
        """
        if not self._forward:
            raise UnsupportedOperationError("the future has not been written yet")
        self._ref = self._forward.pop()
        self.invalidate()
        return self._ref


def get_prompt_text(state: NavigationState, repo: str) -> str:
    """Generate the prompt string for the current position."""
    where = f"{repo}/{state.joined_path}" if not state.is_root else repo
    when = f"@{short_ref(state.ref)}" if state.ref else ""
    return f"{where}{when}> "
