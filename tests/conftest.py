"""Shared fixtures for gh-dungeon tests."""

from typing import Optional

import pytest

from dungeon_lib.errors import NoPriorHistoryError, NotFoundError
from dungeon_lib.provider import (
    ContentProvider,
    DirectoryListing,
    EntryKind,
    FileEntry,
    partition_entries,
)
from dungeon_lib.repl import DungeonSession, ScriptedREPL
from dungeon_lib.repl.state import split_path


class FakeProvider(ContentProvider):
    """In-memory tree with per-path history, recording every listing call."""

    def __init__(self, snapshots: dict, history: dict, head: str):
        self.snapshots = snapshots
        self.history = history
        self.head = head
        self.calls: list[tuple[str, Optional[str]]] = []
        self.failures: list[Exception] = []  # Raised by the next list_directory calls
        self.vanished: set[str] = set()  # Paths that no longer exist

    def _tree(self, path: str, ref: Optional[str]) -> dict:
        tree = self.snapshots.get(ref or self.head)
        if tree is None or path in self.vanished or path not in tree:
            raise NotFoundError(path, ref)
        return tree

    def list_directory(self, path, ref=None):
        self.calls.append((path, ref))
        if self.failures:
            raise self.failures.pop(0)
        node = self._tree(path, ref)[path]

        prefix = f"{path}/" if path else ""
        entries = [FileEntry(name=d, kind=EntryKind.DIR, path=prefix + d) for d in node.get("dirs", [])]
        entries += [
            FileEntry(name=name, kind=EntryKind.FILE, path=prefix + name)
            for name in node.get("files", {})
        ]
        files, dirs = partition_entries(entries)
        return DirectoryListing(
            path=tuple(split_path(path)),
            requested_ref=ref,
            ref=ref or self.head,
            files=files,
            dirs=dirs,
        )

    def get_file(self, path, ref=None):
        parent, _, name = path.rpartition("/")
        node = self._tree(parent, ref)[parent]
        if name not in node.get("files", {}):
            raise NotFoundError(path, ref)
        return FileEntry(
            name=name,
            kind=EntryKind.FILE,
            path=path,
            content=node["files"][name],
        )

    def read_file(self, entry):
        return entry.content

    def previous_reference(self, path, ref=None):
        refs = self.history.get(path, [])
        start = ref or self.head
        refs = refs[refs.index(start):] if start in refs else []
        if len(refs) < 2:
            raise NoPriorHistoryError(path, ref)
        return refs[1]


@pytest.fixture
def provider():
    """A small repository with three commits: c1 (oldest) to c3 (head)."""
    snapshots = {
        "c3": {
            "": {"dirs": ["internal", "docs"], "files": {"README.md": "# cli\n"}},
            "internal": {"dirs": ["pkg"], "files": {"api.go": "package api\n"}},
            "internal/pkg": {"files": {"util.go": "package pkg\n"}},
            "docs": {},
        },
        "c2": {
            "": {"dirs": ["internal"], "files": {"README.md": "# old cli\n"}},
            "internal": {"files": {"api.go": "package old\n"}},
        },
        "c1": {
            "": {"files": {"README.md": "# first\n"}},
        },
    }
    history = {
        "": ["c3", "c2", "c1"],
        "internal": ["c3", "c2"],
        "internal/pkg": ["c3"],
        "docs": ["c3"],
    }
    return FakeProvider(snapshots, history, head="c3")


class PagerRecorder:
    """Stands in for the file viewer."""

    def __init__(self):
        self.shown: list[tuple[str, str]] = []

    def __call__(self, title: str, text: str) -> None:
        self.shown.append((title, text))


@pytest.fixture
def pager():
    return PagerRecorder()


@pytest.fixture
def make_session(provider, pager):
    """Build a DungeonSession driven by scripted input."""

    def _make(lines=(), selections=(), **kwargs):
        kwargs.setdefault("retry_delay", 0)
        repl = ScriptedREPL(lines, selections)
        return DungeonSession("cli/cli", provider, repl, pager=pager, **kwargs)

    return _make


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Isolate settings resolution from the real environment and config file."""
    for var in ("GH_DUNGEON_REPO", "GITHUB_API_URL", "GH_TOKEN", "GITHUB_TOKEN", "GH_DUNGEON_RETRIES"):
        monkeypatch.delenv(var, raising=False)
    config_path = tmp_path / "config.json"
    monkeypatch.setenv("GH_DUNGEON_CONFIG", str(config_path))
    return config_path
