"""
GitHub REST content provider for gh-dungeon.

This module maps provider queries onto the repository contents and
commits endpoints of the GitHub REST API.
"""

import base64
import logging
from typing import Optional
from urllib.parse import parse_qs, quote, urlparse

import requests

from dungeon_lib.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from dungeon_lib.errors import NoPriorHistoryError, NotFoundError, TransportError

from .base import ContentProvider, DirectoryListing, EntryKind, FileEntry, partition_entries


logger = logging.getLogger(__name__)

ENTRY_KINDS = {"file": EntryKind.FILE, "dir": EntryKind.DIR}


def _ref_from_url(url: Optional[str]) -> Optional[str]:
    """Pull the ref= query value out of a contents API url."""
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get("ref")
    return values[0] if values else None


def _decode_content(item: dict) -> Optional[str]:
    """
    Decode inline file content, if the API sent any.

    Files over 1 MB come back with empty content and encoding "none";
    those return None so the caller follows download_url instead.
    """
    content = item.get("content")
    if not content or item.get("encoding") != "base64":
        return None
    return base64.b64decode(content).decode("utf-8", errors="replace")


class GitHubContentProvider(ContentProvider):
    """Content provider backed by the GitHub REST API."""

    def __init__(
        self,
        repo: str,
        session: Optional[requests.Session] = None,
        api_url: str = DEFAULT_API_URL,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        if not self.api_url.startswith("http"):
            self.api_url = f"https://{self.api_url}"
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, url: str, params: Optional[dict] = None):
        logger.debug("GET %s params=%s", url, params)
        try:
            return self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    def _get_json(self, endpoint: str, params: dict, path: str, ref: Optional[str]):
        url = f"{self.api_url}/repos/{self.repo}/{endpoint}"
        response = self._request(url, params)
        logger.debug("%s -> %s", url, response.status_code)

        # GitHub answers 422 for a ref it has never heard of
        if response.status_code in (404, 422):
            raise NotFoundError(path, ref)
        if response.status_code >= 400:
            raise TransportError(
                f"GitHub returned {response.status_code} for {url}",
                status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Malformed response from {url}: {e}") from e

    def _contents(self, path: str, ref: Optional[str]):
        params = {"ref": ref} if ref else {}
        return self._get_json(f"contents/{quote(path, safe='/')}", params, path, ref)

    def list_directory(self, path: str, ref: Optional[str] = None) -> DirectoryListing:
        data = self._contents(path, ref)
        if not isinstance(data, list):
            raise NotFoundError(path, ref, message=f"{path or '/'} is not a directory")

        entries = []
        for item in data:
            kind = ENTRY_KINDS.get(item.get("type"))
            if kind is None:
                continue  # symlinks and submodules
            entries.append(FileEntry(
                name=item["name"],
                kind=kind,
                sha=item.get("sha", ""),
                path=item.get("path", ""),
                download_url=item.get("download_url"),
            ))

        resolved = ref
        if data:
            resolved = _ref_from_url(data[0].get("url")) or ref

        files, dirs = partition_entries(entries)
        return DirectoryListing(
            path=tuple(s for s in path.split("/") if s),
            requested_ref=ref,
            ref=resolved,
            files=files,
            dirs=dirs,
        )

    def get_file(self, path: str, ref: Optional[str] = None) -> FileEntry:
        data = self._contents(path, ref)
        if not isinstance(data, dict) or data.get("type") != "file":
            raise NotFoundError(path, ref, message=f"{path} is not a file")
        return FileEntry(
            name=data["name"],
            kind=EntryKind.FILE,
            sha=data.get("sha", ""),
            path=data.get("path", path),
            download_url=data.get("download_url"),
            content=_decode_content(data),
        )

    def read_file(self, entry: FileEntry) -> str:
        if entry.content is not None:
            return entry.content
        if not entry.download_url:
            raise NotFoundError(entry.path, message=f"{entry.name} has no readable content")

        response = self._request(entry.download_url)
        if response.status_code == 404:
            raise NotFoundError(entry.path)
        if response.status_code >= 400:
            raise TransportError(
                f"Download of {entry.name} failed with {response.status_code}",
                status=response.status_code,
            )
        return response.text

    def previous_reference(self, path: str, ref: Optional[str] = None) -> str:
        params = {"per_page": 2}
        if path:
            params["path"] = path
        if ref:
            params["sha"] = ref

        history = self._get_json("commits", params, path, ref)
        if not isinstance(history, list) or len(history) < 2:
            raise NoPriorHistoryError(path, ref)
        return history[1]["sha"]
