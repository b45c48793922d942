"""
Settings resolution for gh-dungeon.

Each setting is taken from the command line, then the environment, then
the JSON config file, then the built-in default.
"""

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import (
    CONFIG_FILE,
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_REPO,
)


REPO_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


@dataclass
class Settings:
    """Resolved settings for one session."""
    repo: str = DEFAULT_REPO
    api_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    max_retries: int = DEFAULT_MAX_RETRIES


def get_config_path() -> Path:
    """Get the config file path, honouring GH_DUNGEON_CONFIG."""
    override = os.environ.get("GH_DUNGEON_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def load_dungeon_config() -> dict:
    """Load settings from the config file, or {} if missing or unreadable."""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
        except (json.JSONDecodeError, IOError):
            pass
    return {}


def validate_repo(repo: str) -> bool:
    """Validate an owner/name repository identifier."""
    return bool(REPO_PATTERN.match(repo)) and ".." not in repo


def get_repo(arg_repo: Optional[str] = None) -> str:
    """Get repository from args, env, config, or default."""
    if arg_repo:
        return arg_repo
    if os.environ.get("GH_DUNGEON_REPO"):
        return os.environ["GH_DUNGEON_REPO"]
    config = load_dungeon_config()
    if config.get("repo"):
        return config["repo"]
    return DEFAULT_REPO


def get_api_url(arg_url: Optional[str] = None) -> str:
    """Get API base URL from args, env, config, or default."""
    if arg_url:
        return arg_url
    if os.environ.get("GITHUB_API_URL"):
        return os.environ["GITHUB_API_URL"]
    config = load_dungeon_config()
    if config.get("api_url"):
        return config["api_url"]
    return DEFAULT_API_URL


def get_token() -> Optional[str]:
    """Get an API token from env or config. Anonymous access if none."""
    for var in ("GH_TOKEN", "GITHUB_TOKEN"):
        if os.environ.get(var):
            return os.environ[var]
    config = load_dungeon_config()
    return config.get("token") or None


def get_max_retries(arg_retries: Optional[int] = None) -> int:
    """Get transport retry count from args, env, config, or default."""
    if arg_retries is not None:
        return max(0, arg_retries)
    env = os.environ.get("GH_DUNGEON_RETRIES")
    if env:
        try:
            return max(0, int(env))
        except ValueError:
            pass
    config = load_dungeon_config()
    value = config.get("max_retries")
    if isinstance(value, int) and value >= 0:
        return value
    return DEFAULT_MAX_RETRIES


def resolve_settings(
    repo: Optional[str] = None,
    api_url: Optional[str] = None,
    max_retries: Optional[int] = None,
) -> Settings:
    """Resolve every setting for a session."""
    return Settings(
        repo=get_repo(repo),
        api_url=get_api_url(api_url),
        token=get_token(),
        max_retries=get_max_retries(max_retries),
    )
