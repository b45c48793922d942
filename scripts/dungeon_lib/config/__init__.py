"""
dungeon_lib.config - Configuration for gh-dungeon.

This package contains:
- constants: Path constants and defaults (TEMPLATE_DIR, CONFIG_FILE, etc.)
- settings: Setting resolution from args, environment and config file
"""

from .constants import (
    TEMPLATE_DIR,
    FLAVOR_FILE,
    CONFIG_FILE,
    HISTORY_FILE,
    DEFAULT_REPO,
    DEFAULT_API_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
)

from .settings import (
    Settings,
    get_config_path,
    load_dungeon_config,
    validate_repo,
    get_repo,
    get_api_url,
    get_token,
    get_max_retries,
    resolve_settings,
)

__all__ = [
    # Constants
    'TEMPLATE_DIR',
    'FLAVOR_FILE',
    'CONFIG_FILE',
    'HISTORY_FILE',
    'DEFAULT_REPO',
    'DEFAULT_API_URL',
    'DEFAULT_MAX_RETRIES',
    'DEFAULT_TIMEOUT',
    # Settings
    'Settings',
    'get_config_path',
    'load_dungeon_config',
    'validate_repo',
    'get_repo',
    'get_api_url',
    'get_token',
    'get_max_retries',
    'resolve_settings',
]
