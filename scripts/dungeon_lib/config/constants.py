"""
Configuration constants for gh-dungeon.

Paths and default values used across the configuration system.
"""

from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Bundled resources
TEMPLATE_DIR = PACKAGE_DIR / "templates"
FLAVOR_FILE = PACKAGE_DIR / "data" / "flavors.yaml"

# User files
CONFIG_FILE = Path.home() / ".config" / "gh-dungeon" / "config.json"
HISTORY_FILE = Path.home() / ".gh_dungeon_history"

# Defaults
DEFAULT_REPO = "cli/cli"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_MAX_RETRIES = 2
DEFAULT_TIMEOUT = 15
