"""
dungeon_lib.display - Output for gh-dungeon

This package contains:
- flavor: YAML themes and hash-based selection of room text
- render: RoomRenderer over the room.j2 template
- pager: Syntax-highlighted file viewer
"""

from .flavor import (
    FlavorValidationError,
    Theme,
    RoomFlavor,
    DEFAULT_FLAVOR,
    stable_index,
    validate_flavor_data,
    parse_themes,
    load_themes,
    FlavorPicker,
)

from .render import RoomRenderer

from .pager import show_file

__all__ = [
    # Flavor
    'FlavorValidationError',
    'Theme',
    'RoomFlavor',
    'DEFAULT_FLAVOR',
    'stable_index',
    'validate_flavor_data',
    'parse_themes',
    'load_themes',
    'FlavorPicker',
    # Render
    'RoomRenderer',
    # Pager
    'show_file',
]
