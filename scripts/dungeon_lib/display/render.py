"""
Room rendering for gh-dungeon.

Turns what is known about the current directory into the block of text
the player reads, using the room.j2 jinja2 template.
"""

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from dungeon_lib.config import TEMPLATE_DIR

from .flavor import DEFAULT_FLAVOR, RoomFlavor


class RoomRenderer:
    """Renders room descriptions from a template directory."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR, template_name: str = "room.j2"):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(template_name)

    def render_room(
        self,
        label: str,
        has_dirs: bool,
        has_parent: bool,
        has_files: bool,
        flavor: Optional[RoomFlavor] = None,
        items: Sequence[tuple[str, str]] = (),
    ) -> str:
        """
        Describe a room.

        Args:
            label: Name on the room's sign (directory name or repository)
            has_dirs: Whether there is a way down
            has_parent: Whether there is a way up
            has_files: Whether there is anything to examine
            flavor: Descriptive text for the room
            items: (object description, file name) pairs to list
        """
        return self.template.render(
            label=label,
            has_dirs=has_dirs,
            has_parent=has_parent,
            has_files=has_files,
            flavor=flavor or DEFAULT_FLAVOR,
            items=list(items),
        )
