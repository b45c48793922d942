"""
Flavor text for gh-dungeon rooms.

Themes are loaded from a YAML file. Choices are made by hashing the
repository name, path or file name, so a repository always turns into the
same dungeon and a room always looks the same when revisited.
"""

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import List

import yaml

from dungeon_lib.config import FLAVOR_FILE


class FlavorValidationError(Exception):
    """Raised when a flavor file is malformed."""
    pass


@dataclass(frozen=True)
class Theme:
    """A family of descriptions shared by every room in a dungeon."""
    name: str
    intro: str
    ambience: tuple[str, ...]
    signs: tuple[str, ...]
    objects: tuple[str, ...]


@dataclass(frozen=True)
class RoomFlavor:
    """The descriptive pieces for one room."""
    intro: str
    sign: str
    ambience: str


DEFAULT_FLAVOR = RoomFlavor(
    intro=(
        "You are standing in a room of plain construction. There is a drop "
        "ceiling above you with scattered fluorescent lighting."
    ),
    sign="A sign reads",
    ambience="Dust motes float through the air.",
)

THEME_LISTS = ['ambience', 'signs', 'objects']


def stable_index(key: str, count: int) -> int:
    """Map a key onto range(count), identically across runs and machines."""
    digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
    return int(digest, 16) % count


def validate_flavor_data(data) -> List[str]:
    """
    Validate a flavor file structure.
    Returns list of error messages (empty if valid).
    """
    if not isinstance(data, dict) or not isinstance(data.get('themes'), list):
        return ["Missing required list: themes"]
    if not data['themes']:
        return ["At least one theme is required"]

    errors = []
    for i, theme in enumerate(data['themes']):
        if not isinstance(theme, dict):
            errors.append(f"themes[{i}]: expected a mapping")
            continue
        label = theme.get('name', f"themes[{i}]")
        for key in ['name', 'intro']:
            if not isinstance(theme.get(key), str) or not theme.get(key):
                errors.append(f"{label}: missing text field '{key}'")
        for key in THEME_LISTS:
            values = theme.get(key)
            if not isinstance(values, list) or not values:
                errors.append(f"{label}: '{key}' must be a non-empty list")
            elif not all(isinstance(v, str) and v for v in values):
                errors.append(f"{label}: '{key}' entries must be non-empty strings")
    return errors


def parse_themes(data: dict) -> List[Theme]:
    """Parse validated flavor data into Theme objects."""
    return [
        Theme(
            name=t['name'],
            intro=t['intro'].strip(),
            ambience=tuple(t['ambience']),
            signs=tuple(t['signs']),
            objects=tuple(t['objects']),
        )
        for t in data['themes']
    ]


def load_themes(path: Path = FLAVOR_FILE) -> List[Theme]:
    """
    Load and validate themes from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        FlavorValidationError: If the file is not valid YAML or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Flavor file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise FlavorValidationError(f"YAML syntax error in {path}: {e}")

    errors = validate_flavor_data(data)
    if errors:
        raise FlavorValidationError(f"Invalid flavor file {path}:\n  " + "\n  ".join(errors))
    return parse_themes(data)


class FlavorPicker:
    """Picks flavor text for one repository."""

    def __init__(self, repo: str, themes: List[Theme]):
        if not themes:
            raise FlavorValidationError("No themes to choose from")
        self.repo = repo
        self.theme = themes[stable_index(repo, len(themes))]

    def room(self, path: str) -> RoomFlavor:
        theme = self.theme
        key = f"{self.repo}:{path}"
        return RoomFlavor(
            intro=theme.intro,
            sign=theme.signs[stable_index(key + ":sign", len(theme.signs))],
            ambience=theme.ambience[stable_index(key + ":ambience", len(theme.ambience))],
        )

    def object_for(self, file_name: str) -> str:
        return self.theme.objects[stable_index(file_name, len(self.theme.objects))]
