from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import NotFoundError
from ..models.plugin import PluginHeader, clean_header_value

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

NAME_LABEL = "Plugin Name:"
VERSION_LABEL = "Version:"

# Header marker identifying a plugin's main file
HEADER_MARKER = NAME_LABEL


def has_header_marker(path: Path) -> bool:
    """True if any line of the file contains the header marker."""
    try:
        with _open(path) as f:
            return any(HEADER_MARKER in line for line in f)
    except OSError:
        return False


def read_field(path: Path, label: str) -> str | None:
    """Value after the first line containing `label`, or None if no line has it."""
    if not path.is_file():
        raise NotFoundError(f"Plugin file not found: {path}", path=path)
    with _open(path) as f:
        for line in f:
            if label in line:
                return clean_header_value(line.split(label, 1)[1])
    return None


def read_header(path: Path) -> PluginHeader:
    """Read both header fields in a single pass over the file."""
    if not path.is_file():
        raise NotFoundError(f"Plugin file not found: {path}", path=path)
    found: dict[str, str] = {}
    with _open(path) as f:
        for line in f:
            for key, label in (("name", NAME_LABEL), ("version", VERSION_LABEL)):
                if key not in found and label in line:
                    found[key] = clean_header_value(line.split(label, 1)[1])
            if len(found) == 2:
                break
    return PluginHeader(**found)


def _open(path: Path) -> TextIO:
    return path.open(encoding="utf-8", errors="replace", newline="")
