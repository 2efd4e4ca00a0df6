"""Plugin detection: main file, slug, and header fields."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import MissingFieldError, NotFoundError
from ..models.plugin import DetectedPlugin
from ._header import HEADER_MARKER, NAME_LABEL, VERSION_LABEL, has_header_marker, read_field
from ._sources import DEFAULT_SOURCES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._sources import CandidateSource

logger = logging.getLogger(__name__)

# Containers that say nothing about the plugin's identity
GENERIC_CONTAINERS = frozenset({"src", "wordpress-plugin"})


def detect_main_file(
    root: Path | None = None,
    sources: Iterable[CandidateSource] = DEFAULT_SOURCES,
) -> Path:
    """Find the plugin's main file, relative to root.

    Sources are tried in order; the first file containing the header marker wins.

    Raises:
        NotFoundError: If no file under root carries the header marker.
    """
    root = _root(root)
    for source in sources:
        for candidate in source.candidates(root):
            if has_header_marker(root / candidate):
                logger.debug("Main plugin file: %s (via %s)", candidate, type(source).__name__)
                return candidate
    raise NotFoundError(
        f"Could not detect main plugin file with '{HEADER_MARKER}' header", path=root
    )


def detect_slug(main_file: Path | str | None = None, root: Path | None = None) -> str:
    """Derive the plugin slug from the main file's name or its enclosing directory."""
    root = _root(root)
    main_file = _main_file(main_file, root)
    parent = (root / main_file).parent
    if parent.resolve() != root.resolve() and parent.name not in GENERIC_CONTAINERS:
        return parent.name
    return main_file.stem


def extract_version(main_file: Path | str | None = None, root: Path | None = None) -> str:
    """Return the `Version:` header value.

    Raises:
        NotFoundError: If the main file cannot be found.
        MissingFieldError: If the label is absent or its value is empty.
    """
    return _extract(VERSION_LABEL, main_file, root)


def extract_name(main_file: Path | str | None = None, root: Path | None = None) -> str:
    """Return the `Plugin Name:` header value. Raises like extract_version."""
    return _extract(NAME_LABEL, main_file, root)


def detect_plugin(root: Path | None = None) -> DetectedPlugin:
    """Run every detection step once and bundle the results."""
    root = _root(root)
    main_file = detect_main_file(root)
    return DetectedPlugin(
        name=extract_name(main_file, root),
        slug=detect_slug(main_file, root),
        main_file=main_file,
        version=extract_version(main_file, root),
    )


# --- internal helpers ---


def _root(root: Path | None) -> Path:
    return Path(root) if root is not None else Path.cwd()


def _main_file(main_file: Path | str | None, root: Path) -> Path:
    if main_file is None or main_file == "":
        return detect_main_file(root)
    return Path(main_file)


def _extract(label: str, main_file: Path | str | None, root: Path | None) -> str:
    root = _root(root)
    path = root / _main_file(main_file, root)
    value = read_field(path, label)
    if not value:
        raise MissingFieldError(label.rstrip(":"), path)
    return value
