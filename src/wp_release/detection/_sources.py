"""Candidate sources for the main plugin file, tried in priority order."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

SOURCE_EXTENSIONS = (".php",)
CONVENTIONAL_DIRS = ("src", "wordpress-plugin", "plugin")
MAX_DEPTH = 3


class CandidateSource(Protocol):
    """Yields candidate main files under root, relative to it, in the order to scan them."""

    def candidates(self, root: Path) -> Iterator[Path]: ...


def _is_source_file(path: Path) -> bool:
    return path.suffix in SOURCE_EXTENSIONS and path.is_file()


def _source_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if _is_source_file(p))


class RootSource:
    """Source files directly in the working directory."""

    def candidates(self, root: Path) -> Iterator[Path]:
        for path in _source_files(root):
            yield path.relative_to(root)


class ConventionalDirsSource:
    """Source files directly inside well-known plugin subdirectories."""

    def __init__(self, dirs: tuple[str, ...] = CONVENTIONAL_DIRS) -> None:
        self.dirs = dirs

    def candidates(self, root: Path) -> Iterator[Path]:
        for name in self.dirs:
            for path in _source_files(root / name):
                yield path.relative_to(root)


class RecursiveSource:
    """Every source file at most `max_depth` levels below root (root files are depth 1)."""

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def candidates(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            depth = len(current.relative_to(root).parts) + 1
            if depth >= self.max_depth:
                dirnames[:] = []
            else:
                dirnames.sort()
            for name in sorted(filenames):
                path = current / name
                if _is_source_file(path):
                    yield path.relative_to(root)


DEFAULT_SOURCES: tuple[CandidateSource, ...] = (
    RootSource(),
    ConventionalDirsSource(),
    RecursiveSource(),
)
