from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class NotFoundError(Exception):
    """Raised when an expected plugin file or header is absent.

    Attributes:
        path: The file or directory that was searched, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class MissingFieldError(Exception):
    """Raised when a required header field is absent or has an empty value.

    Attributes:
        field: The header label, e.g. "Version".
        path: The plugin file that was read.
    """

    def __init__(self, field: str, path: Path) -> None:
        self.field = field
        self.path = path
        super().__init__(f"Could not extract {field} from {path}")


class ArtifactMissingError(Exception):
    """Raised when no build artifact exists and none could be produced.

    Attributes:
        path: The artifact location that was expected, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InvalidVersionError(Exception):
    """Raised when a header version cannot be used as a tag directory name."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Version is not a valid tag name: {version!r}")
