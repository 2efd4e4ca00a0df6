from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class DeploymentLayout:
    """A staged SVN-style tree for one simulated deployment.

    Attributes:
        root: Unique per-run staging directory.
        version: Release version, used as the tag name.
    """

    root: Path
    version: str

    @property
    def plugin_dir(self) -> Path:
        """Where the artifact is expanded."""
        return self.root / "plugin"

    @property
    def svn_root(self) -> Path:
        return self.root / "svn"

    @property
    def trunk(self) -> Path:
        return self.svn_root / "trunk"

    @property
    def tags(self) -> Path:
        return self.svn_root / "tags"

    @property
    def tag(self) -> Path:
        return self.tags / self.version

    @property
    def assets(self) -> Path:
        return self.svn_root / "assets"
