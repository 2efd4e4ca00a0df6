from __future__ import annotations

import logging
import shutil
import tempfile
import time
from pathlib import Path

from ..errors import InvalidVersionError
from ..models.layout import DeploymentLayout
from ..validation import ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

COMPOSER_DESCRIPTOR = "composer.json"
COMPOSER_AUTOLOAD = Path("vendor") / "autoload.php"


def create_layout(slug: str, version: str, base_dir: Path | None = None) -> DeploymentLayout:
    """Create a fresh, uniquely named staging root with empty trunk/tag/assets dirs.

    Raises:
        InvalidVersionError: If the version would not name a single directory under tags/.
    """
    check_tag_name(version)
    if base_dir is not None:
        base_dir.mkdir(parents=True, exist_ok=True)
    root = tempfile.mkdtemp(prefix=f"svn-test-{slug}-{int(time.time())}-", dir=base_dir)
    layout = DeploymentLayout(root=Path(root), version=version)
    for directory in (layout.plugin_dir, layout.trunk, layout.tag, layout.assets):
        directory.mkdir(parents=True, exist_ok=True)
    return layout


def check_tag_name(version: str) -> None:
    if version in ("", ".", "..") or "/" in version or "\\" in version:
        raise InvalidVersionError(version)


def populate_trunk(layout: DeploymentLayout, slug: str) -> bool:
    """Copy the expanded payload into trunk. Returns True for the nested structure.

    Nested: the archive holds a single `<slug>/` folder with the real payload.
    Flat: the payload sits at the archive root.
    """
    nested_dir = layout.plugin_dir / slug
    nested = nested_dir.is_dir()
    source = nested_dir if nested else layout.plugin_dir
    shutil.copytree(source, layout.trunk, dirs_exist_ok=True)
    return nested


def check_trunk(layout: DeploymentLayout, main_file: Path, project_root: Path) -> ValidationResult:
    issues: list[ValidationIssue] = []
    main_file = Path(main_file)
    if not (layout.trunk / main_file).is_file() and not (layout.trunk / main_file.name).is_file():
        issues.append(
            ValidationIssue("error", str(main_file), "Main plugin file not found in trunk")
        )
    if (project_root / COMPOSER_DESCRIPTOR).is_file() and not (
        layout.trunk / COMPOSER_AUTOLOAD
    ).is_file():
        issues.append(
            ValidationIssue(
                "warning",
                str(COMPOSER_AUTOLOAD),
                "vendor/autoload.php not found (plugin may use Composer)",
            )
        )
    return ValidationResult(issues=issues)


def populate_tag(layout: DeploymentLayout) -> None:
    shutil.copytree(layout.trunk, layout.tag, dirs_exist_ok=True)


def populate_assets(layout: DeploymentLayout, source: Path) -> bool:
    """Copy marketing assets without dotfiles. Returns False if source is missing."""
    if not source.is_dir():
        logger.warning("No assets directory found at: %s", source)
        return False
    shutil.copytree(source, layout.assets, dirs_exist_ok=True)
    strip_hidden(layout.assets)
    return True


def strip_hidden(directory: Path) -> None:
    """Delete every dotfile and dot-directory below directory (e.g. .DS_Store)."""
    for path in sorted(directory.rglob(".*"), reverse=True):
        if not path.exists() and not path.is_symlink():
            continue
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()


def count_files(directory: Path) -> int:
    if not directory.is_dir():
        return 0
    return sum(1 for p in directory.rglob("*") if p.is_file())
