from __future__ import annotations

import logging
import subprocess
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import ArtifactMissingError

if TYPE_CHECKING:
    from ..config import SimulatorSettings

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"
BUILD_DESCRIPTOR = "package.json"
BUILD_COMMAND = ("npm", "run", "build")


def default_artifact_path(project_root: Path, slug: str) -> Path:
    return project_root / "dist" / f"{slug}{ARCHIVE_EXTENSION}"


def resolve_artifact(settings: SimulatorSettings, slug: str) -> Path:
    """Locate the build artifact, building it first if it is missing.

    Raises:
        ArtifactMissingError: If the artifact is absent and cannot be built.
    """
    root = settings.project_root
    if settings.zip_path is not None:
        artifact = root / settings.zip_path
    else:
        artifact = default_artifact_path(root, slug)

    if artifact.is_file():
        return artifact

    logger.info("Plugin ZIP not found at: %s", artifact)
    if not (root / BUILD_DESCRIPTOR).is_file():
        raise ArtifactMissingError(
            f"No build script found and ZIP doesn't exist: {artifact}. "
            "Build the plugin first or set ZIP_PATH.",
            path=artifact,
        )

    run_build(root)
    if not artifact.is_file():
        raise ArtifactMissingError(f"ZIP file still not found after build: {artifact}", path=artifact)
    return artifact


def run_build(project_root: Path) -> None:
    """Run the project's npm build to completion."""
    logger.info("Building plugin with npm...")
    try:
        result = subprocess.run(
            list(BUILD_COMMAND), cwd=project_root, capture_output=True, text=True
        )
    except FileNotFoundError as e:
        raise ArtifactMissingError("npm is not installed or not in PATH") from e
    if result.returncode != 0:
        raise ArtifactMissingError(f"Build failed: {result.stderr.strip()}")


def expand_artifact(artifact: Path, dest: Path) -> None:
    """Extract a zip artifact into dest, refusing entries that would land outside it."""
    dest.mkdir(parents=True, exist_ok=True)
    target = dest.resolve()
    try:
        with zipfile.ZipFile(artifact) as archive:
            for member in archive.namelist():
                if not (target / member).resolve().is_relative_to(target):
                    raise ArtifactMissingError(
                        f"Unsafe path in {artifact}: {member}", path=artifact
                    )
            archive.extractall(dest)
    except zipfile.BadZipFile as e:
        raise ArtifactMissingError(f"Not a valid ZIP file: {artifact}", path=artifact) from e
