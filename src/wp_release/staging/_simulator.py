"""Deployment simulation: artifact -> trunk / tags/<version> / assets, no SVN traffic."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..detection import detect_plugin
from ._artifact import expand_artifact, resolve_artifact
from ._layout import (
    check_trunk,
    count_files,
    create_layout,
    populate_assets,
    populate_tag,
    populate_trunk,
)

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import SimulatorSettings
    from ..models.layout import DeploymentLayout
    from ..models.plugin import DetectedPlugin
    from ..validation import ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class SimulationReport:
    """Outcome of one simulated deployment.

    Attributes:
        plugin: What the detector found.
        layout: The staged tree, left on disk for inspection.
        artifact: The archive that was expanded.
        nested: True if the archive wrapped the payload in a `<slug>/` folder.
        trunk_files / tag_files / asset_files: Regular file counts per root.
        result: Structural check of trunk; decides `passed`.
        assets_copied: False if the assets source directory was missing.
        svn_available: Whether an `svn` executable is on PATH.
    """

    plugin: DetectedPlugin
    layout: DeploymentLayout
    artifact: Path
    nested: bool
    trunk_files: int
    tag_files: int
    asset_files: int
    result: ValidationResult
    assets_copied: bool
    svn_available: bool

    @property
    def passed(self) -> bool:
        return self.result.valid


def svn_available() -> bool:
    return shutil.which("svn") is not None


def simulate_deployment(
    settings: SimulatorSettings, plugin: DetectedPlugin | None = None
) -> SimulationReport:
    """Stage a plugin release the way the WordPress.org SVN deploy would lay it out.

    Args:
        settings: Resolved simulator configuration.
        plugin: Detection result; detected under settings.project_root when omitted.

    Raises:
        NotFoundError / MissingFieldError: If detection fails.
        ArtifactMissingError: If no artifact exists and none could be built.
        InvalidVersionError: If the version cannot name a tag directory.
    """
    root = settings.project_root
    if plugin is None:
        plugin = detect_plugin(root)
    logger.info("Detected plugin: %s", plugin.slug)
    logger.info("Version: %s", plugin.version)
    logger.info("Main file: %s", plugin.main_file)

    artifact = resolve_artifact(settings, plugin.slug)
    logger.info("Using ZIP file: %s", artifact)

    layout = create_layout(plugin.slug, plugin.version, base_dir=settings.staging_dir)
    logger.info("Created temporary directory: %s", layout.root)

    logger.info("Extracting plugin...")
    expand_artifact(artifact, layout.plugin_dir)

    logger.info("Copying files to trunk...")
    nested = populate_trunk(layout, plugin.slug)
    logger.info("Archive structure: %s", "nested" if nested else "flat")

    logger.info("Verifying plugin structure...")
    result = check_trunk(layout, plugin.main_file, root)
    for issue in result.issues:
        log = logger.error if issue.level == "error" else logger.warning
        log("%s", issue.message)

    logger.info("Copying trunk to tag/%s...", plugin.version)
    populate_tag(layout)

    assets_copied = populate_assets(layout, settings.assets_source)
    if assets_copied:
        logger.info("Copied assets from %s", settings.assets_directory)

    return SimulationReport(
        plugin=plugin,
        layout=layout,
        artifact=artifact,
        nested=nested,
        trunk_files=count_files(layout.trunk),
        tag_files=count_files(layout.tag),
        asset_files=count_files(layout.assets),
        result=result,
        assets_copied=assets_copied,
        svn_available=svn_available(),
    )
