from ._artifact import (
    ARCHIVE_EXTENSION,
    BUILD_COMMAND,
    default_artifact_path,
    expand_artifact,
    resolve_artifact,
    run_build,
)
from ._layout import (
    check_tag_name,
    check_trunk,
    count_files,
    create_layout,
    populate_assets,
    populate_tag,
    populate_trunk,
    strip_hidden,
)
from ._simulator import SimulationReport, simulate_deployment, svn_available

__all__ = [
    "ARCHIVE_EXTENSION",
    "BUILD_COMMAND",
    "SimulationReport",
    "check_tag_name",
    "check_trunk",
    "count_files",
    "create_layout",
    "default_artifact_path",
    "expand_artifact",
    "populate_assets",
    "populate_tag",
    "populate_trunk",
    "resolve_artifact",
    "run_build",
    "simulate_deployment",
    "strip_hidden",
    "svn_available",
]
