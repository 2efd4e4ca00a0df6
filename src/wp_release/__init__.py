"""Release tooling for WordPress plugins: header detection and SVN deploy simulation."""

from .config import SimulatorSettings
from .detection import (
    detect_main_file,
    detect_plugin,
    detect_slug,
    extract_name,
    extract_version,
    read_header,
)
from .errors import (
    ArtifactMissingError,
    InvalidVersionError,
    MissingFieldError,
    NotFoundError,
)
from .models import DeploymentLayout, DetectedPlugin, PluginHeader
from .staging import SimulationReport, simulate_deployment
from .validation import ValidationIssue, ValidationResult, validate_structure

__all__ = [
    "ArtifactMissingError",
    "DeploymentLayout",
    "DetectedPlugin",
    "InvalidVersionError",
    "MissingFieldError",
    "NotFoundError",
    "PluginHeader",
    "SimulationReport",
    "SimulatorSettings",
    "ValidationIssue",
    "ValidationResult",
    "detect_main_file",
    "detect_plugin",
    "detect_slug",
    "extract_name",
    "extract_version",
    "read_header",
    "simulate_deployment",
    "validate_structure",
]
