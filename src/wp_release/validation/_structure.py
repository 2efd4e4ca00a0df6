from __future__ import annotations

import logging
from pathlib import Path

from ..detection import detect_main_file, read_header
from ._result import ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

README_PATHS = (
    Path("readme.txt"),
    Path("src/wordpress-plugin/readme.txt"),
    Path("wordpress-plugin/readme.txt"),
)


def validate_structure(
    main_file: Path | str | None = None, root: Path | None = None
) -> ValidationResult:
    """Check the main file and its required headers; a missing readme is only a warning.

    Raises:
        NotFoundError: If main_file is not given and cannot be detected.
    """
    root = Path(root) if root is not None else Path.cwd()
    if main_file is None or main_file == "":
        main_file = detect_main_file(root)
    path = root / main_file
    issues: list[ValidationIssue] = []

    if not path.is_file():
        issues.append(
            ValidationIssue("error", str(main_file), f"Main plugin file not found: {main_file}")
        )
    else:
        header = read_header(path)
        if not header.name:
            issues.append(ValidationIssue("error", "Plugin Name", "Missing 'Plugin Name:' header"))
        if not header.version:
            issues.append(ValidationIssue("error", "Version", "Missing 'Version:' header"))

    readme = find_readme(root)
    if readme is None:
        issues.append(
            ValidationIssue(
                "warning", "readme.txt", "readme.txt not found (recommended for WordPress.org)"
            )
        )
    else:
        logger.info("Found readme.txt at: %s", readme)

    return ValidationResult(issues=issues)


def find_readme(root: Path) -> Path | None:
    for candidate in README_PATHS:
        if (root / candidate).is_file():
            return candidate
    return None
