"""
Command-line entry points.

Usage:
    wp-detect-plugin --slug [FILE]       # Detect plugin slug
    wp-detect-plugin --main-file         # Detect main plugin file
    wp-detect-plugin --version [FILE]    # Extract version from plugin header
    wp-detect-plugin --name [FILE]       # Extract plugin name from header
    wp-detect-plugin --validate [FILE]   # Validate plugin structure
    wp-detect-plugin --all               # Show all detected information
    wp-simulate-deploy                   # Stage trunk/tags/assets from the build ZIP

The simulator reads PROJECT_ROOT, ZIP_PATH, ASSETS_DIRECTORY and STAGING_DIR
from the environment.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .config import SimulatorSettings
from .detection import (
    detect_main_file,
    detect_plugin,
    detect_slug,
    extract_name,
    extract_version,
)
from .errors import (
    ArtifactMissingError,
    InvalidVersionError,
    MissingFieldError,
    NotFoundError,
)
from .staging import simulate_deployment
from .validation import find_readme, validate_structure

if TYPE_CHECKING:
    from .staging import SimulationReport

RULE = "━" * 53
LISTING_LIMIT = 20


# --- wp-detect-plugin ---


def _detect_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wp-detect-plugin",
        description="WordPress plugin detection: slug, main file, version, name.",
        epilog=(
            "examples:\n"
            "  wp-detect-plugin --slug\n"
            "  wp-detect-plugin --main-file\n"
            "  wp-detect-plugin --version my-plugin.php\n"
            "  wp-detect-plugin --all"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--slug", nargs="?", const="", metavar="FILE", help="Detect plugin slug")
    group.add_argument("--main-file", action="store_true", help="Detect main plugin file")
    group.add_argument(
        "--version", nargs="?", const="", metavar="FILE", help="Extract version from plugin header"
    )
    group.add_argument(
        "--name", nargs="?", const="", metavar="FILE", help="Extract plugin name from header"
    )
    group.add_argument(
        "--validate", nargs="?", const="", metavar="FILE", help="Validate plugin structure"
    )
    group.add_argument("--all", action="store_true", help="Show all detected information")
    return parser


def detect_main(argv: list[str] | None = None) -> int:
    parser = _detect_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="%(message)s")

    try:
        if args.slug is not None:
            print(detect_slug(args.slug or None))
        elif args.main_file:
            print(detect_main_file().as_posix())
        elif args.version is not None:
            print(extract_version(args.version or None))
        elif args.name is not None:
            print(extract_name(args.name or None))
        elif args.validate is not None:
            return _print_validation(args.validate or None)
        elif args.all:
            plugin = detect_plugin()
            print("Plugin Detection Results:")
            print("========================")
            print(f"Plugin Name: {plugin.name}")
            print(f"Plugin Slug: {plugin.slug}")
            print(f"Main File: {plugin.main_file.as_posix()}")
            print(f"Version: {plugin.version}")
        else:
            parser.print_help()
    except (NotFoundError, MissingFieldError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def _print_validation(main_file: str | None) -> int:
    print("Validating plugin structure...")
    result = validate_structure(main_file)
    readme = find_readme(Path.cwd())
    if readme is not None:
        print(f"✅ Found readme.txt at: {readme.as_posix()}")
    for issue in result.issues:
        marker = "❌" if issue.level == "error" else "⚠️ "
        print(f"{marker} {issue.message}")
    if result.valid:
        print("✅ Plugin structure validation passed")
        return 0
    print(f"❌ Plugin structure validation failed with {result.error_count} error(s)")
    return 1


# --- wp-simulate-deploy ---


def _simulate_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="wp-simulate-deploy",
        description=(
            "Simulate a WordPress.org SVN deployment without committing anything. "
            "Configure with PROJECT_ROOT, ZIP_PATH, ASSETS_DIRECTORY and STAGING_DIR."
        ),
    )


def simulate_main(argv: list[str] | None = None) -> int:
    _simulate_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(message)s")

    print("=== Testing WordPress.org SVN Deployment ===")
    print("This simulates the deployment process without committing to SVN.")
    print()

    settings = SimulatorSettings()
    print(f"Project root: {settings.project_root}")
    try:
        report = simulate_deployment(settings)
    except (
        NotFoundError,
        MissingFieldError,
        ArtifactMissingError,
        InvalidVersionError,
    ) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    _print_report(report)
    return 0 if report.passed else 1


def _print_report(report: SimulationReport) -> None:
    layout = report.layout
    print()
    print("=== SVN Structure Created ===")
    print("Here's what would be sent to WordPress.org:")
    _print_listing("TRUNK DIRECTORY:", layout.trunk)
    _print_listing(f"TAG DIRECTORY (version {report.plugin.version}):", layout.tag)
    _print_listing("ASSETS DIRECTORY:", layout.assets)

    print()
    print(RULE)
    print("SUMMARY")
    print(RULE)
    print(f"Plugin: {report.plugin.slug}")
    print(f"Version: {report.plugin.version}")
    print(f"Files prepared in: {layout.svn_root}")
    print()
    print(f"Files in trunk: {report.trunk_files}")
    print(f"Files in tag: {report.tag_files}")
    print(f"Asset files: {report.asset_files}")
    print()
    if report.passed:
        print("✅ Validation passed! Structure looks good.")
    else:
        print(f"⚠️  Found {report.result.error_count} error(s) in structure.")
    print(RULE)

    print()
    if report.svn_available:
        print("✅ SVN is installed. You can inspect the structure:")
        print(f"   cd {layout.svn_root}")
        print("   svn status (would show what would be committed)")
    else:
        print("ℹ️  SVN is not installed - this was a structure-only simulation.")
    print()
    print("To list all files:")
    print(f"  find {layout.svn_root} -type f")
    print()
    print("To clean up temporary files:")
    print(f"  rm -rf {layout.root}")


def _print_listing(title: str, directory: Path) -> None:
    print()
    print(RULE)
    print(title)
    print(RULE)
    entries = sorted(directory.iterdir()) if directory.is_dir() else []
    if not entries:
        print("(empty)")
        return
    for entry in entries[:LISTING_LIMIT]:
        print(f"  {entry.name}/" if entry.is_dir() else f"  {entry.name}")
    if len(entries) > LISTING_LIMIT:
        print(f"... ({len(entries)} entries total)")


def run_detect() -> None:
    sys.exit(detect_main())


def run_simulate() -> None:
    sys.exit(simulate_main())
