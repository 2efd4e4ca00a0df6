import zipfile
from pathlib import Path

import pytest

from wp_release.cli import detect_main, simulate_main

HEADER = "<?php\n/**\n * Plugin Name: CLI Plugin\n * Version: 0.3.0\n */\n"


@pytest.fixture
def plugin_dir(tmp_path, monkeypatch):
    (tmp_path / "cli-plugin.php").write_text(HEADER)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# --- wp-detect-plugin ---

def test_detect_slug(plugin_dir, capsys):
    assert detect_main(["--slug"]) == 0
    assert capsys.readouterr().out == "cli-plugin\n"


def test_detect_main_file(plugin_dir, capsys):
    assert detect_main(["--main-file"]) == 0
    assert capsys.readouterr().out == "cli-plugin.php\n"


def test_detect_version_with_file(plugin_dir, capsys):
    assert detect_main(["--version", "cli-plugin.php"]) == 0
    assert capsys.readouterr().out == "0.3.0\n"


def test_detect_name(plugin_dir, capsys):
    assert detect_main(["--name"]) == 0
    assert capsys.readouterr().out == "CLI Plugin\n"


def test_detect_all(plugin_dir, capsys):
    assert detect_main(["--all"]) == 0
    out = capsys.readouterr().out
    assert "Plugin Name: CLI Plugin" in out
    assert "Plugin Slug: cli-plugin" in out
    assert "Main File: cli-plugin.php" in out
    assert "Version: 0.3.0" in out


def test_detect_validate_warns_on_readme(plugin_dir, capsys):
    assert detect_main(["--validate"]) == 0
    out = capsys.readouterr().out
    assert "readme.txt not found" in out
    assert "validation passed" in out


@pytest.mark.parametrize("readme", ["readme.txt", "wordpress-plugin/readme.txt"])
def test_detect_validate_reports_readme_location(plugin_dir, capsys, readme):
    (plugin_dir / readme).parent.mkdir(parents=True, exist_ok=True)
    (plugin_dir / readme).write_text("=== CLI Plugin ===\n")
    assert detect_main(["--validate"]) == 0
    out = capsys.readouterr().out
    assert f"Found readme.txt at: {readme}" in out
    assert "not found" not in out


def test_detect_validate_fails(plugin_dir, capsys):
    (plugin_dir / "broken.php").write_text("<?php\n")
    assert detect_main(["--validate", "broken.php"]) == 1
    assert "failed with 2 error(s)" in capsys.readouterr().out


def test_detect_missing_field_exit_code(plugin_dir, capsys):
    (plugin_dir / "empty.php").write_text("Plugin Name: X\nVersion:   \n")
    assert detect_main(["--version", "empty.php"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR" in captured.err


def test_detect_not_found(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert detect_main(["--slug"]) == 1
    assert "Plugin Name:" in capsys.readouterr().err


def test_detect_no_arguments_prints_usage(plugin_dir, capsys):
    assert detect_main([]) == 0
    assert "usage: wp-detect-plugin" in capsys.readouterr().out


def test_detect_options_are_exclusive(plugin_dir):
    with pytest.raises(SystemExit):
        detect_main(["--slug", "--all"])


# --- wp-simulate-deploy ---

def _build_zip(root: Path, extra_files: int = 0) -> None:
    (root / "dist").mkdir()
    with zipfile.ZipFile(root / "dist" / "cli-plugin.zip", "w") as z:
        z.writestr("cli-plugin/cli-plugin.php", HEADER)
        for i in range(extra_files):
            z.writestr(f"cli-plugin/partial-{i:02d}.php", "<?php\n")


def test_simulate_success(plugin_dir, monkeypatch, capsys):
    _build_zip(plugin_dir)
    monkeypatch.setenv("PROJECT_ROOT", str(plugin_dir))
    monkeypatch.setenv("STAGING_DIR", str(plugin_dir / "staging"))
    monkeypatch.delenv("ZIP_PATH", raising=False)
    assert simulate_main([]) == 0
    out = capsys.readouterr().out
    assert "Files in trunk: 1" in out
    assert "Files in tag: 1" in out
    assert "Validation passed" in out


def test_simulate_missing_artifact(plugin_dir, monkeypatch, capsys):
    monkeypatch.setenv("PROJECT_ROOT", str(plugin_dir))
    monkeypatch.setenv("STAGING_DIR", str(plugin_dir / "staging"))
    monkeypatch.delenv("ZIP_PATH", raising=False)
    assert simulate_main([]) == 1
    assert "ZIP" in capsys.readouterr().err


@pytest.mark.parametrize("svn_installed", [True, False])
def test_simulate_long_listing_and_svn_hint(plugin_dir, monkeypatch, capsys, svn_installed):
    _build_zip(plugin_dir, extra_files=24)
    monkeypatch.setenv("PROJECT_ROOT", str(plugin_dir))
    monkeypatch.setenv("STAGING_DIR", str(plugin_dir / "staging"))
    monkeypatch.delenv("ZIP_PATH", raising=False)
    monkeypatch.setattr(
        "wp_release.staging._simulator.svn_available", lambda: svn_installed
    )
    assert simulate_main([]) == 0
    out = capsys.readouterr().out
    assert "Files in trunk: 25" in out
    assert out.count("... (25 entries total)") == 2
    assert "  partial-18.php" in out
    assert "  partial-19.php" not in out
    if svn_installed:
        assert "SVN is installed" in out
        assert "svn status" in out
    else:
        assert "SVN is not installed" in out
    assert "rm -rf" in out


def test_simulate_rejects_unsafe_version(plugin_dir, monkeypatch, capsys):
    (plugin_dir / "cli-plugin.php").write_text("Plugin Name: CLI Plugin\nVersion: ../up\n")
    _build_zip(plugin_dir)
    monkeypatch.setenv("PROJECT_ROOT", str(plugin_dir))
    monkeypatch.setenv("STAGING_DIR", str(plugin_dir / "staging"))
    monkeypatch.delenv("ZIP_PATH", raising=False)
    assert simulate_main([]) == 1
    assert "not a valid tag name" in capsys.readouterr().err
