from pathlib import Path

import pytest
from pydantic import ValidationError

from wp_release import DeploymentLayout, DetectedPlugin, PluginHeader


def test_detected_plugin_trims_values():
    p = DetectedPlugin(
        name="  My   Plugin \r\n", slug="my-plugin", main_file=Path("my-plugin.php"), version="\t1.2.3\r"
    )
    assert p.name == "My Plugin"
    assert p.version == "1.2.3"
    assert p.main_file == Path("my-plugin.php")


def test_detected_plugin_rejects_empty_version():
    with pytest.raises(ValidationError):
        DetectedPlugin(name="X", slug="x", main_file=Path("x.php"), version="  \r\n")


def test_detected_plugin_is_frozen():
    p = DetectedPlugin(name="X", slug="x", main_file=Path("x.php"), version="1.0")
    with pytest.raises(ValidationError):
        p.version = "2.0"


def test_plugin_header_defaults():
    h = PluginHeader()
    assert h.name is None
    assert h.version is None


def test_deployment_layout_paths(tmp_path):
    layout = DeploymentLayout(root=tmp_path, version="1.2.3")
    assert layout.plugin_dir == tmp_path / "plugin"
    assert layout.trunk == tmp_path / "svn" / "trunk"
    assert layout.tag == tmp_path / "svn" / "tags" / "1.2.3"
    assert layout.assets == tmp_path / "svn" / "assets"
