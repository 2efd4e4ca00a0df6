from .layout import DeploymentLayout
from .plugin import DetectedPlugin, PluginHeader

__all__ = [
    "DeploymentLayout",
    "DetectedPlugin",
    "PluginHeader",
]
