from ._detector import (
    GENERIC_CONTAINERS,
    detect_main_file,
    detect_plugin,
    detect_slug,
    extract_name,
    extract_version,
)
from ._header import HEADER_MARKER, read_header
from ._sources import (
    CandidateSource,
    ConventionalDirsSource,
    RecursiveSource,
    RootSource,
)

__all__ = [
    "GENERIC_CONTAINERS",
    "HEADER_MARKER",
    "CandidateSource",
    "ConventionalDirsSource",
    "RecursiveSource",
    "RootSource",
    "detect_main_file",
    "detect_plugin",
    "detect_slug",
    "extract_name",
    "extract_version",
    "read_header",
]
