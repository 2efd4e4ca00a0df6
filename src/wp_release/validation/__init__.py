from ._result import ValidationIssue, ValidationResult
from ._structure import README_PATHS, find_readme, validate_structure

__all__ = [
    "README_PATHS",
    "ValidationIssue",
    "ValidationResult",
    "find_readme",
    "validate_structure",
]
