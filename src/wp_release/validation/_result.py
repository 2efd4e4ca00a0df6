from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class ValidationIssue:
    """A single structural finding (error or warning)."""

    level: Literal["error", "warning"]
    subject: str  # file or header label the finding is about
    message: str


@dataclass
class ValidationResult:
    """Result of checking a plugin source tree or a staged trunk.

    Attributes:
        issues: All errors and warnings. Use .errors and .warnings for filtered views.
        valid: True if there are no errors (warnings are allowed).
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(i.level == "error" for i in self.issues)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def error_count(self) -> int:
        return len(self.errors)
