"""Type definitions for site-lint."""
import enum
from dataclasses import dataclass, field
from typing import Any


class Severity(enum.Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Single issue reported by an analyzer."""

    file: str
    severity: Severity
    message: str
    rule: str
    line: int | None = None

    @property
    def location(self) -> str:
        """Return ``file:line``, or just ``file`` for file-level diagnostics."""
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "severity": self.severity.value,
            "rule": self.rule,
            "message": self.message,
        }


@dataclass
class ScopeResult:
    """Errors and warnings collected for one scope, in scan order."""

    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the list matching its severity."""
        if diagnostic.severity is Severity.ERROR:
            self.errors.append(diagnostic)
        else:
            self.warnings.append(diagnostic)

    def extend(self, other: "ScopeResult") -> None:
        """Merge another result into this one, keeping order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_issues(self) -> bool:
        return bool(self.errors or self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "errors": [d.to_dict() for d in self.errors],
            "warnings": [d.to_dict() for d in self.warnings],
        }
