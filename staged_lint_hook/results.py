"""
Lint result models.

Parsed form of ESLint's JSON formatter output.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LintMessage:
    """A single ESLint finding."""

    rule_id: str | None
    severity: int
    message: str
    line: int = 0
    column: int = 0
    fatal: bool = False

    @property
    def is_error(self) -> bool:
        return self.fatal or self.severity == 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LintMessage":
        return cls(
            rule_id=data.get("ruleId"),
            severity=int(data.get("severity", 0)),
            message=str(data.get("message", "")),
            line=int(data.get("line") or 0),
            column=int(data.get("column") or 0),
            fatal=bool(data.get("fatal", False)),
        )


@dataclass
class LintFileResult:
    """Findings for one linted file."""

    file_path: str
    messages: list[LintMessage] = field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LintFileResult":
        return cls(
            file_path=str(data.get("filePath", "")),
            messages=[LintMessage.from_dict(m) for m in data.get("messages", [])],
            error_count=int(data.get("errorCount", 0)),
            warning_count=int(data.get("warningCount", 0)),
            fixable_error_count=int(data.get("fixableErrorCount", 0)),
            fixable_warning_count=int(data.get("fixableWarningCount", 0)),
        )


@dataclass
class LintResult:
    """Aggregate of all file results plus the rendered report."""

    files: list[LintFileResult] = field(default_factory=list)
    report: str = ""

    @property
    def error_count(self) -> int:
        return sum(f.error_count for f in self.files)

    @property
    def warning_count(self) -> int:
        return sum(f.warning_count for f in self.files)

    @property
    def fixable_error_count(self) -> int:
        return sum(f.fixable_error_count for f in self.files)

    @property
    def fixable_warning_count(self) -> int:
        return sum(f.fixable_warning_count for f in self.files)

    @property
    def is_clean(self) -> bool:
        """True only when every count is zero; warnings alone are a failure."""
        return (
            self.error_count == 0
            and self.warning_count == 0
            and self.fixable_error_count == 0
            and self.fixable_warning_count == 0
        )

    @classmethod
    def from_eslint_json(cls, data: list[dict[str, Any]]) -> "LintResult":
        """
        Build a result from ESLint's `--format json` output.

        Args:
            data: Decoded JSON array, one object per file

        Returns:
            LintResult without a report

        Raises:
            ValueError: data is not a list of file objects
        """
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError("expected a JSON array of file results")
        return cls(files=[LintFileResult.from_dict(item) for item in data])
