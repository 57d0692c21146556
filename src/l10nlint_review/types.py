"""Type definitions for l10nlint-review."""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from l10nlint_review.errors import MalformedOutputError, UnknownSeverityError


class Severity(str, Enum):
    """Severity levels reported by L10nLint."""

    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Convert a raw severity value, rejecting anything unknown.

        Args:
            value: Severity as emitted by the linter

        Returns:
            Matching Severity member

        Raises:
            UnknownSeverityError: If value is not a known severity
        """
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownSeverityError(value) from e


@dataclass(frozen=True)
class Finding:
    """Single issue reported by the linter."""

    file: str
    line: int | None
    severity: Severity
    reason: str
    rule_identifier: str

    def __post_init__(self) -> None:
        if not isinstance(self.severity, Severity):
            object.__setattr__(self, "severity", Severity.parse(self.severity))

    @property
    def short_path(self) -> str:
        """Last two path segments (directory and filename)."""
        return "/".join(self.file.split("/")[-2:])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        """Build a finding from one record of the JSON reporter.

        Args:
            data: Record with location, severity, reason and ruleIdentifier keys

        Returns:
            Validated Finding

        Raises:
            MalformedOutputError: If required keys are missing or have the wrong type
            UnknownSeverityError: If severity is not warning or error
        """
        try:
            location = data["location"]
            file = location["file"]
            line = location.get("line")
            reason = data["reason"]
            rule_identifier = data["ruleIdentifier"]
            severity = data["severity"]
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedOutputError(f"Invalid finding record {data!r}: {e}") from e

        for key, value in (("file", file), ("reason", reason), ("ruleIdentifier", rule_identifier)):
            if not isinstance(value, str):
                raise MalformedOutputError(
                    f"Invalid finding record {data!r}: {key} must be a string"
                )
        # bool is an int subclass but never a line number
        if line is not None and (not isinstance(line, int) or isinstance(line, bool)):
            raise MalformedOutputError(f"Invalid finding record {data!r}: line must be an integer")

        return cls(
            file=file,
            line=line,
            severity=Severity.parse(severity),
            reason=reason,
            rule_identifier=rule_identifier,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert finding back to the linter's record shape."""
        return {
            "location": {"file": self.file, "line": self.line},
            "severity": self.severity.value,
            "reason": self.reason,
            "ruleIdentifier": self.rule_identifier,
        }


@dataclass(frozen=True)
class ClassificationResult:
    """Capped, severity-partitioned view of a finding set."""

    kept: tuple[Finding, ...]
    overflow_count: int
    warnings: tuple[Finding, ...]
    errors: tuple[Finding, ...]

    @property
    def has_findings(self) -> bool:
        """Whether any warning or error survived the cap."""
        return bool(self.warnings or self.errors)
