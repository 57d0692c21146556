"""Configuration management for l10nlint-review."""
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_SETTINGS_FILE = ".l10nlint-review.json"


class ReportConfig(BaseModel):
    """How findings are rendered and when the review gate fails."""

    max_findings: int | None = Field(
        default=None, ge=0, description="Maximum number of findings to report"
    )
    inline_mode: bool = Field(default=False, description="Report findings as inline comments")
    fail_on_error: bool = Field(default=False, description="Fail the gate on any error")
    strict: bool = Field(default=False, description="Fail the gate on any warning or error")
    exception_rule_identifiers: frozenset[str] = Field(
        default_factory=frozenset,
        description="Rules always reported in the summary instead of inline",
    )

    model_config = {"frozen": True}


class Settings(BaseModel):
    """Settings for one lint review run with validation."""

    binary_path: str | None = Field(default=None, description="Path to the l10nlint binary")
    config_file: str | None = Field(default=None, description="Path to the L10nLint config file")
    max_findings: int | None = Field(
        default=None, ge=0, description="Maximum number of findings to report"
    )
    verbose: bool = Field(default=False, description="Log diagnostic information")
    strict: bool = Field(default=False, description="Fail on warnings as well as errors")
    fail_on_error: bool = Field(default=False, description="Fail on errors")
    inline_mode: bool = Field(default=False, description="Report findings as inline comments")
    inline_except_rules: list[str] = Field(
        default_factory=list, description="Rule identifiers never reported inline"
    )
    additional_args: str = Field(default="", description="Extra arguments passed to l10nlint")
    env: dict[str, str] = Field(
        default_factory=dict, description="Environment variables set for the linter process"
    )
    working_directory: str | None = Field(
        default=None, description="Directory to run the linter from"
    )

    @field_validator("inline_except_rules")
    @classmethod
    def validate_rule_identifiers(cls, v: list[str]) -> list[str]:
        """Ensure rule identifiers are non-empty strings."""
        for rule in v:
            if not rule.strip():
                raise ValueError("inline_except_rules cannot contain empty strings")
        return v

    model_config = {"frozen": False}  # CLI flags are applied after loading

    def report_config(self) -> ReportConfig:
        """Derive the reporting configuration from these settings.

        Returns:
            ReportConfig for the reporter
        """
        return ReportConfig(
            max_findings=self.max_findings,
            inline_mode=self.inline_mode,
            fail_on_error=self.fail_on_error,
            strict=self.strict,
            exception_rule_identifiers=frozenset(self.inline_except_rules),
        )


# camelCase spellings accepted for backwards compatibility
_CAMEL_CASE_KEYS = {
    "binary_path": "binaryPath",
    "config_file": "configFile",
    "max_findings": "maxNumViolations",
    "fail_on_error": "failOnError",
    "inline_mode": "inlineMode",
    "inline_except_rules": "inlineExceptRules",
    "additional_args": "additionalL10nlintArgs",
    "working_directory": "workingDirectory",
}


def load_settings(settings_path: Path) -> Settings:
    """Load settings from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        settings_path: Path to .l10nlint-review.json file

    Returns:
        Settings object with loaded or default values

    Raises:
        ValueError: If the file is not a JSON object or values are invalid
    """
    if not settings_path.exists():
        return Settings()

    with settings_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {settings_path}")

    settings_data: dict[str, Any] = {}
    for name in Settings.model_fields:
        if name in data:
            settings_data[name] = data[name]
        elif _CAMEL_CASE_KEYS.get(name) in data:
            settings_data[name] = data[_CAMEL_CASE_KEYS[name]]

    return Settings(**settings_data)
