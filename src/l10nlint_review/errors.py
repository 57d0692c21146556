"""Exceptions raised while running a lint review."""


class L10nLintReviewError(Exception):
    """Base class for l10nlint-review errors."""


class LinterNotInstalledError(L10nLintReviewError, FileNotFoundError):
    """The l10nlint executable could not be found."""

    def __init__(self, binary_path: str) -> None:
        self.binary_path = binary_path
        super().__init__(f"l10nlint is not installed (looked for {binary_path})")


class MalformedOutputError(L10nLintReviewError, ValueError):
    """Linter output could not be turned into findings."""


class UnknownSeverityError(L10nLintReviewError, ValueError):
    """A finding carries a severity outside warning/error."""

    def __init__(self, severity: object) -> None:
        self.severity = severity
        super().__init__(f"Unknown finding severity: {severity!r}")
