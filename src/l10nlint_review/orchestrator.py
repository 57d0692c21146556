"""Main orchestrator coordinating a lint review run."""
from dataclasses import dataclass
from pathlib import Path

from l10nlint_review.classifier import classify
from l10nlint_review.config import Settings
from l10nlint_review.errors import LinterNotInstalledError
from l10nlint_review.linter import L10nLint, LintOptions
from l10nlint_review.logging_config import get_logger
from l10nlint_review.parser import parse_output
from l10nlint_review.reporter import report
from l10nlint_review.sinks import CommentSink
from l10nlint_review.types import ClassificationResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class LintReviewOutcome:
    """Result of one lint review run."""

    classification: ClassificationResult
    failed: bool


def run_lint_review(
    settings: Settings, sink: CommentSink, project_root: Path | None = None
) -> LintReviewOutcome:
    """Lint localization files and report the findings.

    Args:
        settings: Settings for this run
        sink: Review system to post findings to
        project_root: Root used to anchor inline annotations
            (defaults to the current directory)

    Returns:
        LintReviewOutcome with the classification and gate decision

    Raises:
        LinterNotInstalledError: If the l10nlint binary cannot be found
        MalformedOutputError: If the linter output cannot be parsed
        UnknownSeverityError: If a finding has an unknown severity
    """
    if project_root is None:
        project_root = Path.cwd()

    linter = L10nLint(settings.binary_path)
    if not linter.installed():
        raise LinterNotInstalledError(linter.binary_path)

    if settings.config_file:
        logger.info(f"Using config file: {settings.config_file}")
    else:
        logger.info("config file was not specified")

    options = LintOptions(config=settings.config_file)
    logger.info(f"linting with options: {options}")

    cwd = Path(settings.working_directory) if settings.working_directory else None
    raw = linter.lint(options, settings.additional_args, env=settings.env or None, cwd=cwd)

    findings = parse_output(raw)
    classification = classify(findings, settings.max_findings)
    failed = report(classification, settings.report_config(), sink, project_root)

    return LintReviewOutcome(classification=classification, failed=failed)
