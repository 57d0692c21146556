"""Render classified findings to a review and decide the gate."""
from collections.abc import Iterable
from pathlib import Path

from l10nlint_review.config import ReportConfig
from l10nlint_review.logging_config import get_logger
from l10nlint_review.sinks import CommentSink
from l10nlint_review.types import ClassificationResult, Finding

logger = get_logger(__name__)

SUMMARY_HEADING = "### L10nLint found issues\n\n"
ERRORS_FAILURE_MESSAGE = "Failed due to L10nLint errors"
STRICT_FAILURE_MESSAGE = "Failed due to L10nLint warnings or errors (strict mode)"
ERRORS_AND_STRICT_FAILURE_MESSAGE = "Failed due to L10nLint errors and strict mode"


def markdown_findings(findings: Iterable[Finding], heading: str) -> str:
    """Create a markdown table of findings under a heading.

    Args:
        findings: Findings to list
        heading: Table heading, e.g. 'Warnings'

    Returns:
        Markdown section
    """
    lines = [f"#### {heading}", "", "File | Line | Reason |", "| --- | ----- | ----- |"]
    for finding in findings:
        line = "" if finding.line is None else finding.line
        lines.append(
            f"{finding.short_path} | {line} | {finding.reason} ({finding.rule_identifier})"
        )
    return "\n".join(lines) + "\n"


def other_findings_message(count: int) -> str:
    """Notice for findings dropped by the cap."""
    violations = "violation" if count == 1 else "violations"
    return f"L10nLint also found {count} more {violations} with this PR."


def summary_message(
    warnings: Iterable[Finding], errors: Iterable[Finding], overflow_count: int = 0
) -> str:
    """Build the grouped markdown message for findings.

    Args:
        warnings: Warning findings, may be empty
        errors: Error findings, may be empty
        overflow_count: Findings dropped by the cap, noted at the end when non-zero

    Returns:
        Markdown message
    """
    warnings = list(warnings)
    errors = list(errors)
    message = SUMMARY_HEADING
    if warnings:
        message += markdown_findings(warnings, "Warnings")
    if errors:
        message += markdown_findings(errors, "Errors")
    if overflow_count > 0:
        message += f"\n{other_findings_message(overflow_count)}"
    return message


def inline_message(finding: Finding) -> str:
    """Message body for an inline annotation.

    The trailing `dir/file:line` can be pasted into Xcode's Open Quickly.
    """
    location = finding.short_path
    if finding.line is not None:
        location += f":{finding.line}"
    return f"{finding.reason}\n`{finding.rule_identifier}` `{location}`"


def relative_path(path: str, project_root: Path) -> str:
    """Strip the project root prefix so annotations anchor to repo paths."""
    prefix = f"{project_root}/"
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path


def should_fail(classification: ClassificationResult, config: ReportConfig) -> bool:
    """Decide whether the review gate fails.

    Args:
        classification: Classified findings
        config: Report configuration

    Returns:
        True if errors fail the gate or strict mode sees any finding
    """
    fail_by_errors = config.fail_on_error and bool(classification.errors)
    fail_by_strict = config.strict and classification.has_findings
    return fail_by_errors or fail_by_strict


def gate_failure_message(classification: ClassificationResult, config: ReportConfig) -> str:
    """Name the categories responsible for a gate failure."""
    fail_by_errors = config.fail_on_error and bool(classification.errors)
    fail_by_strict = config.strict and classification.has_findings
    if fail_by_errors and fail_by_strict:
        return ERRORS_AND_STRICT_FAILURE_MESSAGE
    if fail_by_errors:
        return ERRORS_FAILURE_MESSAGE
    return STRICT_FAILURE_MESSAGE


def split_by_rules(
    findings: Iterable[Finding], rule_identifiers: frozenset[str]
) -> tuple[list[Finding], list[Finding]]:
    """Split findings into (grouped, inline) by rule identifier."""
    grouped: list[Finding] = []
    inline: list[Finding] = []
    for finding in findings:
        if finding.rule_identifier in rule_identifiers:
            grouped.append(finding)
        else:
            inline.append(finding)
    return grouped, inline


def _send_inline(
    findings: Iterable[Finding], blocking: bool, sink: CommentSink, project_root: Path
) -> None:
    for finding in findings:
        sink.post_inline_annotation(
            inline_message(finding),
            relative_path(finding.file, project_root),
            finding.line,
            blocking,
        )


def _report_inline(
    classification: ClassificationResult,
    config: ReportConfig,
    sink: CommentSink,
    project_root: Path,
) -> None:
    exceptions = config.exception_rule_identifiers
    grouped_warnings, inline_warnings = split_by_rules(classification.warnings, exceptions)
    grouped_errors, inline_errors = split_by_rules(classification.errors, exceptions)

    _send_inline(inline_warnings, config.strict, sink, project_root)
    _send_inline(inline_errors, config.fail_on_error or config.strict, sink, project_root)

    if grouped_warnings or grouped_errors:
        sink.post_summary_message(summary_message(grouped_warnings, grouped_errors))

    if classification.overflow_count > 0:
        sink.post_inline_annotation(
            other_findings_message(classification.overflow_count), None, None, False
        )


def report(
    classification: ClassificationResult,
    config: ReportConfig,
    sink: CommentSink,
    project_root: Path | None = None,
) -> bool:
    """Render findings to the sink and apply the review gate.

    Inline and summary mode differ only in where findings are shown; the
    gate decision is the same for both.

    Args:
        classification: Classified findings
        config: Report configuration
        sink: Review system to post to
        project_root: Root that inline anchors are made relative to
            (defaults to the current directory)

    Returns:
        True if the gate failed
    """
    if project_root is None:
        project_root = Path.cwd()

    if config.inline_mode:
        _report_inline(classification, config, sink, project_root)
    elif classification.has_findings:
        sink.post_summary_message(
            summary_message(
                classification.warnings, classification.errors, classification.overflow_count
            )
        )

    if should_fail(classification, config):
        message = gate_failure_message(classification, config)
        logger.info(message)
        sink.fail_gate(message)
        return True
    return False
