"""Cap and partition lint findings by severity."""
from collections.abc import Sequence

from l10nlint_review.errors import UnknownSeverityError
from l10nlint_review.logging_config import get_logger
from l10nlint_review.types import ClassificationResult, Finding, Severity

logger = get_logger(__name__)


def truncate_findings(
    findings: Sequence[Finding], max_findings: int | None
) -> tuple[tuple[Finding, ...], int]:
    """Keep at most max_findings findings from the front of the sequence.

    Args:
        findings: Findings in the order the linter emitted them
        max_findings: Maximum number to keep, or None for no limit

    Returns:
        Tuple of (kept findings, number dropped)
    """
    if max_findings is None or len(findings) <= max_findings:
        return tuple(findings), 0
    return tuple(findings[:max_findings]), len(findings) - max_findings


def classify(findings: Sequence[Finding], max_findings: int | None = None) -> ClassificationResult:
    """Classify a finding set into warnings and errors.

    Only the kept prefix is partitioned; dropped findings are counted but
    never reach either bucket.

    Args:
        findings: Findings in the order the linter emitted them
        max_findings: Maximum number to keep, or None for no limit

    Returns:
        ClassificationResult for the finding set

    Raises:
        ValueError: If max_findings is negative
        UnknownSeverityError: If a kept finding has an unknown severity
    """
    if max_findings is not None and max_findings < 0:
        raise ValueError(f"max_findings must not be negative, got: {max_findings}")

    kept, overflow_count = truncate_findings(findings, max_findings)
    logger.info(f"Received issues from L10nLint: {len(kept)}")
    if overflow_count:
        logger.debug(f"Dropped {overflow_count} issue(s) over the limit of {max_findings}")

    warnings: list[Finding] = []
    errors: list[Finding] = []
    for finding in kept:
        if finding.severity is Severity.WARNING:
            warnings.append(finding)
        elif finding.severity is Severity.ERROR:
            errors.append(finding)
        else:
            raise UnknownSeverityError(finding.severity)

    return ClassificationResult(
        kept=kept,
        overflow_count=overflow_count,
        warnings=tuple(warnings),
        errors=tuple(errors),
    )
