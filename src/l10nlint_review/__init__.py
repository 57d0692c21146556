"""l10nlint-review: L10nLint findings for code review."""

from l10nlint_review.__version__ import __version__
from l10nlint_review.classifier import classify
from l10nlint_review.config import ReportConfig, Settings, load_settings
from l10nlint_review.orchestrator import LintReviewOutcome, run_lint_review
from l10nlint_review.reporter import report
from l10nlint_review.types import ClassificationResult, Finding, Severity

__all__ = [
    "__version__",
    "ClassificationResult",
    "Finding",
    "LintReviewOutcome",
    "ReportConfig",
    "Settings",
    "Severity",
    "classify",
    "load_settings",
    "report",
    "run_lint_review",
]
