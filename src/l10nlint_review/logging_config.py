"""Logging configuration for l10nlint-review."""
import logging
import sys


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for l10nlint-review.

    Args:
        verbose: Enable verbose (DEBUG level) logging
        quiet: Enable quiet (ERROR only) logging
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger("l10nlint_review")
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers.clear()

    # Keep stdout free for annotations and JSON output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'l10nlint_review.')

    Returns:
        Logger instance
    """
    if not name.startswith("l10nlint_review."):
        name = f"l10nlint_review.{name}"
    return logging.getLogger(name)
