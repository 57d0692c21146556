"""Command-line interface for l10nlint-review."""
import json
import sys
from pathlib import Path

import click

from l10nlint_review.__version__ import __version__
from l10nlint_review.config import DEFAULT_SETTINGS_FILE, Settings, load_settings
from l10nlint_review.logging_config import get_logger, setup_logging
from l10nlint_review.orchestrator import run_lint_review
from l10nlint_review.sinks import CommentSink, ConsoleSink, GitHubActionsSink, RecordingSink


def apply_overrides(settings: Settings, **overrides: object) -> Settings:
    """Return settings with every non-None override applied and validated.

    Raises:
        ValidationError: If an override is invalid
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    return Settings.model_validate({**settings.model_dump(), **updates})


def create_sink(output_format: str) -> CommentSink:
    """Create the comment sink for an output format."""
    if output_format == "github":
        return GitHubActionsSink()
    if output_format == "json":
        return RecordingSink()
    return ConsoleSink()


@click.group()
@click.version_option(version=__version__, prog_name="l10nlint-review")
def main() -> None:
    """l10nlint-review: report L10nLint findings on code reviews."""


@main.command()
@click.option("--binary-path", type=str, help="Path to the l10nlint binary")
@click.option("--config-file", type=str, help="Path to the L10nLint config file")
@click.option("--max-findings", type=click.IntRange(min=0), help="Maximum findings to report")
@click.option("--strict/--no-strict", default=None, help="Fail on warnings as well as errors")
@click.option("--fail-on-error/--no-fail-on-error", default=None, help="Fail on errors")
@click.option("--inline/--no-inline", "inline_mode", default=None, help="Report inline")
@click.option(
    "--except-rule",
    "except_rules",
    multiple=True,
    help="Rule identifier always reported in the summary (repeatable)",
)
@click.option("--additional-args", type=str, help="Extra arguments passed to l10nlint")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["console", "github", "json"]),
    default="console",
    show_default=True,
    help="Where to send the review comments",
)
@click.option("--settings", "settings_file", type=click.Path(exists=True), help="Settings file")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
def lint(
    binary_path: str | None,
    config_file: str | None,
    max_findings: int | None,
    strict: bool | None,
    fail_on_error: bool | None,
    inline_mode: bool | None,
    except_rules: tuple[str, ...],
    additional_args: str | None,
    output_format: str,
    settings_file: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Lint localization files and report the findings."""
    project_root = Path.cwd()
    settings_path = Path(settings_file) if settings_file else project_root / DEFAULT_SETTINGS_FILE

    try:
        settings = apply_overrides(
            load_settings(settings_path),
            binary_path=binary_path,
            config_file=config_file,
            max_findings=max_findings,
            strict=strict,
            fail_on_error=fail_on_error,
            inline_mode=inline_mode,
            inline_except_rules=list(except_rules) or None,
            additional_args=additional_args,
            verbose=verbose or None,
        )
        setup_logging(verbose=settings.verbose, quiet=quiet)

        sink = create_sink(output_format)
        outcome = run_lint_review(settings, sink, project_root)

        if isinstance(sink, RecordingSink):
            output = sink.to_dict()
            output["summary"] = {
                "reported": len(outcome.classification.kept),
                "warnings": len(outcome.classification.warnings),
                "errors": len(outcome.classification.errors),
                "overflow": outcome.classification.overflow_count,
                "failed": outcome.failed,
            }
            click.echo(json.dumps(output, indent=2))

        sys.exit(1 if outcome.failed else 0)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, FileNotFoundError) as e:
        # Missing binary, malformed output, invalid settings
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
