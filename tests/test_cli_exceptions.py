"""Tests for CLI exception handling."""
from pathlib import Path
from click.testing import CliRunner
from unittest.mock import patch
from l10nlint_review.cli import main
from l10nlint_review.errors import LinterNotInstalledError, MalformedOutputError


def test_keyboard_interrupt_exits_with_130():
    """Test that KeyboardInterrupt exits with code 130 (SIGINT)."""
    runner = CliRunner()

    with patch("l10nlint_review.cli.run_lint_review") as mock_run:
        mock_run.side_effect = KeyboardInterrupt()

        result = runner.invoke(main, ["lint"])

        assert result.exit_code == 130
        assert "cancelled" in result.output.lower()


def test_missing_linter_shows_error_message():
    """Test that a missing binary names the path."""
    runner = CliRunner()

    result = runner.invoke(main, ["lint", "--binary-path", "/nonexistent/l10nlint"])

    assert result.exit_code == 2
    assert "l10nlint is not installed" in result.output
    assert "/nonexistent/l10nlint" in result.output


def test_not_installed_error_from_run():
    """Test that LinterNotInstalledError maps to exit code 2."""
    runner = CliRunner()

    with patch("l10nlint_review.cli.run_lint_review") as mock_run:
        mock_run.side_effect = LinterNotInstalledError("/opt/l10nlint")

        result = runner.invoke(main, ["lint"])

        assert result.exit_code == 2
        assert "/opt/l10nlint" in result.output


def test_malformed_output_shows_error_message():
    """Test that malformed linter output is reported."""
    runner = CliRunner()

    with patch("l10nlint_review.cli.run_lint_review") as mock_run:
        mock_run.side_effect = MalformedOutputError("Failed to parse L10nLint output")

        result = runner.invoke(main, ["lint"])

        assert result.exit_code == 2
        assert "Failed to parse L10nLint output" in result.output


def test_invalid_settings_file_shows_error_message():
    """Test that a broken settings file is reported."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        Path(".l10nlint-review.json").write_text("{not json")

        result = runner.invoke(main, ["lint"])

        assert result.exit_code == 2
        assert "Error:" in result.output


def test_generic_exception_shows_helpful_message():
    """Test that unexpected exceptions show helpful message."""
    runner = CliRunner()

    with patch("l10nlint_review.cli.run_lint_review") as mock_run:
        mock_run.side_effect = RuntimeError("Unexpected internal error")

        result = runner.invoke(main, ["lint", "--verbose"])

        assert result.exit_code == 2
        assert "Unexpected internal error" in result.output
