import json
import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from rich.console import Console
from l10nlint_review.sinks import ConsoleSink, GitHubActionsSink, RecordingSink


def make_console() -> tuple[Console, StringIO]:
    """Helper to create a plain-text console writing to a buffer."""
    buffer = StringIO()
    console = Console(file=buffer, color_system=None, highlight=False, soft_wrap=True, width=200)
    return console, buffer


def test_recording_sink_collects_everything():
    """Test the recording sink keeps comments in order."""
    sink = RecordingSink()
    assert sink.is_empty

    sink.post_inline_annotation("Missing key", "App/ja.lproj/Localizable.strings", 3, False)
    sink.post_summary_message("### L10nLint found issues")
    sink.fail_gate("Failed due to L10nLint errors")

    data = json.loads(sink.to_json())
    assert data["annotations"] == [
        {
            "message": "Missing key",
            "file": "App/ja.lproj/Localizable.strings",
            "line": 3,
            "blocking": False,
        }
    ]
    assert data["summaries"] == ["### L10nLint found issues"]
    assert data["failures"] == ["Failed due to L10nLint errors"]
    assert not sink.is_empty


def test_github_sink_annotations():
    """Test workflow commands for warnings and blocking errors."""
    console, buffer = make_console()
    sink = GitHubActionsSink(console=console)

    sink.post_inline_annotation("Missing key\n`missing_key`", "App/ja,x.strings", 3, False)
    sink.post_inline_annotation("Bad format", "App/en.strings", 7, True)
    sink.post_inline_annotation("L10nLint also found 2 more violations", None, None, False)

    lines = buffer.getvalue().splitlines()
    assert lines[0] == "::warning file=App/ja%2Cx.strings,line=3::Missing key%0A`missing_key`"
    assert lines[1] == "::error file=App/en.strings,line=7::Bad format"
    assert lines[2] == "::warning::L10nLint also found 2 more violations"


def test_github_sink_fail_gate():
    """Test gate failure is reported as an error command."""
    console, buffer = make_console()
    sink = GitHubActionsSink(console=console)

    sink.fail_gate("Failed due to L10nLint errors")

    assert buffer.getvalue().strip() == "::error::Failed due to L10nLint errors"


def test_github_sink_step_summary():
    """Test summaries are appended to the step summary file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        summary_path = Path(tmpdir) / "summary.md"
        console, buffer = make_console()

        with patch.dict("os.environ", {"GITHUB_STEP_SUMMARY": str(summary_path)}):
            sink = GitHubActionsSink(console=console)

        sink.post_summary_message("### First")
        sink.post_summary_message("### Second")

        assert summary_path.read_text(encoding="utf-8") == "### First\n### Second\n"
        assert buffer.getvalue() == ""


def test_github_sink_summary_without_step_summary():
    """Test summaries are printed when no step summary file exists."""
    console, buffer = make_console()

    with patch.dict("os.environ", {}, clear=True):
        sink = GitHubActionsSink(console=console)

    sink.post_summary_message("### L10nLint found issues")

    assert "### L10nLint found issues" in buffer.getvalue()


def test_console_sink_output():
    """Test the console sink prints annotations and summaries."""
    console, buffer = make_console()
    sink = ConsoleSink(console=console)

    sink.post_inline_annotation("Missing key", "App/[ja].strings", 3, True)
    sink.post_inline_annotation("Unused key", None, None, False)
    sink.post_summary_message("#### Errors\n\nFile | Line | Reason |\n| --- | ----- | ----- |\n")
    sink.fail_gate("Failed due to L10nLint errors")

    output = buffer.getvalue()
    assert "FAIL App/[ja].strings:3" in output
    assert "Missing key" in output
    assert "WARN\n" in output
    assert "Errors" in output
    assert "Failed due to L10nLint errors" in output
