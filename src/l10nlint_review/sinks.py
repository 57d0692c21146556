"""Review comment sinks that receive rendered findings."""
import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Protocol

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape


class CommentSink(Protocol):
    """Capabilities of the review system the reporter talks to."""

    def post_inline_annotation(
        self, message: str, file: str | None, line: int | None, blocking: bool
    ) -> None:
        """Post an annotation, anchored to file/line when given."""
        ...

    def post_summary_message(self, markdown: str) -> None:
        """Post one markdown message for the whole review."""
        ...

    def fail_gate(self, message: str) -> None:
        """Mark the review as failed."""
        ...


@dataclass
class Annotation:
    """Annotation captured by RecordingSink."""

    message: str
    file: str | None
    line: int | None
    blocking: bool


@dataclass
class RecordingSink:
    """Collects everything posted to it."""

    annotations: list[Annotation] = field(default_factory=list)
    summaries: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    def post_inline_annotation(
        self, message: str, file: str | None, line: int | None, blocking: bool
    ) -> None:
        self.annotations.append(Annotation(message, file, line, blocking))

    def post_summary_message(self, markdown: str) -> None:
        self.summaries.append(markdown)

    def fail_gate(self, message: str) -> None:
        self.failures.append(message)

    @property
    def is_empty(self) -> bool:
        return not (self.annotations or self.summaries or self.failures)

    def to_dict(self) -> dict[str, Any]:
        """Convert recorded comments to a dictionary."""
        return {
            "annotations": [asdict(a) for a in self.annotations],
            "summaries": list(self.summaries),
            "failures": list(self.failures),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


class ConsoleSink:
    """Renders comments to a terminal with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def post_inline_annotation(
        self, message: str, file: str | None, line: int | None, blocking: bool
    ) -> None:
        label = "[bold red]FAIL[/]" if blocking else "[bold yellow]WARN[/]"
        location = ""
        if file:
            location = f" {file}:{line}" if line is not None else f" {file}"
        self.console.print(f"{label}{escape(location)}", highlight=False)
        self.console.print(message, markup=False, emoji=False, highlight=False)

    def post_summary_message(self, markdown: str) -> None:
        self.console.print(Markdown(markdown))

    def fail_gate(self, message: str) -> None:
        self.console.print(f"[bold red]{escape(message)}[/]", highlight=False)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsSink:
    """Emits GitHub Actions workflow commands.

    Summaries are appended to $GITHUB_STEP_SUMMARY when the variable is set
    and echoed to the log otherwise.
    """

    def __init__(self, console: Console | None = None, summary_path: Path | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        if summary_path is None and os.environ.get("GITHUB_STEP_SUMMARY"):
            summary_path = Path(os.environ["GITHUB_STEP_SUMMARY"])
        self.summary_path = summary_path

    def _emit(self, command: str, message: str, properties: list[str] | None = None) -> None:
        props = f" {','.join(properties)}" if properties else ""
        line = f"::{command}{props}::{_escape_data(message)}"
        self.console.print(line, markup=False, emoji=False)

    def post_inline_annotation(
        self, message: str, file: str | None, line: int | None, blocking: bool
    ) -> None:
        properties = []
        if file:
            properties.append(f"file={_escape_property(file)}")
        if line is not None:
            properties.append(f"line={line}")
        self._emit("error" if blocking else "warning", message, properties)

    def post_summary_message(self, markdown: str) -> None:
        if self.summary_path is None:
            self.console.print(markdown, markup=False, emoji=False)
            return
        with self.summary_path.open("a", encoding="utf-8") as f:
            f.write(markdown)
            f.write("\n")

    def fail_gate(self, message: str) -> None:
        self._emit("error", message)
