"""Wrapper around the l10nlint executable."""
import os
import shlex
import shutil
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from l10nlint_review.errors import LinterNotInstalledError
from l10nlint_review.logging_config import get_logger

logger = get_logger(__name__)

BINARY_NAME = "l10nlint"


@dataclass(frozen=True)
class LintOptions:
    """Known l10nlint options, emitted as flags in field order.

    None leaves an option out of the command line entirely.
    """

    config: str | None = None
    reporter: str | None = "json"
    quiet: bool | None = None
    force_exclude: bool | None = None
    use_alternative_excluding: bool | None = None


def option_flags(name: str, value: str | bool | None) -> list[str]:
    """Map one option to command-line flags.

    Args:
        name: Option name, underscores allowed
        value: Option value

    Returns:
        Flags for the option, empty when value is None
    """
    if value is None:
        return []
    flag = name.replace("_", "-")
    if value is True:
        return [f"--{flag}"]
    if value is False:
        return [f"--no-{flag}"]
    return [f"--{flag}", str(value)]


def build_arguments(options: LintOptions, additional_args: str = "") -> list[str]:
    """Build l10nlint arguments from options and extra argument text.

    Args:
        options: Known options
        additional_args: Raw argument text appended after the options

    Returns:
        Argument list (without the executable and subcommand)
    """
    args: list[str] = []
    for field in fields(options):
        args.extend(option_flags(field.name, getattr(options, field.name)))
    args.extend(shlex.split(additional_args))
    return args


def default_binary_path() -> str:
    """Locate l10nlint on PATH, falling back to ./l10nlint."""
    found = shutil.which(BINARY_NAME)
    if found:
        return found
    return str(Path.cwd() / BINARY_NAME)


class L10nLint:
    """Runs l10nlint subcommands and returns their raw output."""

    def __init__(self, binary_path: str | None = None) -> None:
        self.binary_path = binary_path or default_binary_path()

    def installed(self) -> bool:
        """Check whether the executable exists."""
        return Path(self.binary_path).is_file()

    def lint(
        self,
        options: LintOptions | None = None,
        additional_args: str = "",
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> str:
        """Shortcut for running the lint subcommand."""
        return self.run("lint", additional_args, options, env=env, cwd=cwd)

    def run(
        self,
        subcommand: str = "lint",
        additional_args: str = "",
        options: LintOptions | None = None,
        env: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> str:
        """Run an l10nlint subcommand.

        The process gets its own environment overlay; os.environ is never
        modified.

        Args:
            subcommand: l10nlint subcommand, e.g. 'lint'
            additional_args: Raw argument text appended after the options
            options: Known options to pass
            env: Extra environment variables for the process
            cwd: Directory to run in instead of the current one

        Returns:
            Standard output of the linter

        Raises:
            LinterNotInstalledError: If the executable does not exist
        """
        if not self.installed():
            raise LinterNotInstalledError(self.binary_path)

        command = [
            self.binary_path,
            subcommand,
            *build_arguments(options or LintOptions(), additional_args),
        ]
        process_env = {**os.environ, **env} if env else None

        logger.debug(f"Running: {shlex.join(command)}")
        result = subprocess.run(
            command,
            cwd=cwd,
            env=process_env,
            check=False,
            capture_output=True,
            text=True,
        )

        # l10nlint exits non-zero whenever it reports issues
        if result.returncode != 0:
            logger.debug(f"l10nlint exited with status {result.returncode}")
        if result.stderr:
            logger.debug(result.stderr.strip())

        return result.stdout
