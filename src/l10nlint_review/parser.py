"""Parse L10nLint JSON reporter output into findings."""
import json

from l10nlint_review.errors import MalformedOutputError
from l10nlint_review.types import Finding


def parse_output(raw: str) -> list[Finding]:
    """Parse raw JSON reporter output.

    Args:
        raw: Standard output of `l10nlint lint --reporter json`

    Returns:
        Findings in the order the linter emitted them

    Raises:
        MalformedOutputError: If output is not a JSON list of finding records
        UnknownSeverityError: If a record has an unknown severity
    """
    if not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedOutputError(f"Failed to parse L10nLint output: {e}") from e

    if not isinstance(data, list):
        raise MalformedOutputError(
            f"Expected a list of findings, got {type(data).__name__}"
        )

    return [Finding.from_dict(record) for record in data]
