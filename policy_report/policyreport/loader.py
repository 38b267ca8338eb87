"""Load validation results documents (YAML or JSON) using ruamel.yaml."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML, YAMLError

from policyreport.printer.models import EvaluationSummary, ValidationOutcome

logger = logging.getLogger(__name__)


class ResultsLoadError(Exception):
    """Raised when a results document cannot be read or does not match the model."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class EvaluationResults(BaseModel):
    """A complete results document: per-file outcomes plus an optional summary."""

    k8s_version: str = ""
    outcomes: list[ValidationOutcome] = Field(default_factory=list)
    summary: EvaluationSummary | None = None


def _to_plain(obj: object) -> object:
    """Convert ruamel container types to plain dicts and lists."""
    if hasattr(obj, "items"):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_plain(item) for item in obj]
    return obj


def parse_results(text: str) -> EvaluationResults:
    """Parse a results document from a string.

    JSON documents are accepted as well, being valid YAML. Version strings
    such as ``k8s_version`` must be quoted: an unquoted ``1.20`` loads as the
    float 1.2 and is rejected.
    """
    yaml = YAML(typ="safe")
    try:
        parsed = yaml.load(StringIO(text))
    except YAMLError as e:
        line = None
        if hasattr(e, "problem_mark") and e.problem_mark is not None:
            line = e.problem_mark.line + 1  # 0-indexed to 1-indexed
        raise ResultsLoadError(f"Invalid results document: {e}", line=line) from e

    if parsed is None:
        raise ResultsLoadError("Results document is empty")
    if not hasattr(parsed, "items"):
        raise ResultsLoadError("Results document must be a mapping")

    try:
        return EvaluationResults.model_validate(_to_plain(parsed))
    except ValidationError as e:
        raise ResultsLoadError(f"Results document does not match the model: {e}") from e


def load_results(path: Path | str) -> EvaluationResults:
    """Read and parse a results document from disk."""
    path = Path(path)
    logger.info("Loading validation results from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResultsLoadError(f"Cannot read results file {path}: {e}") from e

    results = parse_results(text)
    logger.debug("Loaded %d outcomes from %s", len(results.outcomes), path)
    return results
