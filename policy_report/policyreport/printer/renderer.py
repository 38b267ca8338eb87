"""Plain-text report renderer for validation outcomes.

Each file gets a title, one status line per stage (YAML, Kubernetes schema,
policy) and then the details of whichever stage stopped it. Stages after a
failed one are reported as not run. Blank-line placement is part of the
output format and is compared byte-for-byte by consumers.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from policyreport.printer.models import (
    EvaluationSummary,
    ExtraMessage,
    FailedRule,
    OccurrenceDetail,
    SkippedRule,
    StageStatus,
    ValidationOutcome,
)
from policyreport.printer.theme import Marker, Theme, create_rich_theme

logger = logging.getLogger(__name__)

# Stage status lines use the same bracketed labels in every theme.
_PASSED = "[V]"
_FAILED = "[X]"
_NOT_RUN = "[?]"

_YAML_STAGE = "YAML validation"
_SCHEMA_STAGE = "Kubernetes schema validation"
_POLICY_STAGE = "Policy check"
_DID_NOT_RUN = "didn't run for this file"


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def _pluralize_occurrences(count: int) -> str:
    return f"{count} occurrence" if count == 1 else f"{count} occurrences"


def _location_key(schema_path: str) -> str:
    return schema_path.removeprefix(".")


class ReportRenderer:
    """Render validation outcomes and evaluation summaries as plain text.

    The renderer holds only its theme, so one instance can serve any number
    of render calls.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        self._theme = theme or create_rich_theme()

    @property
    def theme(self) -> Theme:
        return self._theme

    def render_warnings(
        self,
        outcomes: Iterable[ValidationOutcome],
        *,
        hide_skipped: bool = False,
        out: TextSink | None = None,
    ) -> str:
        """Render one section per outcome, in input order.

        When ``hide_skipped`` is set, files with only skipped rules keep their
        policy status line but omit the SKIPPED listing. The text is written
        to ``out`` when given and always returned.
        """
        parts: list[str] = []
        count = 0
        for outcome in outcomes:
            self._write_file_section(parts, outcome, hide_skipped)
            count += 1

        text = "".join(parts)
        logger.debug(
            "Rendered %d file sections (%d chars, theme=%s)",
            count,
            len(text),
            self._theme.name.value,
        )
        if out is not None:
            out.write(text)
        return text

    def render_summary(
        self,
        summary: EvaluationSummary,
        k8s_version: str,
        *,
        out: TextSink | None = None,
    ) -> str:
        """Render the aggregate summary block; every line is always present."""
        files = summary.files_count
        text = (
            "(Summary)\n\n"
            f"- Passing YAML validation: {summary.passed_yaml_validation_count}/{files}\n\n"
            f"- Passing Kubernetes ({k8s_version}) schema validation: "
            f"{summary.k8s_validation}\n\n"
            f"- Passing policy check: {summary.passed_policy_check_count}/{files}\n\n"
        )
        if out is not None:
            out.write(text)
        return text

    # -- File sections --

    def _write_file_section(
        self, parts: list[str], outcome: ValidationOutcome, hide_skipped: bool
    ) -> None:
        # A title that already ends in a newline gets an extra blank line.
        # Kept as is: snapshot consumers depend on the exact spacing.
        parts.append(f">>  File: {outcome.title}\n\n")
        self._write_stages(parts, outcome, hide_skipped)
        parts.append("\n")

    def _write_stages(
        self, parts: list[str], outcome: ValidationOutcome, hide_skipped: bool
    ) -> None:
        if outcome.yaml.status is StageStatus.invalid:
            self._write_stage_errors(
                parts, _YAML_STAGE, outcome.yaml.errors, outcome.extra_messages
            )
            parts.append(f"{_NOT_RUN} {_SCHEMA_STAGE} {_DID_NOT_RUN}\n")
            parts.append(f"{_NOT_RUN} {_POLICY_STAGE} {_DID_NOT_RUN}\n")
            return
        parts.append(f"{_PASSED} {_YAML_STAGE}\n")

        schema = outcome.schema_
        if schema.status is StageStatus.not_run:
            parts.append(f"{_NOT_RUN} {_SCHEMA_STAGE} {_DID_NOT_RUN}\n")
            parts.append(f"{_NOT_RUN} {_POLICY_STAGE} {_DID_NOT_RUN}\n")
            return
        if schema.status is StageStatus.invalid:
            self._write_stage_errors(
                parts, _SCHEMA_STAGE, schema.errors, outcome.extra_messages
            )
            parts.append(f"{_NOT_RUN} {_POLICY_STAGE} {_DID_NOT_RUN}\n")
            return
        parts.append(f"{_PASSED} {_SCHEMA_STAGE}\n")

        policy = outcome.policy
        if policy.status is StageStatus.not_run:
            parts.append(f"{_NOT_RUN} {_POLICY_STAGE} {_DID_NOT_RUN}\n")
            return

        parts.append("\n")
        if policy.failed_rules:
            parts.append(f"{_FAILED} {_POLICY_STAGE}\n")
            for rule in policy.failed_rules:
                self._write_failed_rule(parts, rule)
        elif policy.skipped_rules:
            parts.append(f"{_FAILED} {_POLICY_STAGE}\n")
            if not hide_skipped:
                parts.append("\nSKIPPED\n")
                for skipped in policy.skipped_rules:
                    self._write_skipped_rule(parts, skipped)
            parts.append("\n")
        else:
            parts.append(f"{_PASSED} {_POLICY_STAGE}\n")

        self._write_extra_messages(parts, outcome.extra_messages)

    def _write_stage_errors(
        self,
        parts: list[str],
        stage: str,
        errors: tuple[str, ...],
        extra_messages: tuple[ExtraMessage, ...],
    ) -> None:
        failure = self._theme.token(Marker.failure)
        parts.append(f"{_FAILED} {stage}\n\n")
        for error in errors:
            parts.append(f"{failure}  {error}\n")
        # Extra hints take the place of the blank line closing the error list.
        if extra_messages:
            self._write_extra_messages(parts, extra_messages)
        else:
            parts.append("\n")

    @staticmethod
    def _write_extra_messages(
        parts: list[str], extra_messages: tuple[ExtraMessage, ...]
    ) -> None:
        for message in extra_messages:
            parts.append(f"{message.text}\n")

    # -- Rules --

    def _write_failed_rule(self, parts: list[str], rule: FailedRule) -> None:
        failure = self._theme.token(Marker.failure)
        suggestion = self._theme.token(Marker.suggestion)
        parts.append(
            f"\n{failure}  {rule.name}  [{_pluralize_occurrences(rule.occurrences)}]\n"
        )
        for detail in rule.occurrence_details:
            parts.append(self._occurrence_line(detail))
            for location in detail.failure_locations:
                parts.append(
                    f"      > key: {_location_key(location.schema_path)} "
                    f"(line: {location.line}:{location.column})\n"
                )
        parts.append(f"\n{suggestion}  {rule.suggestion}\n")

    def _write_skipped_rule(self, parts: list[str], rule: SkippedRule) -> None:
        skip = self._theme.token(Marker.skip)
        suggestion = self._theme.token(Marker.suggestion)
        parts.append(f"\n{skip}  {rule.name}\n")
        for detail in rule.occurrence_details:
            parts.append(self._occurrence_line(detail))
            parts.append(f"{suggestion}  {detail.skip_message}\n")

    @staticmethod
    def _occurrence_line(detail: OccurrenceDetail) -> str:
        return f"    - metadata.name: {detail.metadata_name} (kind: {detail.kind})\n"
