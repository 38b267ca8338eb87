"""Validation outcome data models consumed by the report renderer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StageStatus(str, Enum):
    """Result of a single validation stage for one file."""

    not_run = "not_run"
    valid = "valid"
    invalid = "invalid"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class FailureLocation(_Frozen):
    """Where a policy rule failed inside a Kubernetes object."""

    schema_path: str
    line: int
    column: int


class OccurrenceDetail(_Frozen):
    """One object a rule matched, with its failure locations or skip reason."""

    metadata_name: str
    kind: str
    failure_locations: tuple[FailureLocation, ...] = ()
    skip_message: str = ""


class FailedRule(_Frozen):
    name: str
    occurrences: int = 1
    suggestion: str = ""
    occurrence_details: tuple[OccurrenceDetail, ...] = ()


class SkippedRule(FailedRule):
    """A rule skipped for this file; details carry the skip message."""


class ExtraMessage(_Frozen):
    """Free-form hint appended to a file section. Color is display metadata only."""

    text: str
    color: str = ""


class YamlOutcome(_Frozen):
    """YAML parsing always runs, so the stage is either valid or invalid."""

    status: StageStatus = StageStatus.valid
    errors: tuple[str, ...] = ()

    @field_validator("status")
    @classmethod
    def yaml_stage_always_runs(cls, v: StageStatus) -> StageStatus:
        if v is StageStatus.not_run:
            raise ValueError("YAML validation cannot be not_run")
        return v


class SchemaOutcome(_Frozen):
    status: StageStatus = StageStatus.valid
    k8s_version: str = ""
    errors: tuple[str, ...] = ()


class PolicyOutcome(_Frozen):
    status: StageStatus = StageStatus.valid
    failed_rules: tuple[FailedRule, ...] = ()
    skipped_rules: tuple[SkippedRule, ...] = ()


class ValidationOutcome(_Frozen):
    """Everything that happened to one input file across the three stages."""

    title: str
    yaml: YamlOutcome = Field(default_factory=YamlOutcome)
    schema_: SchemaOutcome = Field(default_factory=SchemaOutcome, alias="schema")
    policy: PolicyOutcome = Field(default_factory=PolicyOutcome)
    extra_messages: tuple[ExtraMessage, ...] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def yaml_invalid(
        cls,
        title: str,
        errors: list[str],
        extra_messages: list[ExtraMessage] | None = None,
    ) -> ValidationOutcome:
        """Outcome for a file that failed YAML parsing; later stages did not run."""
        return cls(
            title=title,
            yaml=YamlOutcome(status=StageStatus.invalid, errors=errors),
            schema_=SchemaOutcome(status=StageStatus.not_run),
            policy=PolicyOutcome(status=StageStatus.not_run),
            extra_messages=extra_messages or [],
        )

    @classmethod
    def schema_invalid(
        cls,
        title: str,
        errors: list[str],
        k8s_version: str = "",
        extra_messages: list[ExtraMessage] | None = None,
    ) -> ValidationOutcome:
        """Outcome for a file that failed schema validation; policy did not run."""
        return cls(
            title=title,
            schema_=SchemaOutcome(
                status=StageStatus.invalid, k8s_version=k8s_version, errors=errors
            ),
            policy=PolicyOutcome(status=StageStatus.not_run),
            extra_messages=extra_messages or [],
        )

    @classmethod
    def evaluated(
        cls,
        title: str,
        failed_rules: list[FailedRule] | None = None,
        skipped_rules: list[SkippedRule] | None = None,
        extra_messages: list[ExtraMessage] | None = None,
    ) -> ValidationOutcome:
        """Outcome for a file that reached the policy check."""
        failed_rules = failed_rules or []
        skipped_rules = skipped_rules or []
        status = (
            StageStatus.invalid
            if failed_rules or skipped_rules
            else StageStatus.valid
        )
        return cls(
            title=title,
            policy=PolicyOutcome(
                status=status, failed_rules=failed_rules, skipped_rules=skipped_rules
            ),
            extra_messages=extra_messages or [],
        )


class EvaluationSummary(_Frozen):
    """Aggregate counts over all evaluated files."""

    configs_count: int = 0
    rules_count: int = 0
    files_count: int = 0
    passed_yaml_validation_count: int = 0
    k8s_validation: str = ""
    passed_policy_check_count: int = 0
