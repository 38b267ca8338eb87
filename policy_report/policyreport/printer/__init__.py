"""Report rendering: themes, outcome models and the text renderer."""

from policyreport.printer.models import (
    EvaluationSummary,
    ExtraMessage,
    FailedRule,
    FailureLocation,
    OccurrenceDetail,
    PolicyOutcome,
    SchemaOutcome,
    SkippedRule,
    StageStatus,
    ValidationOutcome,
    YamlOutcome,
)
from policyreport.printer.renderer import ReportRenderer
from policyreport.printer.theme import (
    Marker,
    Theme,
    ThemeName,
    create_rich_theme,
    create_simple_theme,
    resolve_theme,
)

__all__ = [
    "EvaluationSummary",
    "ExtraMessage",
    "FailedRule",
    "FailureLocation",
    "Marker",
    "OccurrenceDetail",
    "PolicyOutcome",
    "ReportRenderer",
    "SchemaOutcome",
    "SkippedRule",
    "StageStatus",
    "Theme",
    "ThemeName",
    "ValidationOutcome",
    "YamlOutcome",
    "create_rich_theme",
    "create_simple_theme",
    "resolve_theme",
]
