"""Printer options, loaded from an options file or the environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel

from policyreport.printer.theme import Theme, ThemeName, resolve_theme

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class PrinterOptions(BaseModel):
    """Presentation options applied uniformly to a whole render call."""

    output: ThemeName = ThemeName.rich
    hide_skipped: bool = False

    @property
    def theme(self) -> Theme:
        return resolve_theme(self.output)


def load_options() -> PrinterOptions:
    """Load options from POLICYREPORT_OPTIONS_PATH or env fallback."""
    opts_path = os.environ.get("POLICYREPORT_OPTIONS_PATH", "")
    if opts_path and Path(opts_path).exists():
        logger.debug("Reading printer options from %s", opts_path)
        return PrinterOptions.model_validate(json.loads(Path(opts_path).read_text()))
    return PrinterOptions(
        output=os.environ.get("POLICYREPORT_OUTPUT", ThemeName.rich.value),
        hide_skipped=os.environ.get("POLICYREPORT_HIDE_SKIPPED", "").lower()
        in _TRUE_VALUES,
    )
