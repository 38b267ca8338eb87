"""Command-line entry point: render a results document as a plain-text report."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from pydantic import ValidationError

from policyreport.config import PrinterOptions, load_options
from policyreport.loader import ResultsLoadError, load_results
from policyreport.printer.renderer import ReportRenderer
from policyreport.printer.theme import ThemeName

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policyreport",
        description="Render YAML, schema and policy validation results as text.",
    )
    parser.add_argument("results", help="YAML or JSON results document")
    parser.add_argument(
        "--output",
        choices=[name.value for name in ThemeName],
        help="marker theme (default from options, else rich)",
    )
    parser.add_argument(
        "--hide-skipped",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="omit the SKIPPED rule listing (default from options)",
    )
    parser.add_argument(
        "--no-summary", action="store_true", help="do not print the summary"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if os.environ.get("POLICYREPORT_DEV_MODE") else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        options = load_options()
        overrides = {}
        if args.output is not None:
            overrides["output"] = args.output
        if args.hide_skipped is not None:
            overrides["hide_skipped"] = args.hide_skipped
        if overrides:
            options = PrinterOptions.model_validate(
                {**options.model_dump(), **overrides}
            )
        results = load_results(args.results)
    except (ResultsLoadError, ValidationError, ValueError) as e:
        logger.debug("Failed to prepare report", exc_info=True)
        print(f"policyreport: error: {e}", file=sys.stderr)
        return 2

    renderer = ReportRenderer(options.theme)
    renderer.render_warnings(
        results.outcomes, hide_skipped=options.hide_skipped, out=sys.stdout
    )
    if results.summary is not None and not args.no_summary:
        renderer.render_summary(results.summary, results.k8s_version, out=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
