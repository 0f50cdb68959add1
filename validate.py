#!/usr/bin/env python3
# validate.py
# -------------------------------------------------------------
# Command-line validation runner.
# Resolves flags into a ValidationConfig, runs the checks in
# validators.py, prints the report, and returns an exit code
# (0=pass, 1=fail) so CI pipelines can gate on it.
# -------------------------------------------------------------

import argparse
import logging
import os
import sys
from typing import List, Optional

from reporter import REPORT_FORMATS, emit_report, save_report, summarize_report
from validators import MetadataRootError, ValidationConfig, run_core_validations

LOGGER = logging.getLogger("listing_validator")


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Console handler always, file handler when log_file is given.
    Previous handlers are closed and replaced, so repeated calls never
    duplicate log lines.
    """
    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if verbose else logging.WARNING
    LOGGER.setLevel(logging.DEBUG if (verbose or log_file) else logging.WARNING)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    LOGGER.addHandler(console_handler)

    if log_file:
        parent = os.path.dirname(log_file)
        if parent:
            os.makedirs(parent, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        LOGGER.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate Fastlane Android listing metadata (texts, images, changelogs)."
    )
    parser.add_argument("--fastlane-path", default="./fastlane", help="path to the Fastlane directory")
    parser.add_argument(
        "--enable-ga-annotations",
        action="store_true",
        help="enables file annotations for GitHub Actions",
    )
    parser.add_argument(
        "--check-locales",
        action="store_true",
        help="report locale directories that are not known Play Store locales",
    )
    parser.add_argument(
        "--report-path",
        default=None,
        help="also write the report table to <path>.<format> (no extension)",
    )
    parser.add_argument("--report-format", default="csv", choices=REPORT_FORMATS)
    parser.add_argument("--log-file", default=None, help="write debug logs to this file")
    parser.add_argument("--verbose", action="store_true", help="debug logging on the console")
    return parser


def config_from_args(args: argparse.Namespace) -> ValidationConfig:
    return ValidationConfig(
        fastlane_path=args.fastlane_path,
        enable_ga_annotations=args.enable_ga_annotations,
        check_locales=args.check_locales,
        report_path=args.report_path,
        report_format=args.report_format,
    )


def run(config: ValidationConfig) -> int:
    """Run one validation pass and return the process exit code."""
    try:
        report = run_core_validations(config)
    except MetadataRootError as e:
        print(e, file=sys.stderr)
        return 1

    emit_report(report, annotate=config.enable_ga_annotations)

    if config.report_path:
        save_report(report, config.report_path, config.report_format)
    if not report.ok:
        LOGGER.info("Errors per locale:\n%s", summarize_report(report).to_string(index=False))
    return report.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    return run(config_from_args(args))


if __name__ == "__main__":
    sys.exit(main())
