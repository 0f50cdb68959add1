# reporter.py
# -------------------------------------------------------------
# Renders a RunReport:
#   - one human-readable line per entry (diagnostic stream)
#   - optional GitHub Actions "::error file=..." annotations
#   - optional table export (csv | json | parquet) and
#     per-locale summary, both via pandas
# -------------------------------------------------------------

import logging
import os
import sys
from typing import Optional, TextIO

import pandas as pd

from report import Entry, RunReport, Violation

LOGGER = logging.getLogger("listing_validator")

ANNOTATION_FMT = "::error file={file}::{message}"
REPORT_FORMATS = ["csv", "json", "parquet"]


def entry_location(entry: Entry) -> str:
    """<locale>/<asset>, or just <locale> for locale-level entries."""
    return f"{entry.locale}/{entry.asset}" if entry.asset else entry.locale

def format_line(entry: Entry) -> str:
    return f"{entry_location(entry)}: {entry.message}"

def escape_annotation(message: str) -> str:
    # '%' first so the escapes themselves are not re-escaped
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")

def format_annotation(entry: Violation, metadata_path: str) -> str:
    file = os.path.join(metadata_path, entry.locale)
    if entry.asset:
        file = os.path.join(file, entry.asset)
    return ANNOTATION_FMT.format(file=file, message=escape_annotation(entry.message))

def emit_report(report: RunReport, annotate: bool = False,
                out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
    """
    Summary count and annotations go to `out` (stdout), human lines to `err` (stderr).
    Annotations are written for content violations only; I/O failures
    carry no rule message to pin on a file.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    print("found", len(report), "errors!", file=out)
    for entry in report.entries:
        if annotate and isinstance(entry, Violation):
            print(format_annotation(entry, report.metadata_path), file=out)
        print(format_line(entry), file=err)

# ---------- Table export ----------

def save_report(report: RunReport, path_base: str, fmt: str) -> str:
    """
    Save the report table by appending the format extension to path_base.
    Returns the written path.
    """
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unsupported report format: {fmt}")
    df = report.to_frame()
    base = os.path.normpath(path_base)
    parent = os.path.dirname(base)
    if parent:
        os.makedirs(parent, exist_ok=True)
    path = f"{base}.{fmt}"
    if fmt == "csv":
        df.to_csv(path, index=False)
    elif fmt == "parquet":
        # Requires pyarrow or fastparquet
        df.to_parquet(path, index=False)
    else:
        df.to_json(path, orient="records", indent=2)
    LOGGER.info("Report written to %s", path)
    return path

def summarize_report(report: RunReport) -> pd.DataFrame:
    """
    Entry counts per locale, split by kind. Empty frame for a clean run.
    """
    df = report.to_frame()
    if df.empty:
        return pd.DataFrame(columns=["locale", "violation", "io_failure", "total"])
    summary = (
        df.groupby(["locale", "kind"])
        .size()
        .unstack(fill_value=0)
        .reindex(columns=["violation", "io_failure"], fill_value=0)
        .reset_index()
    )
    summary["total"] = summary["violation"] + summary["io_failure"]
    summary.columns.name = None
    return summary.sort_values(["total", "locale"], ascending=[False, True]).reset_index(drop=True)
