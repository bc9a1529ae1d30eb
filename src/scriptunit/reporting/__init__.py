"""Report generation: one run, several structured formats."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable

from scriptunit.config import ReportFormat
from scriptunit.errors import UnsupportedFormatError
from scriptunit.reporting.console import (
    Narrator,
    console_summary_lines,
    render_console_summary,
)
from scriptunit.reporting.escaping import escape_json, escape_xml
from scriptunit.reporting.junit import to_junit
from scriptunit.reporting.payload import build_report
from scriptunit.reporting.structured import to_csv, to_json, to_yaml

logger = logging.getLogger(__name__)

SERIALIZERS: dict[ReportFormat, Callable[[dict[str, Any]], str]] = {
    ReportFormat.JSON: to_json,
    ReportFormat.YAML: to_yaml,
    ReportFormat.CSV: to_csv,
    ReportFormat.JUNIT: to_junit,
}


def serialize(report: dict[str, Any], format: ReportFormat | str) -> str:
    """Render *report* in *format*; the result always ends with one newline."""
    if not isinstance(format, ReportFormat) or format not in SERIALIZERS:
        raise UnsupportedFormatError(str(getattr(format, "value", format)))
    content = SERIALIZERS[format](report)
    return content.rstrip("\n") + "\n"


def write_report(path: Path, content: str) -> Path:
    """Write *content* to *path* in one step via a temp file and rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        encoding="utf-8",
        delete=False,
    ) as handle:
        tmp_path = Path(handle.name)
        handle.write(content)

    try:
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {len(content)} bytes to {path}")
    return path


__all__ = [
    "Narrator",
    "SERIALIZERS",
    "build_report",
    "console_summary_lines",
    "escape_json",
    "escape_xml",
    "render_console_summary",
    "serialize",
    "to_csv",
    "to_json",
    "to_junit",
    "to_yaml",
    "write_report",
]
