"""JSON, YAML and CSV renderings of the report document."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import yaml

CSV_HEADER = ["Test Name", "Status", "Duration (ms)", "Message"]


def to_json(report: dict[str, Any]) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False) + "\n"


def to_yaml(report: dict[str, Any]) -> str:
    return yaml.safe_dump(
        report, sort_keys=False, allow_unicode=True, default_flow_style=False
    )


def to_csv(report: dict[str, Any]) -> str:
    """One header row, then one row per test in recorded order.

    Passed tests get an empty Message cell rather than a missing one.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for test in report["tests"]:
        writer.writerow(
            [test["name"], test["status"], test["duration"], test.get("message", "")]
        )
    return buffer.getvalue()
