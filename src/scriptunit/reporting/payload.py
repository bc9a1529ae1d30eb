"""Format-neutral report document shared by every structured serializer."""

from __future__ import annotations

from typing import Any

from scriptunit.results import Run


def build_report(run: Run, finished_at_ms: int, timestamp: str) -> dict[str, Any]:
    """Return the report document for *run*, finalized at *finished_at_ms*.

    Keys and nesting follow the JSON layout; ``message`` is only present on
    tests that carry one.
    """
    tests: list[dict[str, Any]] = []
    for outcome in run.outcomes:
        entry: dict[str, Any] = {
            "name": outcome.description,
            "status": outcome.status.value,
            "duration": outcome.duration_ms,
        }
        if outcome.message:
            entry["message"] = outcome.message
        tests.append(entry)

    return {
        "testSuite": run.suite_name,
        "timestamp": timestamp,
        "duration": run.duration_ms(finished_at_ms),
        "summary": run.summary.to_dict(),
        "tests": tests,
    }
