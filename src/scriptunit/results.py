"""In-memory result model for a single run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from enum import Enum

from scriptunit.errors import FrameworkError

logger = logging.getLogger(__name__)

DEFAULT_SUITE_NAME = "Test Suite"


class CheckStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of evaluating a single check.

    Attributes:
        status: Whether the check passed or failed.
        description: Caller-supplied label; not unique.
        message: Failure diagnostic, empty for passed checks.
        duration_ms: Time spent evaluating this check only.
    """

    status: CheckStatus
    description: str
    message: str = ""
    duration_ms: int = 0

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASSED


@dataclass(frozen=True)
class RunSummary:
    total: int
    passed: int
    failed: int

    @property
    def all_passed(self) -> bool:
        """True only for a non-empty run without failures."""
        return self.passed > 0 and self.failed == 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class Run:
    """One test-suite execution: counters plus the ordered outcome log."""

    suite_name: str = DEFAULT_SUITE_NAME
    started_at_ms: int | None = None
    total_count: int = 0
    passed_count: int = 0
    failed_count: int = 0
    outcomes: list[CheckOutcome] = field(default_factory=list)

    def ensure_started(self, now_ms: int) -> int:
        if self.started_at_ms is None:
            self.started_at_ms = now_ms
        return self.started_at_ms

    def duration_ms(self, finished_at_ms: int) -> int:
        if self.started_at_ms is None:
            return 0
        return max(finished_at_ms - self.started_at_ms, 0)

    @property
    def summary(self) -> RunSummary:
        return RunSummary(
            total=self.total_count,
            passed=self.passed_count,
            failed=self.failed_count,
        )


class ResultRecorder:
    """Append-only writer for a Run's outcome log and counters."""

    def __init__(self, run: Run):
        self.run = run

    def record(
        self,
        status: CheckStatus | str | None,
        description: str | None,
        message: str | None = "",
        duration_ms: int = 0,
    ) -> CheckOutcome:
        if not status or not description:
            raise FrameworkError(
                "record requires at least 2 arguments: status and description"
            )
        try:
            status = CheckStatus(status)
        except ValueError as e:
            raise FrameworkError(
                f"Unknown check status {status!r}; expected 'passed' or 'failed'"
            ) from e

        outcome = CheckOutcome(
            status=status,
            description=description,
            message=message or "",
            duration_ms=max(int(duration_ms), 0),
        )

        run = self.run
        run.outcomes.append(outcome)
        run.total_count += 1
        if outcome.passed:
            run.passed_count += 1
        else:
            run.failed_count += 1

        logger.debug(
            f"Recorded {outcome.status.value} check #{run.total_count} "
            f"'{description}' ({outcome.duration_ms}ms)"
        )
        return outcome
