from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from scriptunit.assertions.base import AssertionResult
from scriptunit.assertions.deterministic import (
    check_command_succeeded,
    check_contains,
    check_equals,
    check_exit_code,
    check_file_contains,
    check_file_exists,
    check_file_not_contains,
)
from scriptunit.clock import Clock
from scriptunit.errors import FrameworkError
from scriptunit.reporting.console import Narrator
from scriptunit.results import CheckStatus, ResultRecorder
from scriptunit.tools import TextTools

logger = logging.getLogger(__name__)


def _require(operation: str, **arguments: Any) -> None:
    """Raise FrameworkError if any required argument is None."""
    missing = [name for name, value in arguments.items() if value is None]
    if missing:
        raise FrameworkError(
            f"{operation} requires {len(arguments)} argument(s): "
            f"{', '.join(arguments)} (missing: {', '.join(missing)})"
        )


class AssertionEngine:
    """Runs check predicates through a common time/narrate/record template."""

    def __init__(
        self,
        recorder: ResultRecorder,
        narrator: Narrator,
        tools: TextTools,
        clock: Clock | None = None,
    ):
        self.recorder = recorder
        self.narrator = narrator
        self.tools = tools
        self.clock = clock or Clock()

    def _evaluate(
        self, description: str, check: Callable[[], AssertionResult]
    ) -> bool:
        if not description:
            raise FrameworkError("check description must not be empty")
        started = self.clock.now_ms()
        self.recorder.run.ensure_started(started)

        result = check()

        if result.passed:
            self.narrator.passed(description)
        else:
            self.narrator.failed(description, result.details)

        self.recorder.record(
            CheckStatus.PASSED if result.passed else CheckStatus.FAILED,
            description,
            "" if result.passed else result.message,
            self.clock.now_ms() - started,
        )
        return result.passed

    def equals(self, expected: str, actual: str, description: str) -> bool:
        _require(
            "assert_equals", expected=expected, actual=actual, description=description
        )
        return self._evaluate(description, lambda: check_equals(expected, actual))

    def contains(self, haystack: str, needle: str, description: str) -> bool:
        _require(
            "assert_contains", haystack=haystack, needle=needle, description=description
        )
        return self._evaluate(description, lambda: check_contains(haystack, needle))

    def file_contains(
        self, path: str | Path, pattern: str, description: str
    ) -> bool:
        _require(
            "assert_file_contains", file=path, pattern=pattern, description=description
        )
        dump_contents = not self.narrator.quiet
        return self._evaluate(
            description,
            lambda: check_file_contains(self.tools, path, pattern, dump_contents),
        )

    def file_not_contains(
        self, path: str | Path, pattern: str, description: str
    ) -> bool:
        _require(
            "assert_file_not_contains",
            file=path,
            pattern=pattern,
            description=description,
        )
        return self._evaluate(
            description, lambda: check_file_not_contains(self.tools, path, pattern)
        )

    def file_exists(self, path: str | Path, description: str) -> bool:
        _require("assert_file_exists", file=path, description=description)
        return self._evaluate(description, lambda: check_file_exists(path))

    def exit_code_equals(
        self, expected_code: int | str, actual_code: int | str, description: str
    ) -> bool:
        _require(
            "assert_exit_code",
            expected_code=expected_code,
            actual_code=actual_code,
            description=description,
        )
        return self._evaluate(
            description, lambda: check_exit_code(expected_code, actual_code)
        )

    def command_succeeded(self, status: int | str, description: str) -> bool:
        _require("assert_success", status=status, description=description)
        return self._evaluate(description, lambda: check_command_succeeded(status))
