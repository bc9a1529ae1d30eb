from __future__ import annotations

import functools
import inspect
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence, TypeVar

import typer

from scriptunit.assertions.engine import AssertionEngine
from scriptunit.clock import Clock
from scriptunit.config import ReportConfiguration, resolve_configuration
from scriptunit.errors import FrameworkError, fatal
from scriptunit.reporting import Narrator, build_report, serialize, write_report
from scriptunit.results import CheckOutcome, CheckStatus, ResultRecorder, Run, RunSummary
from scriptunit.tools import TextTools, detect_text_tools
from scriptunit.verbose import setup_logger

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class RunState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    FINALIZED = "finalized"


def _fatal_on_misuse(method: F) -> F:
    """Turn a FrameworkError into an immediate process abort.

    Calls that leave out a required argument abort the same way, before the
    method body runs.
    """
    signature = inspect.signature(method)

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            try:
                signature.bind(*args, **kwargs)
            except TypeError as e:
                raise FrameworkError(f"{method.__name__}: {e}") from e
            return method(*args, **kwargs)
        except FrameworkError as e:
            logger.error(f"Aborting run: {e}")
            fatal(e)

    return wrapper  # type: ignore[return-value]


def _invoking_script_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "script"


class Runner:
    """Owns one run from initialization to finalize.

    Checks mutate the run only through the ResultRecorder; finalize reads it
    to print the summary, write the structured report and pick the exit status.
    """

    def __init__(
        self,
        script_name: str | None = None,
        tools: TextTools | None = None,
        clock: Clock | None = None,
    ):
        self.script_name = script_name or _invoking_script_name()
        self.tools = tools
        self.clock = clock or Clock()
        self.config = ReportConfiguration()
        self.run = Run()
        self.recorder = ResultRecorder(self.run)
        self.narrator = Narrator()
        self.state = RunState.UNINITIALIZED
        self._engine: AssertionEngine | None = None

    def __enter__(self) -> Runner:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            return False
        raise SystemExit(self.finalize())

    @property
    def summary(self) -> RunSummary:
        return self.run.summary

    @_fatal_on_misuse
    def initialize(
        self,
        argv: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Runner:
        """Resolve options, configure logging and locate the host text tools."""
        if self.state is not RunState.UNINITIALIZED:
            raise FrameworkError("initialize() may only be called once per run")

        self.config = resolve_configuration(argv, environ)
        if self.config.debug_log is not None or self.config.verbose:
            setup_logger(self.config.debug_log, verbose=self.config.verbose)
        self.narrator = Narrator(quiet=self.config.quiet)

        if self.tools is None:
            self.tools = detect_text_tools()
            self.narrator.environment(self.tools.system, self.tools.grep, self.tools.sed)

        self._engine = AssertionEngine(
            recorder=self.recorder,
            narrator=self.narrator,
            tools=self.tools,
            clock=self.clock,
        )
        self.state = RunState.INITIALIZED
        logger.info(
            f"Initialized run for {self.script_name}: format={self.config.format_name} "
            f"destination={self.config.destination} quiet={self.config.quiet}"
        )
        return self

    def _require_initialized(self, operation: str) -> None:
        if self.state is RunState.UNINITIALIZED:
            raise FrameworkError(f"{operation}() called before initialize()")

    def _checking(self, operation: str) -> AssertionEngine:
        self._require_initialized(operation)
        if self.state is RunState.FINALIZED:
            raise FrameworkError(f"{operation}() called after the run was finalized")
        self.state = RunState.RUNNING
        assert self._engine is not None
        return self._engine

    @_fatal_on_misuse
    def header(self, name: str) -> None:
        """Name the suite and start the run clock."""
        self._require_initialized("header")
        if not name:
            raise FrameworkError("header requires a suite name")
        self.narrator.header(name)
        self.run.suite_name = name
        self.run.ensure_started(self.clock.now_ms())

    @_fatal_on_misuse
    def section(self, title: str) -> None:
        self._require_initialized("section")
        self.narrator.section(title)

    @_fatal_on_misuse
    def test_name(self, label: str) -> None:
        self._require_initialized("test_name")
        self.narrator.test_name(self.run.total_count + 1, label)

    @_fatal_on_misuse
    def assert_equals(self, expected: str, actual: str, description: str) -> bool:
        return self._checking("assert_equals").equals(expected, actual, description)

    @_fatal_on_misuse
    def assert_contains(self, haystack: str, needle: str, description: str) -> bool:
        return self._checking("assert_contains").contains(haystack, needle, description)

    @_fatal_on_misuse
    def assert_file_contains(
        self, path: str | Path, pattern: str, description: str
    ) -> bool:
        return self._checking("assert_file_contains").file_contains(
            path, pattern, description
        )

    @_fatal_on_misuse
    def assert_file_not_contains(
        self, path: str | Path, pattern: str, description: str
    ) -> bool:
        return self._checking("assert_file_not_contains").file_not_contains(
            path, pattern, description
        )

    @_fatal_on_misuse
    def assert_file_exists(self, path: str | Path, description: str) -> bool:
        return self._checking("assert_file_exists").file_exists(path, description)

    @_fatal_on_misuse
    def assert_exit_code(
        self, expected_code: int | str, actual_code: int | str, description: str
    ) -> bool:
        return self._checking("assert_exit_code").exit_code_equals(
            expected_code, actual_code, description
        )

    @_fatal_on_misuse
    def assert_success(self, status: int | str, description: str) -> bool:
        """Pass when *status*, the exit status of a command the caller ran, is 0."""
        return self._checking("assert_success").command_succeeded(status, description)

    @_fatal_on_misuse
    def record(
        self,
        status: CheckStatus | str,
        description: str,
        message: str = "",
        duration_ms: int = 0,
    ) -> CheckOutcome:
        """Record an outcome computed outside the built-in checks."""
        self._checking("record")
        self.run.ensure_started(self.clock.now_ms())
        return self.recorder.record(status, description, message, duration_ms)

    @_fatal_on_misuse
    def finalize(self) -> int:
        """Print the summary, emit the structured report and return the exit status.

        Returns 0 when no check failed (an empty run included), otherwise 1.
        """
        self._require_initialized("finalize")
        finished = self.clock.now_ms()
        self.run.ensure_started(finished)
        summary = self.run.summary

        self.narrator.summary(summary, self.script_name)

        if self.config.writes_report:
            report = build_report(self.run, finished, self.clock.timestamp())
            content = serialize(report, self.config.format)
            output = self.config.resolve_output(self.script_name)
            if output is None:
                typer.echo(content, nl=False)
            else:
                write_report(output, content)
                self.narrator.report_written(output)
            logger.info(
                f"Emitted {self.config.format_name} report to {output or 'stdout'}"
            )

        self.state = RunState.FINALIZED
        status = 0 if summary.failed == 0 else 1
        logger.info(
            f"Run finished: {summary.passed}/{summary.total} passed, exit status {status}"
        )
        return status

    def exit(self) -> None:
        """Finalize and terminate the process with the run's exit status."""
        sys.exit(self.finalize())


def initialize(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    *,
    script_name: str | None = None,
    tools: TextTools | None = None,
    clock: Clock | None = None,
) -> Runner:
    """Create and initialize a Runner; *argv* defaults to ``sys.argv[1:]``."""
    if argv is None:
        argv = sys.argv[1:]
    runner = Runner(script_name=script_name, tools=tools, clock=clock)
    return runner.initialize(argv, environ)
