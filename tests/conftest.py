"""Pytest configuration and fixtures."""

import logging
import shutil

import pytest

from scriptunit.runner import Runner
from scriptunit.tools import TextTools


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from scriptunit loggers after each test."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("scriptunit"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's TEST_* variables out of configuration resolution."""
    for var in ("TEST_OUTPUT_FORMAT", "TEST_QUIET_MODE", "TEST_DEBUG_LOG"):
        monkeypatch.delenv(var, raising=False)


class FrozenClock:
    """Clock that advances a fixed step on every read."""

    def __init__(self, start_ms: int = 1_700_000_000_000, step_ms: int = 5):
        self.current = start_ms
        self.step_ms = step_ms

    def now_ms(self) -> int:
        value = self.current
        self.current += self.step_ms
        return value

    def timestamp(self) -> str:
        return "2024-01-15T10:30:00+0000"


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def text_tools():
    """Host grep/sed; these tests only run where GNU-compatible tools exist."""
    if not (shutil.which("grep") and shutil.which("sed")):
        pytest.skip("grep and sed are required")
    return TextTools(grep="grep", sed="sed", system="Linux")


@pytest.fixture
def make_runner(tmp_path, monkeypatch, clock, text_tools):
    """Build an initialized Runner writing default reports into tmp_path."""
    monkeypatch.chdir(tmp_path)

    def _make(*argv: str, environ: dict | None = None) -> Runner:
        runner = Runner(script_name="demo_checks.py", tools=text_tools, clock=clock)
        return runner.initialize(list(argv), environ or {})

    return _make


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("This is a test file\nIt contains multiple lines\nconfig=enabled\n")
    return path
