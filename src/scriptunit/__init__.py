"""Assertions and multi-format test reports for ad-hoc scripts.

Typical use::

    import sys
    from scriptunit import initialize

    with initialize(sys.argv[1:]) as run:
        run.header("Smoke tests")
        run.assert_equals("hello", greeting(), "greeting is stable")
"""

from scriptunit.config import ReportConfiguration, ReportFormat
from scriptunit.errors import FATAL_EXIT_CODE, FrameworkError, UnsupportedFormatError
from scriptunit.reporting import escape_json, escape_xml
from scriptunit.results import CheckOutcome, CheckStatus, Run, RunSummary
from scriptunit.runner import Runner, RunState, initialize

__all__ = [
    "FATAL_EXIT_CODE",
    "CheckOutcome",
    "CheckStatus",
    "FrameworkError",
    "ReportConfiguration",
    "ReportFormat",
    "Run",
    "RunState",
    "RunSummary",
    "Runner",
    "UnsupportedFormatError",
    "escape_json",
    "escape_xml",
    "initialize",
]
