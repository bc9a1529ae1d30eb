from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from junitparser import Failure, TestCase, TestSuite

_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


def _seconds(milliseconds: int) -> float:
    return milliseconds / 1000


def build_testsuite(report: dict[str, Any]) -> TestSuite:
    """Build a single JUnit ``testsuite`` from the report document."""
    suite = TestSuite(report["testSuite"])

    for test in report["tests"]:
        case = TestCase(test["name"])
        case.time = _seconds(test["duration"])
        if test["status"] == "failed":
            message = test.get("message", "")
            failure = Failure(message)
            failure.text = message
            case.result = [failure]
        suite.add_testcase(case)

    # add_testcase recomputes the statistics, so the run-level values go last
    summary = report["summary"]
    suite.tests = summary["total"]
    suite.failures = summary["failed"]
    suite.time = _seconds(report["duration"])
    suite.timestamp = report["timestamp"]
    return suite


def _escape_carriage_returns(xml: str) -> str:
    # A raw \r in text content is read back as \n; attributes are already escaped.
    return xml.replace("\r", "&#13;")


def to_junit(report: dict[str, Any]) -> str:
    """Serialize the report as an indented JUnit XML document.

    Newlines, tabs and carriage returns in failure messages survive a parse
    of the output, in the ``message`` attribute and in the element text.
    """
    suite = build_testsuite(report)
    root = ET.fromstring(suite.tostring().replace(b"\r", b"&#13;"))
    ET.indent(root, space="  ")
    return _XML_DECLARATION + _escape_carriage_returns(
        ET.tostring(root, encoding="unicode")
    )
