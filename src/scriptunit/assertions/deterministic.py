"""Check predicates: string, file and exit-code conditions."""

from __future__ import annotations

import logging
from pathlib import Path

from scriptunit.assertions.base import AssertionResult
from scriptunit.errors import FrameworkError
from scriptunit.tools import TextTools

logger = logging.getLogger(__name__)

# Indent for dumped file contents, on top of the detail indent.
_CONTENT_INDENT_SCRIPT = "s/^/  /"


def _as_exit_code(value: int | str, role: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise FrameworkError(f"{role} exit code must be an integer, got {value!r}") from e


def check_equals(expected: str, actual: str) -> AssertionResult:
    """Exact text equality."""
    expected, actual = str(expected), str(actual)
    if expected == actual:
        return AssertionResult(passed=True)
    return AssertionResult(
        passed=False,
        message=f"Expected: '{expected}', Got: '{actual}'",
        details=[f"Expected: '{expected}'", f"Got:      '{actual}'"],
    )


def check_contains(haystack: str, needle: str) -> AssertionResult:
    """Literal substring containment; an empty needle always matches."""
    haystack, needle = str(haystack), str(needle)
    if needle in haystack:
        return AssertionResult(passed=True)
    return AssertionResult(
        passed=False,
        message=f"Expected to find: '{needle}' in '{haystack}'",
        details=[f"Expected to find: '{needle}'", f"In string:        '{haystack}'"],
    )


def check_file_contains(
    tools: TextTools, path: str | Path, pattern: str, dump_contents: bool = True
) -> AssertionResult:
    """Fixed-string search for *pattern* inside *path*.

    On failure the file contents are added to the details only when
    *dump_contents* is set, so a quiet run skips the extra sed call.
    """
    logger.debug(f"Searching {path} for '{pattern}'")
    if tools.search(pattern, path):
        return AssertionResult(passed=True)

    details = [f"Expected to find: '{pattern}' in file: {path}"]
    if dump_contents and Path(path).is_file():
        details.append("File contents:")
        details.extend(tools.stream_edit(_CONTENT_INDENT_SCRIPT, path).splitlines())
    return AssertionResult(
        passed=False,
        message=f"Pattern '{pattern}' not found in file",
        details=details,
    )


def check_file_not_contains(
    tools: TextTools, path: str | Path, pattern: str
) -> AssertionResult:
    """Pass when the fixed-string search for *pattern* in *path* finds nothing."""
    logger.debug(f"Searching {path} for unexpected '{pattern}'")
    if not tools.search(pattern, path):
        return AssertionResult(passed=True)
    return AssertionResult(
        passed=False,
        message=f"Unexpected pattern '{pattern}' found in file",
        details=[f"Did not expect to find: '{pattern}' in file: {path}"],
    )


def check_file_exists(path: str | Path) -> AssertionResult:
    """*path* must be an existing regular file."""
    if Path(path).is_file():
        return AssertionResult(passed=True)
    return AssertionResult(
        passed=False,
        message=f"File does not exist: {path}",
        details=[f"File does not exist: {path}"],
    )


def check_exit_code(expected_code: int | str, actual_code: int | str) -> AssertionResult:
    expected = _as_exit_code(expected_code, "expected")
    actual = _as_exit_code(actual_code, "actual")
    if actual == expected:
        return AssertionResult(passed=True)
    return AssertionResult(
        passed=False,
        message=f"Expected exit code: {expected}, Got: {actual}",
        details=[f"Expected exit code: {expected}", f"Got exit code:      {actual}"],
    )


def check_command_succeeded(status: int | str) -> AssertionResult:
    """The caller-supplied exit status must be zero."""
    if _as_exit_code(status, "command") == 0:
        return AssertionResult(passed=True)
    return AssertionResult(passed=False, message="Command returned non-zero exit code")
