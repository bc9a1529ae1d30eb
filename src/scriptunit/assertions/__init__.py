"""Assertion system: check predicates and the recording engine."""

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
from scriptunit.assertions.engine import AssertionEngine

__all__ = [
    "AssertionEngine",
    "AssertionResult",
    "check_command_succeeded",
    "check_contains",
    "check_equals",
    "check_exit_code",
    "check_file_contains",
    "check_file_exists",
    "check_file_not_contains",
]
