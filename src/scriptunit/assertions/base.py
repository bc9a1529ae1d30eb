"""Base data structures for the assertion system."""

from dataclasses import dataclass, field


@dataclass
class AssertionResult:
    """Result of evaluating a single check predicate.

    Attributes:
        passed: Whether the condition held.
        message: Failure diagnostic recorded in reports; empty when passed.
        details: Extra console lines shown under a failed check.
    """

    passed: bool
    message: str = ""
    details: list[str] = field(default_factory=list)
