"""Colored console narration and the human-readable run summary."""

from __future__ import annotations

from pathlib import Path

import typer

from scriptunit.results import RunSummary

RULE = "━" * 49


def console_summary_lines(
    summary: RunSummary, title: str
) -> list[tuple[str, str | None]]:
    """Return the console summary as ``(text, color)`` lines.

    The all-passed banner needs at least one passed check and no failures.
    """
    lines: list[tuple[str, str | None]] = [
        ("", None),
        (RULE, typer.colors.BLUE),
        (f"📊 TEST SUMMARY {title}", typer.colors.BLUE),
        (RULE, typer.colors.BLUE),
        (f"Total tests run: {summary.total}", None),
        (f"Tests passed: {summary.passed}", typer.colors.GREEN),
        (
            f"Tests failed: {summary.failed}",
            typer.colors.RED if summary.failed > 0 else None,
        ),
    ]
    if summary.all_passed:
        lines.append(("", None))
        lines.append(("✅ All tests passed!", typer.colors.GREEN))
    lines.append((RULE, typer.colors.BLUE))
    lines.append(("", None))
    return lines


def render_console_summary(summary: RunSummary, title: str) -> str:
    return "\n".join(text for text, _ in console_summary_lines(summary, title))


class Narrator:
    """Per-check console feedback; silent when quiet."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def _echo(self, text: str = "", fg: str | None = None) -> None:
        if not self.quiet:
            typer.secho(text, fg=fg)

    def header(self, name: str) -> None:
        self._echo()
        self._echo(RULE, typer.colors.BLUE)
        self._echo(name, typer.colors.BLUE)
        self._echo(RULE, typer.colors.BLUE)
        self._echo()

    def section(self, title: str) -> None:
        self._echo()
        self._echo(f"▶ {title}", typer.colors.CYAN)

    def test_name(self, number: int, label: str) -> None:
        self._echo(f"  TEST {number}: {label}", typer.colors.YELLOW)

    def passed(self, description: str) -> None:
        self._echo(f"  ✓ PASSED: {description}", typer.colors.GREEN)

    def failed(self, description: str, details: list[str]) -> None:
        self._echo(f"  ✗ FAILED: {description}", typer.colors.RED)
        for line in details:
            self._echo(f"    {line}", typer.colors.RED)

    def environment(self, system: str, grep: str, sed: str) -> None:
        self._echo(f"Detected {'macOS' if system == 'Darwin' else system} system")
        if system == "Linux":
            self._echo("✓ Using system grep (GNU)")
            self._echo("✓ Using system sed (GNU)")
        else:
            self._echo(f"✓ Found GNU grep: {grep}")
            self._echo(f"✓ Found GNU sed: {sed}")
        self._echo()

    def summary(self, summary: RunSummary, title: str) -> None:
        for text, fg in console_summary_lines(summary, title):
            self._echo(text, fg)

    def report_written(self, path: Path) -> None:
        self._echo()
        self._echo(f"✓ Test results written to: {path}", typer.colors.GREEN)
