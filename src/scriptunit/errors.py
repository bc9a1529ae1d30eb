"""Fatal framework errors, distinct from failed checks."""

from __future__ import annotations

from typing import NoReturn

import typer

FATAL_EXIT_CODE = 2


class FrameworkError(RuntimeError):
    """Misuse of the framework or an unusable host environment.

    Never recorded as a failed check: the run is aborted and no report is
    produced.
    """


class UnsupportedFormatError(FrameworkError):
    """The configured report format has no serializer."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(
            f"Unsupported output format: {format_name!r}. "
            "Supported: none, json, yaml, csv, junit"
        )


def fatal(error: FrameworkError) -> NoReturn:
    """Report *error* on stderr and abort the process."""
    typer.echo(f"❌ ERROR: {error}", err=True)
    raise SystemExit(FATAL_EXIT_CODE) from error
