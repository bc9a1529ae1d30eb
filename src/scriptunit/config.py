from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, field_validator

FORMAT_ENV = "TEST_OUTPUT_FORMAT"
QUIET_ENV = "TEST_QUIET_MODE"
DEBUG_LOG_ENV = "TEST_DEBUG_LOG"

STDOUT_DESTINATION = "-"

_TRUTHY = {"true", "1", "yes"}


class ReportFormat(str, Enum):
    NONE = "none"
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    JUNIT = "junit"


FORMAT_EXTENSIONS: dict[ReportFormat, str] = {
    ReportFormat.NONE: "txt",
    ReportFormat.JSON: "json",
    ReportFormat.YAML: "yaml",
    ReportFormat.CSV: "csv",
    ReportFormat.JUNIT: "xml",
}


class ReportConfiguration(BaseModel):
    """Resolved run options; immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Unrecognized formats stay plain strings and are rejected at finalize.
    format: ReportFormat | str = ReportFormat.NONE
    destination: Path | None = None
    quiet: bool = False
    verbose: bool = False
    debug_log: Path | None = None

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        if isinstance(v, ReportFormat):
            return v
        value = str(v).strip().lower()
        try:
            return ReportFormat(value)
        except ValueError:
            return value

    @property
    def format_name(self) -> str:
        if isinstance(self.format, ReportFormat):
            return self.format.value
        return self.format

    @property
    def is_supported_format(self) -> bool:
        return isinstance(self.format, ReportFormat)

    @property
    def writes_report(self) -> bool:
        return self.format != ReportFormat.NONE

    @property
    def writes_to_stdout(self) -> bool:
        return str(self.destination) == STDOUT_DESTINATION

    def resolve_output(
        self, script_name: str, directory: Path | None = None
    ) -> Path | None:
        """Return the report file path, or None when nothing goes to a file."""
        if not self.writes_report or self.writes_to_stdout:
            return None
        if self.destination is not None:
            return self.destination
        return default_output_path(self.format, script_name, directory)


def default_output_path(
    format: ReportFormat | str, script_name: str, directory: Path | None = None
) -> Path:
    """Return ``test-results-<script stem>.<ext>`` in *directory* (default: cwd)."""
    extension = FORMAT_EXTENSIONS.get(format, "txt")  # type: ignore[arg-type]
    base_name = Path(script_name).stem or "script"
    return (directory or Path.cwd()) / f"test-results-{base_name}.{extension}"


_VALUE_FLAGS = {"--format": "format", "--output": "destination"}
_SWITCH_FLAGS = {"--quiet": "quiet", "-q": "quiet", "--verbose": "verbose", "-v": "verbose"}


def parse_arguments(argv: Sequence[str]) -> dict[str, Any]:
    """Extract recognized options from *argv*; anything else is ignored.

    Supports ``--format=F``/``--format F``, ``--output=PATH``/``--output PATH``,
    ``--quiet``/``-q`` and ``--verbose``/``-v``.
    """
    options: dict[str, Any] = {}
    args = list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        flag, sep, inline_value = arg.partition("=")
        if flag in _VALUE_FLAGS:
            if sep:
                options[_VALUE_FLAGS[flag]] = inline_value
            elif i + 1 < len(args):
                options[_VALUE_FLAGS[flag]] = args[i + 1]
                i += 1
        elif arg in _SWITCH_FLAGS:
            options[_SWITCH_FLAGS[arg]] = True
        i += 1
    return options


def resolve_configuration(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ReportConfiguration:
    """Build a ReportConfiguration: arguments > environment > defaults."""
    environ = os.environ if environ is None else environ

    settings: dict[str, Any] = {}
    if environ.get(FORMAT_ENV):
        settings["format"] = environ[FORMAT_ENV]
    if environ.get(QUIET_ENV):
        settings["quiet"] = environ[QUIET_ENV].strip().lower() in _TRUTHY
    if environ.get(DEBUG_LOG_ENV):
        settings["debug_log"] = environ[DEBUG_LOG_ENV]

    settings.update(parse_arguments(argv or []))
    return ReportConfiguration(**settings)
