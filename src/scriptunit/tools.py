"""Host text tools: fixed-string file search and line-oriented stream editing."""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from scriptunit.errors import FrameworkError

logger = logging.getLogger(__name__)

_HOMEBREW_PREFIXES = ("/opt/homebrew/bin", "/usr/local/bin")


@dataclass(frozen=True)
class TextTools:
    """Resolved grep/sed commands for the current host."""

    grep: str
    sed: str
    system: str

    def search(self, pattern: str, path: str | Path) -> bool:
        """Return True if *pattern* occurs literally (case-sensitive) in *path*."""
        result = subprocess.run(
            [self.grep, "-qF", "--", pattern, str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode > 1:
            logger.warning(
                f"{self.grep} could not search {path} (exit code {result.returncode}): "
                f"{result.stderr.strip()}"
            )
        return result.returncode == 0

    def stream_edit(self, script: str, path: str | Path) -> str:
        """Run a sed script over *path* and return the edited lines."""
        result = subprocess.run(
            [self.sed, "-e", script, str(path)],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.warning(
                f"{self.sed} failed on {path} (exit code {result.returncode}): "
                f"{result.stderr.strip()}"
            )
        return result.stdout


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _find_gnu_tool(name: str) -> str | None:
    """Locate a Homebrew-installed GNU tool such as ``ggrep`` or ``gsed``."""
    for prefix in _HOMEBREW_PREFIXES:
        candidate = f"{prefix}/{name}"
        if _is_executable(candidate):
            return candidate
    if shutil.which(name):
        return name
    return None


def detect_text_tools(system: str | None = None) -> TextTools:
    """Resolve GNU grep and sed for the host operating system.

    Raises FrameworkError on unsupported platforms or when a tool is missing.
    """
    system = system or platform.system()
    logger.debug(f"Detecting text tools for {system}")

    if system == "Darwin":
        grep = _find_gnu_tool("ggrep")
        if grep is None:
            raise FrameworkError(
                "GNU grep is not installed. On macOS install it with: brew install grep"
            )
        sed = _find_gnu_tool("gsed")
        if sed is None:
            raise FrameworkError(
                "GNU sed is not installed. On macOS install it with: brew install gnu-sed"
            )
    elif system == "Linux":
        if not shutil.which("grep"):
            raise FrameworkError("grep command not found")
        if not shutil.which("sed"):
            raise FrameworkError("sed command not found")
        grep, sed = "grep", "sed"
    else:
        raise FrameworkError(
            f"Unsupported operating system: {system}. "
            "Only Linux and macOS are supported"
        )

    logger.debug(f"Using grep={grep} sed={sed}")
    return TextTools(grep=grep, sed=sed, system=system)
