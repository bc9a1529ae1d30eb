"""Example check script.

Run it directly or through ``scriptunit example``::

    python -m scriptunit.example --format=json
    python -m scriptunit.example --format=junit --output=results.xml
    python -m scriptunit.example --quiet
"""

from __future__ import annotations

import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Mapping, Sequence

from scriptunit.runner import initialize

SCRIPT_NAME = "example_checks.py"


def run_example(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    run = initialize(argv, environ, script_name=SCRIPT_NAME)
    run.header("scriptunit - Example Checks")

    run.section("String Equality Tests")
    run.assert_equals("hello", "hello", "Should match identical strings")
    run.assert_equals("123", "123", "Should match identical numbers as strings")
    run.assert_equals("", "", "Should match empty strings")

    run.section("String Contains Tests")
    run.assert_contains("hello world", "world", "Should find 'world' in 'hello world'")
    run.assert_contains("The quick brown fox", "quick", "Should find 'quick' in sentence")
    run.assert_contains("test123test", "123", "Should find numbers in string")

    run.section("File Operations Tests")
    with tempfile.TemporaryDirectory() as tmpdir:
        test_file = Path(tmpdir) / "sample.txt"
        test_file.write_text(
            "This is a test file\nIt contains multiple lines\nconfig=enabled\n"
        )
        run.assert_file_exists(test_file, "Temporary test file should exist")
        run.assert_file_contains(test_file, "test file", "File should contain 'test file'")
        run.assert_file_contains(
            test_file, "config=enabled", "File should contain config line"
        )
        run.assert_file_not_contains(
            test_file, "nonexistent", "File should not contain 'nonexistent'"
        )

    run.section("Exit Code Tests")
    completed = subprocess.run([sys.executable, "-c", "pass"], check=False)
    run.assert_success(completed.returncode, "Interpreter should start cleanly")
    completed = subprocess.run(
        [sys.executable, "-c", "raise SystemExit(3)"], check=False
    )
    run.assert_exit_code(3, completed.returncode, "Exit code should be propagated")

    return run.finalize()


if __name__ == "__main__":
    sys.exit(run_example())
