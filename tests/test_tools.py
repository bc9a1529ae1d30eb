"""Tests for host text-tool detection and the search/edit capabilities."""

import pytest

from scriptunit import tools
from scriptunit.errors import FrameworkError
from scriptunit.tools import TextTools, detect_text_tools


def _which_only(*names):
    return lambda name: f"/usr/bin/{name}" if name in names else None


def test_detect_linux(monkeypatch):
    monkeypatch.setattr(tools.shutil, "which", _which_only("grep", "sed"))
    detected = detect_text_tools("Linux")
    assert detected == TextTools(grep="grep", sed="sed", system="Linux")


def test_detect_linux_missing_grep(monkeypatch):
    monkeypatch.setattr(tools.shutil, "which", _which_only("sed"))
    with pytest.raises(FrameworkError, match="grep command not found"):
        detect_text_tools("Linux")


def test_detect_linux_missing_sed(monkeypatch):
    monkeypatch.setattr(tools.shutil, "which", _which_only("grep"))
    with pytest.raises(FrameworkError, match="sed command not found"):
        detect_text_tools("Linux")


def test_detect_macos_prefers_homebrew(monkeypatch):
    monkeypatch.setattr(
        tools, "_is_executable", lambda path: path.startswith("/opt/homebrew/bin/")
    )
    monkeypatch.setattr(tools.shutil, "which", _which_only())
    detected = detect_text_tools("Darwin")
    assert detected.grep == "/opt/homebrew/bin/ggrep"
    assert detected.sed == "/opt/homebrew/bin/gsed"
    assert detected.system == "Darwin"


def test_detect_macos_falls_back_to_path(monkeypatch):
    monkeypatch.setattr(tools, "_is_executable", lambda path: False)
    monkeypatch.setattr(tools.shutil, "which", _which_only("ggrep", "gsed"))
    detected = detect_text_tools("Darwin")
    assert (detected.grep, detected.sed) == ("ggrep", "gsed")


def test_detect_macos_without_gnu_grep(monkeypatch):
    monkeypatch.setattr(tools, "_is_executable", lambda path: False)
    monkeypatch.setattr(tools.shutil, "which", _which_only("gsed"))
    with pytest.raises(FrameworkError, match="brew install grep"):
        detect_text_tools("Darwin")


def test_detect_macos_without_gnu_sed(monkeypatch):
    monkeypatch.setattr(tools, "_is_executable", lambda path: False)
    monkeypatch.setattr(tools.shutil, "which", _which_only("ggrep"))
    with pytest.raises(FrameworkError, match="brew install gnu-sed"):
        detect_text_tools("Darwin")


def test_detect_unsupported_platform():
    with pytest.raises(FrameworkError, match="Unsupported operating system: Windows"):
        detect_text_tools("Windows")


def test_detect_uses_platform_system(monkeypatch):
    monkeypatch.setattr(tools.platform, "system", lambda: "SunOS")
    with pytest.raises(FrameworkError, match="SunOS"):
        detect_text_tools()


# --- TextTools against the host grep/sed ---


def test_search_literal(text_tools, sample_file):
    assert text_tools.search("config=enabled", sample_file) is True
    assert text_tools.search("multiple lines", sample_file) is True
    assert text_tools.search("c.nfig", sample_file) is False


def test_search_pattern_starting_with_dash(text_tools, tmp_path):
    path = tmp_path / "flags.txt"
    path.write_text("run with --force\n")
    assert text_tools.search("--force", path) is True


def test_search_missing_file(text_tools, tmp_path, caplog):
    with caplog.at_level("WARNING", logger="scriptunit.tools"):
        assert text_tools.search("anything", tmp_path / "missing.txt") is False
    assert "could not search" in caplog.text


def test_stream_edit(text_tools, sample_file):
    edited = text_tools.stream_edit("s/^/> /", sample_file)
    assert edited.splitlines() == [
        "> This is a test file",
        "> It contains multiple lines",
        "> config=enabled",
    ]
    assert "> " not in sample_file.read_text()
