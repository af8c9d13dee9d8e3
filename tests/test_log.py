"""Tests for the shared in-memory log."""

from __future__ import annotations

from pathlib import Path

from core.log import Log, LogManager


def test_debug_respects_verbosity(verbose_log) -> None:
    """Messages above the current verbosity are dropped."""

    verbose_log.set_verbosity(1)
    start = verbose_log.count()
    verbose_log.debug("kept", 1)
    verbose_log.debug("dropped", 2)

    assert verbose_log.count() == start + 1
    assert verbose_log.get(-1)[1] == "[test_log.py] kept"


def test_instances_share_entries(verbose_log) -> None:
    other = LogManager(verbosity=0)
    other.add("from another manager")
    assert Log.messages()[-1] == "from another manager"


def test_clear_leaves_marker(verbose_log) -> None:
    verbose_log.add("something")
    verbose_log.clear()
    assert verbose_log.messages() == ["Log cleared"]


def test_write_to_file(verbose_log, tmp_path: Path) -> None:
    verbose_log.add("line one")
    target = tmp_path / "flowpad.log"

    assert verbose_log.write_to_file(str(target)) is True
    content = target.read_text(encoding="utf-8")
    assert "line one" in content
    assert content.startswith("[")


def test_write_to_file_failure_is_logged(verbose_log, tmp_path: Path) -> None:
    target = tmp_path / "missing" / "dir" / "flowpad.log"
    assert verbose_log.write_to_file(str(target)) is False
    assert verbose_log.messages()[-1].startswith("Failed to write log")
