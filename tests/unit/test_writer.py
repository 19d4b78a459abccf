"""Unit tests for atomic output writing."""

import os

import pytest

from norm.writer import write_atomic


def test_writes_new_file(tmp_path):
    target = tmp_path / "out" / "db.py"
    write_atomic(target, "x = 1\n")
    assert target.read_text() == "x = 1\n"
    assert list(target.parent.iterdir()) == [target]


def test_replaces_existing_file(tmp_path):
    target = tmp_path / "db.py"
    target.write_text("old\n")
    write_atomic(target, "new\n")
    assert target.read_text() == "new\n"


def test_failed_write_leaves_target_untouched(tmp_path, monkeypatch):
    target = tmp_path / "db.py"
    target.write_text("old\n")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)
    with pytest.raises(OSError, match="disk full"):
        write_atomic(target, "new\n")

    assert target.read_text() == "old\n"
    # No temporary file is left behind
    assert list(tmp_path.iterdir()) == [target]
