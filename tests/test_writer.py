"""Tests for mdjavadoc.writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdjavadoc.writer import FileWriter, render_diff


def test_read_and_write_keep_line_endings(tmp_path: Path) -> None:
    target = tmp_path / "A.java"
    target.write_bytes(b"class A {\r\n}\n")
    writer = FileWriter()

    content = writer.read(target)
    writer.write(target, content)

    assert content == "class A {\r\n}\n"
    assert target.read_bytes() == b"class A {\r\n}\n"


def test_read_raises_for_undecodable_file(tmp_path: Path) -> None:
    target = tmp_path / "A.java"
    target.write_bytes(b"\xff\xfe")

    with pytest.raises(UnicodeDecodeError):
        FileWriter().read(target)


def test_render_diff_marks_changed_lines(tmp_path: Path) -> None:
    diff = render_diff(tmp_path / "A.java", "/** A. */\nclass A {}\n", "/// A.\nclass A {}\n")

    assert "(original)" in diff
    assert "(converted)" in diff
    assert "-/** A. */" in diff
    assert "+/// A." in diff
    assert " class A {}" in diff
