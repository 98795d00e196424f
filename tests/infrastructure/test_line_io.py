"""
Tests for infrastructure/line_io.py: reading files into SortableLines and
writing them back.

Uses tmp_path (pytest built-in) for file system operations.
"""
import gzip
import os
import stat

import pytest

from core import Comment, LineEndingError, SortableLine
from infrastructure.line_io import (
    FIRST_CHUNK_SIZE,
    backup_file,
    determine_line_ending,
    format_lines,
    lines_from_text,
    read_line_file,
    replace_file,
    write_lines,
)


# ===========================================================
# determine_line_ending
# ===========================================================

class TestDetermineLineEnding:

    @pytest.mark.parametrize("data, expected", [
        (b"a\r\nb\r\n", "\r\n"),
        (b"a\nb\n", "\n"),
        (b"a\rb\r", "\r"),
        (b"a\nb\r\n", "\r\n"),
    ])
    def test_detected(self, data, expected):
        assert determine_line_ending(data) == expected

    def test_no_line_ending(self):
        with pytest.raises(LineEndingError):
            determine_line_ending(b"just one line")

    def test_only_the_first_chunk_is_searched(self):
        with pytest.raises(LineEndingError):
            determine_line_ending(b"x" * FIRST_CHUNK_SIZE + b"\n")


# ===========================================================
# lines_from_text
# ===========================================================

class TestLinesFromText:

    def test_plain_lines(self):
        lines, has_empty, trailing = lines_from_text("b\na\n", "\n")
        assert lines == [SortableLine(1, "b"), SortableLine(2, "a")]
        assert not has_empty
        assert trailing is None

    def test_missing_final_newline(self):
        lines, _, _ = lines_from_text("b\na", "\n")
        assert [line.line for line in lines] == ["b", "a"]

    def test_empty_lines_are_dropped_and_reported(self):
        lines, has_empty, _ = lines_from_text("b\n\na\n", "\n")
        assert lines == [SortableLine(1, "b"), SortableLine(3, "a")]
        assert has_empty

    def test_comment_attaches_to_next_line(self):
        lines, has_empty, _ = lines_from_text("b\n# about a\n# more\na\n", "\n", "#")
        assert lines[1] == SortableLine(4, "a", Comment(("# about a", "# more"), False))
        assert lines[0].comment is None
        assert not has_empty

    def test_empty_line_before_comment_is_kept(self):
        lines, has_empty, _ = lines_from_text("b\n\n# about a\na\n", "\n", "#")
        assert lines[1].comment == Comment(("# about a",), True)
        assert not has_empty

    def test_indented_comment(self):
        lines, _, _ = lines_from_text("  # note\na\n", "\n", "#")
        assert lines == [SortableLine(2, "a", Comment(("  # note",), False))]

    def test_without_prefix_comments_are_lines(self):
        lines, _, _ = lines_from_text("# note\na\n", "\n")
        assert [line.line for line in lines] == ["# note", "a"]

    def test_trailing_comment(self):
        lines, _, trailing = lines_from_text("a\n\n# the end\n", "\n", "#")
        assert [line.line for line in lines] == ["a"]
        assert trailing == Comment(("# the end",), True)

    def test_crlf(self):
        lines, _, _ = lines_from_text("b\r\na\r\n", "\r\n")
        assert [line.line for line in lines] == ["b", "a"]


# ===========================================================
# format_lines / write_lines
# ===========================================================

class TestFormatLines:

    def test_plain(self):
        lines = [SortableLine(2, "a"), SortableLine(1, "b")]
        assert format_lines(lines, "\n") == "a\nb\n"

    def test_keeps_line_ending(self):
        lines = [SortableLine(1, "a"), SortableLine(2, "b")]
        assert format_lines(lines, "\r\n") == "a\r\nb\r\n"

    def test_comments_precede_their_line(self):
        lines = [
            SortableLine(3, "a", Comment(("# about a",), True)),
            SortableLine(1, "b", Comment(("# about b",), True)),
        ]
        # The block that lands first loses its leading empty line.
        assert format_lines(lines, "\n") == "# about a\na\n\n# about b\nb\n"

    def test_trailing_comment(self):
        lines = [SortableLine(1, "a")]
        trailing = Comment(("# the end",), True)
        assert format_lines(lines, "\n", trailing) == "a\n\n# the end\n"

    def test_write_lines(self, tmp_path):
        path = tmp_path / "out.txt"
        with open(path, "w", newline="") as f:
            write_lines([SortableLine(1, "x")], "\r\n", f)
        assert path.read_bytes() == b"x\r\n"


# ===========================================================
# read_line_file
# ===========================================================

class TestReadLineFile:

    def test_read(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_bytes(b"b\r\n# c\r\na\r\n")
        line_file = read_line_file(path, "#")
        assert line_file.path == path
        assert line_file.line_ending == "\r\n"
        assert [line.line for line in line_file.lines] == ["b", "a"]
        assert line_file.lines[1].comment == Comment(("# c",))
        assert not line_file.has_empty_lines

    def test_read_gz(self, tmp_path):
        path = tmp_path / "lines.txt.gz"
        path.write_bytes(gzip.compress(b"b\na\n"))
        line_file = read_line_file(path)
        assert [line.line for line in line_file.lines] == ["b", "a"]

    def test_utf8(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_bytes("öoo\nzoo\n".encode("utf-8"))
        assert read_line_file(path).lines[0].line == "öoo"

    def test_no_line_ending(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("single")
        with pytest.raises(LineEndingError):
            read_line_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_line_file(tmp_path / "nope.txt")


# ===========================================================
# backup_file / replace_file
# ===========================================================

class TestBackupAndReplace:

    def test_backup(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("b\na\n")
        backup = backup_file(path)
        assert backup == tmp_path / "lines.txt.bak"
        assert backup.read_text() == "b\na\n"

    def test_replace(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("b\na\n")
        replace_file(path, "a\nb\n")
        assert path.read_text() == "a\nb\n"
        assert os.listdir(tmp_path) == ["lines.txt"]

    def test_replace_keeps_mode(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_text("b\na\n")
        path.chmod(0o640)
        replace_file(path, "a\nb\n")
        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    def test_replace_gz(self, tmp_path):
        path = tmp_path / "lines.txt.gz"
        path.write_bytes(gzip.compress(b"b\na\n"))
        replace_file(path, "a\nb\n")
        assert gzip.decompress(path.read_bytes()) == b"a\nb\n"
