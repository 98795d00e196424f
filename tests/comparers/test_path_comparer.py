import pytest

from comparers import PathComparer, path_components
from core import Ordering, PathFlavor
from tests.helpers import sort_with


_UNIX_PATHS = ["/foo", "/bar", "baz/quux", "a/q", "C:\\", "/X", "/A"]


# ===========================================================
# path_components
# ===========================================================

class TestPathComponents:

    @pytest.mark.parametrize("text, expected", [
        ("/foo/bar", ["/", "foo", "bar"]),
        ("/foo//bar/", ["/", "foo", "bar"]),
        ("a/./b/..", ["a", ".", "b", ".."]),
        ("a\\b", ["a\\b"]),
        ("", []),
    ])
    def test_unix(self, text, expected):
        assert path_components(text, PathFlavor.UNIX)[1] == expected

    @pytest.mark.parametrize("text, expected", [
        ("C:\\a\\b", ["C:\\", "a", "b"]),
        ("C:\\a/b", ["C:\\", "a", "b"]),
        ("\\a\\b", ["\\", "a", "b"]),
        ("a\\b", ["a", "b"]),
        ("\\\\srv\\share\\a", ["\\\\srv\\share\\", "a"]),
        ("//srv/share/a", ["\\\\srv\\share\\", "a"]),
    ])
    def test_windows(self, text, expected):
        assert path_components(text, PathFlavor.WINDOWS)[1] == expected


# ===========================================================
# Unix paths
# ===========================================================

class TestUnixPaths:

    def test_absolute_before_relative(self):
        assert sort_with(PathComparer(), _UNIX_PATHS) == [
            "/A", "/X", "/bar", "/foo", "C:\\", "a/q", "baz/quux",
        ]

    def test_case_insensitive(self):
        assert sort_with(PathComparer(case_insensitive=True), _UNIX_PATHS) == [
            "/A", "/bar", "/foo", "/X", "C:\\", "a/q", "baz/quux",
        ]

    def test_shallower_paths_first(self):
        lines = ["/aaaaaa/q/r", "/xxx/a", "/zzz", "/bbb"]
        assert sort_with(PathComparer(), lines) == ["/bbb", "/zzz", "/xxx/a", "/aaaaaa/q/r"]

    def test_repeated_separators_do_not_matter(self):
        assert PathComparer().compare("/a//b", "/a/b") is Ordering.EQUAL

    def test_empty_path_first(self):
        assert PathComparer().compare("", "a") is Ordering.LESS
        assert PathComparer().compare("a", "") is Ordering.GREATER


# ===========================================================
# Windows paths
# ===========================================================

class TestWindowsPaths:

    @pytest.fixture
    def comparer(self):
        return PathComparer(flavor=PathFlavor.WINDOWS)

    def test_flavor(self, comparer):
        assert comparer.flavor is PathFlavor.WINDOWS

    def test_prefix_first(self, comparer):
        lines = [
            "C:\\foo",
            "\\a\\b",
            "\\b",
            "C:\\bar",
            "E:\\a",
            "B:\\x",
            "C:\\a\\b\\c",
            "C:\\a\\b",
        ]
        assert sort_with(comparer, lines) == [
            "B:\\x",
            "C:\\bar",
            "C:\\foo",
            "C:\\a\\b",
            "C:\\a\\b\\c",
            "E:\\a",
            "\\b",
            "\\a\\b",
        ]

    def test_prefixed_before_unprefixed(self, comparer):
        assert comparer.compare("C:foo", "foo") is Ordering.LESS
        assert comparer.compare("foo", "C:foo") is Ordering.GREATER

    def test_mixed_separators(self, comparer):
        assert comparer.compare("C:\\a/b", "C:/a\\b") is Ordering.EQUAL

    def test_unc_before_unprefixed(self, comparer):
        assert comparer.compare("\\\\srv\\share\\x", "\\x") is Ordering.LESS
        assert comparer.compare("a\\b", "\\\\srv\\share\\x") is Ordering.GREATER

    def test_unc_against_drive_letter(self, comparer):
        # Both are prefixed, so the prefixes themselves decide.
        assert comparer.compare("C:\\x", "\\\\srv\\share\\x") is Ordering.LESS
        assert comparer.compare("\\\\srv\\share\\x", "C:\\x") is Ordering.GREATER

    def test_different_shares_compare_by_prefix_before_depth(self, comparer):
        assert comparer.compare("\\\\aaa\\s\\a\\b", "\\\\zzz\\s\\a") is Ordering.LESS

    def test_same_share_compares_by_depth(self, comparer):
        assert comparer.compare("\\\\srv\\share\\x\\y", "\\\\srv\\share\\z") is Ordering.GREATER

    def test_unc_and_drive_letters(self, comparer):
        lines = [
            "a\\b",
            "\\\\srv\\share\\x\\y",
            "\\x",
            "C:y",
            "\\\\srv\\share\\x",
            "\\\\abc\\s\\q",
            "C:\\x",
        ]
        assert sort_with(comparer, lines) == [
            "C:\\x",
            "\\\\abc\\s\\q",
            "\\\\srv\\share\\x",
            "\\\\srv\\share\\x\\y",
            "C:y",
            "\\x",
            "a\\b",
        ]
