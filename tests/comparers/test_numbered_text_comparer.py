import pytest

from comparers import NumberedTextComparer
from core import Ordering
from tests.helpers import sort_with


_NUMBERED = [
    "120001 go",
    "0. bears",
    "15 - above",
    "5. And",
    "1. all",
    "5. act",
    "2. home",
]


class TestNumberedTextComparer:

    def test_sorts_numerically(self):
        assert sort_with(NumberedTextComparer(), _NUMBERED) == [
            "0. bears",
            "1. all",
            "2. home",
            "5. And",
            "5. act",
            "15 - above",
            "120001 go",
        ]

    def test_equal_numbers_fall_back_to_case_insensitive_text(self):
        assert sort_with(NumberedTextComparer(case_insensitive=True), _NUMBERED) == [
            "0. bears",
            "1. all",
            "2. home",
            "5. act",
            "5. And",
            "15 - above",
            "120001 go",
        ]

    def test_unnumbered_lines_sort_last(self):
        lines = ["love", "27. bar", "1. hello", "aloe", "10. x"]
        assert sort_with(NumberedTextComparer(), lines) == [
            "1. hello",
            "10. x",
            "27. bar",
            "aloe",
            "love",
        ]

    def test_decimals(self):
        lines = ["27.2314 - bar", "1.00 - hello", "10.1 - x"]
        assert sort_with(NumberedTextComparer(), lines) == [
            "1.00 - hello",
            "10.1 - x",
            "27.2314 - bar",
        ]

    @pytest.mark.parametrize("str1, str2, expected", [
        ("2", "10", Ordering.LESS),
        ("10", "2", Ordering.GREATER),
        ("007 x", "7 x", Ordering.EQUAL),
        ("1.0 a", "1.00 b", Ordering.LESS),
        ("1.5", "1.25", Ordering.GREATER),
        ("3", "three", Ordering.LESS),
        ("", "0", Ordering.GREATER),
        ("", "", Ordering.EQUAL),
    ])
    def test_compare(self, str1, str2, expected):
        assert NumberedTextComparer().compare(str1, str2) is expected

    def test_leading_space_is_not_a_number(self):
        assert NumberedTextComparer().compare(" 1", "9") is Ordering.GREATER
