"""測試字數與閱讀時間計算。"""

import math

import pytest

from doc_reading_time.metrics import (
    CHARS_PER_PAGE,
    count_words,
    estimate_page_count,
    format_duration,
    reading_minutes,
)


class TestCountWords:
    """測試字數計算。"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("one two three", 3),
            ("  leading and trailing  ", 3),
            ("tabs\tand\nnewlines\r\nmixed", 4),
            ("multiple    spaces   between", 3),
            ("single", 1),
        ],
    )
    def test_count_whitespace_runs(self, text, expected):
        assert count_words(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_empty_text_is_zero(self, text):
        """測試空白文字的字數為 0。"""
        assert count_words(text) == 0


class TestEstimatePageCount:
    """測試頁數估算。"""

    def test_native_page_count_wins(self):
        assert estimate_page_count("x" * 10000, native_page_count=2) == 2

    def test_native_zero_pages(self):
        assert estimate_page_count("", native_page_count=0) == 0

    def test_estimate_from_characters(self):
        assert estimate_page_count("x" * CHARS_PER_PAGE) == 1
        assert estimate_page_count("x" * (CHARS_PER_PAGE + 1)) == 2
        assert estimate_page_count("") == 0


class TestReadingMinutes:
    """測試閱讀分鐘數（無條件進位）。"""

    @pytest.mark.parametrize(
        "word_count, wpm",
        [(0, 200), (1, 200), (199, 200), (200, 200), (201, 200), (1000, 150.5)],
    )
    def test_ceiling(self, word_count, wpm):
        assert reading_minutes(word_count, wpm) == math.ceil(word_count / wpm)

    def test_scenario_values(self):
        assert reading_minutes(400, 200) == 2
        assert reading_minutes(100, 100) == 1
        assert reading_minutes(500, 100) == 5


class TestFormatDuration:
    """測試 HH:MM:00 格式。"""

    @pytest.mark.parametrize(
        "minutes, expected",
        [
            (0, "00:00:00"),
            (2, "00:02:00"),
            (59, "00:59:00"),
            (60, "01:00:00"),
            (125, "02:05:00"),
            (24 * 60, "24:00:00"),
            (100 * 60 + 1, "100:01:00"),
        ],
    )
    def test_format(self, minutes, expected):
        assert format_duration(minutes) == expected
