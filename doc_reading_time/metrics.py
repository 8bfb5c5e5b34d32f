"""字數與閱讀時間計算模組。"""

import math
from typing import Optional

# 每頁字元數的粗略估計值，只是近似，不代表實際排版
CHARS_PER_PAGE = 1781


def count_words(text: str) -> int:
    """計算以空白分隔的字數。

    空字串或只有空白的文字返回 0。
    """
    return len(text.split())


def estimate_page_count(text: str, native_page_count: Optional[int] = None) -> int:
    """估算頁數。

    Args:
        text: 擷取出的純文字
        native_page_count: 格式本身提供的頁數（例如 PDF），有則直接使用

    Returns:
        頁數；沒有原生頁數時為 ceil(字元數 / CHARS_PER_PAGE) 的近似值
    """
    if native_page_count is not None:
        return native_page_count
    return math.ceil(len(text) / CHARS_PER_PAGE)


def reading_minutes(word_count: int, words_per_minute: float) -> int:
    """閱讀分鐘數，無條件進位。"""
    return math.ceil(word_count / words_per_minute)


def format_duration(minutes: int) -> str:
    """將分鐘數格式化為 HH:MM:00，小時數不會在 24 時歸零。"""
    return f"{minutes // 60:02d}:{minutes % 60:02d}:00"
