"""單一文件統計模組 - 擷取文字並計算閱讀時間。"""

from pathlib import Path
from typing import Optional

from .errors import ExtractionError
from .extractors import extract_text
from .logger import setup_logger
from .metrics import count_words, estimate_page_count, format_duration, reading_minutes
from .models import FileStats, ReadingSpeedConfig, SupportedFormat

logger = setup_logger()


def format_label(path: Path) -> str:
    """副檔名轉成大寫標籤（不含點），例如 report.Pdf → PDF。"""
    return Path(path).suffix[1:].upper()


def zero_stats(path: Path, error: Optional[str] = None) -> FileStats:
    """擷取失敗時使用的零值結果，讓文件仍會出現在報表中。"""
    return FileStats(
        file_name=Path(path).name,
        format_label=format_label(path),
        word_count=0,
        page_count=0,
        reading_time=format_duration(0),
        reading_time_minutes=0,
        error=error or "unknown error",
    )


def collect_file_stats(path: Path, config: ReadingSpeedConfig) -> FileStats:
    """計算單一文件的字數、頁數與閱讀時間。

    任何擷取錯誤都不會往外拋出，而是寫入日誌檔並返回零值結果，
    避免單一損壞的文件中斷整批處理。

    Args:
        path: 文件路徑
        config: 閱讀速度設定

    Returns:
        FileStats: 文件統計結果
    """
    path = Path(path)
    file_format = SupportedFormat.from_path(path)

    try:
        if file_format is None:
            raise ExtractionError(f"不支援的檔案格式: {path.name}")
        extracted = extract_text(path, file_format)
    except ExtractionError as e:
        logger.info(f"跳過無法讀取的文件 {path}: {e}")
        return zero_stats(path, str(e))

    word_count = count_words(extracted.text)
    page_count = estimate_page_count(extracted.text, extracted.page_count)
    minutes = reading_minutes(word_count, config.words_per_minute)

    logger.debug(
        f"文件統計完成: {path.name} - 字數: {word_count}, 頁數: {page_count}, "
        f"閱讀時間: {minutes} 分鐘"
    )

    return FileStats(
        file_name=path.name,
        format_label=format_label(path),
        word_count=word_count,
        page_count=page_count,
        reading_time=format_duration(minutes),
        reading_time_minutes=minutes,
    )
