"""Data models for Document Reading Time."""

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError
from .metrics import format_duration

# 執行緒數量上限
MAX_WORKERS_LIMIT = 8


class SupportedFormat(Enum):
    """支援的文件格式 (Supported document formats)."""

    PDF = "pdf"
    TXT = "txt"
    MD = "md"
    DOCX = "docx"
    RTF = "rtf"
    EPUB = "epub"
    HTML = "html"
    ODT = "odt"

    @classmethod
    def from_path(cls, path: Path) -> Optional["SupportedFormat"]:
        """依副檔名判斷格式，不分大小寫；不支援時返回 None。"""
        suffix = Path(path).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            return None


@dataclass(frozen=True)
class FileStats:
    """單一文件的統計結果 (Per-file statistics)."""

    file_name: str
    format_label: str
    word_count: int
    page_count: int
    reading_time: str
    reading_time_minutes: int
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """是否為擷取失敗後的零值結果。"""
        return self.error is not None


@dataclass(frozen=True)
class ReadingSpeedConfig:
    """執行期間唯讀的設定 (Run-wide read-only configuration)."""

    words_per_minute: float = 200
    sort_by_time: bool = False
    show_word_count: bool = True
    max_workers: int = 4

    def __post_init__(self) -> None:
        wpm = self.words_per_minute
        if isinstance(wpm, bool) or not isinstance(wpm, (int, float)):
            raise ConfigurationError(f"wpm 必須是正數，收到: {wpm!r}")
        if math.isnan(wpm) or math.isinf(wpm) or wpm <= 0:
            raise ConfigurationError(f"wpm 必須是正數，收到: {wpm}")

        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise ConfigurationError(f"workers 必須是整數，收到: {self.max_workers!r}")
        if self.max_workers < 1:
            raise ConfigurationError(f"workers 必須至少為 1，收到: {self.max_workers}")

        # frozen dataclass 只能透過 object.__setattr__ 修正欄位
        object.__setattr__(
            self, "max_workers", min(self.max_workers, MAX_WORKERS_LIMIT)
        )


@dataclass(frozen=True)
class ReportTotals:
    """所有文件的加總統計 (Aggregate totals)."""

    document_count: int
    word_count: int
    page_count: int
    reading_time_minutes: int

    @property
    def reading_time(self) -> str:
        """總閱讀時間 (Total reading time)."""
        return format_duration(self.reading_time_minutes)


@dataclass(frozen=True)
class ExtractedText:
    """文字擷取結果 (Extraction result)."""

    text: str
    # 只有具備頁面結構的格式（PDF）才會提供
    page_count: Optional[int] = None
