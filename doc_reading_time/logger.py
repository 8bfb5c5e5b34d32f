"""日誌系統模組 - 提供統一的日誌記錄功能。"""

import logging
import sys
from pathlib import Path
from typing import Optional

# 整個工具共用的記錄器名稱
LOGGER_NAME = "doc_reading_time"


def _build_formatter() -> logging.Formatter:
    # 日誌格式：時間 - 名稱 - 等級 - 訊息
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logger(
    name: str = LOGGER_NAME, log_file: Optional[str] = None, level: int = logging.DEBUG
) -> logging.Logger:
    """設定日誌記錄器，配置控制台與（選用的）檔案輸出。

    標準輸出保留給報表表格，因此控制台處理器寫到 stderr，
    且只顯示 WARNING 及以上等級。

    Args:
        name: 日誌記錄器名稱，預設為 LOGGER_NAME
        log_file: 日誌檔案路徑，預設為 None（不寫檔案）
        level: 日誌等級，預設為 DEBUG

    Returns:
        配置完成的 Logger 實例
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重複添加控制台 handler，但仍允許之後補上檔案 handler
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(_build_formatter())
        logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(logger, Path(log_file))

    return logger


def _add_file_handler(logger: logging.Logger, log_path: Path) -> None:
    """檔案處理器 - 記錄所有等級的日誌，同一檔案只加一次。"""
    resolved = log_path.resolve()
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.FileHandler)
            and Path(handler.baseFilename) == resolved
        ):
            return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(_build_formatter())
    logger.addHandler(file_handler)
