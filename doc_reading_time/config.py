"""設定模組 - 從 YAML 設定檔與命令列參數建立執行設定。"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigurationError
from .logger import setup_logger
from .models import ReadingSpeedConfig

# 設定檔中可使用的欄位
CONFIG_KEYS = ("wpm", "timesort", "show_word_count", "workers")

DEFAULTS: dict[str, Any] = {
    "wpm": 200,
    "timesort": False,
    "show_word_count": True,
    "workers": 4,
}

logger = setup_logger()


def load_config_file(file_path: Union[str, Path]) -> dict[str, Any]:
    """從 YAML 檔案讀取預設設定。

    範例：

        wpm: 250
        timesort: true
        show_word_count: false
        workers: 2

    Args:
        file_path: YAML 檔案路徑

    Returns:
        dict: 設定值（只包含已知欄位）

    Raises:
        ConfigurationError: 檔案不存在、YAML 解析錯誤或格式錯誤時
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"找不到設定檔: {file_path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"設定檔解析錯誤: {e}") from e

    # 空檔案視為沒有任何設定
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError("設定檔格式錯誤：最外層必須是對應表 (mapping)")

    values = {}
    for key, value in data.items():
        if key not in CONFIG_KEYS:
            logger.warning(f"忽略未知的設定欄位: {key}")
            continue
        values[key] = value

    logger.info(f"從 {file_path} 讀取了 {len(values)} 個設定值")
    return values


def _require_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} 必須是 true 或 false，收到: {value!r}")
    return value


def build_config(
    wpm: Optional[float] = None,
    timesort: Optional[bool] = None,
    show_word_count: Optional[bool] = None,
    workers: Optional[int] = None,
    file_values: Optional[dict[str, Any]] = None,
) -> ReadingSpeedConfig:
    """合併預設值、設定檔與命令列參數（優先順序由低到高）。

    Raises:
        ConfigurationError: 任何設定值無效時
    """
    merged = dict(DEFAULTS)
    merged.update(file_values or {})

    overrides = {
        "wpm": wpm,
        "timesort": timesort,
        "show_word_count": show_word_count,
        "workers": workers,
    }
    merged.update({key: value for key, value in overrides.items() if value is not None})

    return ReadingSpeedConfig(
        words_per_minute=merged["wpm"],
        sort_by_time=_require_bool("timesort", merged["timesort"]),
        show_word_count=_require_bool("show_word_count", merged["show_word_count"]),
        max_workers=merged["workers"],
    )
