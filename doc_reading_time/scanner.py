"""目錄掃描模組 - 找出要處理的文件。"""

import os
from pathlib import Path
from typing import Union

from .errors import PathNotFoundError, UnsupportedInputError
from .models import SupportedFormat


def discover_files(path: Union[str, Path]) -> list[Path]:
    """依輸入路徑找出支援格式的文件。

    - 單一檔案：必須是支援的格式，否則拋出 UnsupportedInputError
    - 目錄：只列出第一層（不遞迴），不支援的檔案直接略過
    - 結果可能為空列表，由呼叫者決定如何回報

    Args:
        path: 檔案或目錄路徑

    Returns:
        list[Path]: 文件路徑列表，順序與目錄列舉順序相同

    Raises:
        PathNotFoundError: 路徑不存在或無法存取
        UnsupportedInputError: 輸入檔案不是支援的格式
    """
    root = Path(path)

    try:
        is_dir = root.is_dir()
        is_file = root.is_file()
    except OSError as e:
        raise PathNotFoundError(f"無法存取路徑: {root} ({e})") from e

    if not is_dir and not is_file:
        if not root.exists():
            raise PathNotFoundError(f"找不到路徑: {root}")
        raise UnsupportedInputError(f"不是一般檔案或目錄: {root}")

    if is_file:
        if SupportedFormat.from_path(root) is None:
            raise UnsupportedInputError(
                f"不支援的檔案格式: {root.name}（支援: {_supported_list()}）"
            )
        return [root]

    try:
        with os.scandir(root) as entries:
            return [
                root / entry.name
                for entry in entries
                if entry.is_file() and SupportedFormat.from_path(entry.name) is not None
            ]
    except PermissionError as e:
        raise PathNotFoundError(f"無法讀取目錄: {root} ({e})") from e


def _supported_list() -> str:
    return ", ".join(f".{fmt.value}" for fmt in SupportedFormat)
