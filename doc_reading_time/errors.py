"""例外類別定義 - 閱讀時間估算工具的錯誤分類。"""


class ReadingTimeError(Exception):
    """所有工具相關錯誤的基底類別。"""


class ConfigurationError(ReadingTimeError, ValueError):
    """設定值無效（例如 wpm 不是正數或設定檔格式錯誤）。"""


class PathNotFoundError(ReadingTimeError, FileNotFoundError):
    """輸入路徑不存在或無法存取。"""


class UnsupportedInputError(ReadingTimeError, ValueError):
    """輸入的單一檔案不是支援的文件格式。"""


class ExtractionError(ReadingTimeError):
    """單一文件的文字擷取失敗。

    此錯誤只會在擷取層內部拋出，由 collector 轉換為零值結果，
    不會中斷整批處理。
    """
