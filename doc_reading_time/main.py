"""命令列介面 - 文件閱讀時間估算工具的主程式入口點。"""

import argparse
import sys
from typing import Optional

from rich.console import Console
from tqdm import tqdm

from .config import build_config, load_config_file
from .errors import ConfigurationError, PathNotFoundError, UnsupportedInputError
from .logger import setup_logger
from .models import ReadingSpeedConfig, SupportedFormat
from .report import ReportAggregator
from .scanner import discover_files


def parse_arguments(
    argv: Optional[list[str]] = None,
) -> tuple[argparse.Namespace, ReadingSpeedConfig]:
    """解析命令列參數並建立執行設定。

    設定值無效時（例如 --wpm 不是正數）會透過 parser.error 立即結束，
    不會處理任何文件。

    Returns:
        tuple: (解析後的參數物件, 閱讀速度設定)
    """
    formats = ", ".join(f".{fmt.value}" for fmt in SupportedFormat)

    parser = argparse.ArgumentParser(
        prog="reading-time",
        description="估算目錄（或單一文件）中各文件的閱讀時間",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
支援格式: {formats}

範例:
  # 估算當前目錄中所有文件的閱讀時間
  reading-time

  # 指定目錄，並以每分鐘 250 字計算
  reading-time ~/Documents/papers --wpm 250

  # 依閱讀時間由長到短排序
  reading-time ~/Documents/papers --timesort

  # 估算單一文件
  reading-time book.epub

  # 從 YAML 設定檔讀取預設值
  reading-time ~/Documents --config reading-time.yaml
        """,
    )

    # 選填參數：檔案或目錄路徑
    parser.add_argument(
        "path",
        type=str,
        nargs="?",
        default=".",
        help="要估算的文件或目錄（預設：當前目錄）",
    )

    # 選填參數：閱讀速度
    parser.add_argument(
        "--wpm",
        type=float,
        default=None,
        help="每分鐘閱讀字數（預設：200）",
    )

    # 選填參數：是否依閱讀時間排序
    parser.add_argument(
        "--timesort",
        action="store_true",
        default=None,
        help="依閱讀時間由長到短排序",
    )

    # 選填參數：是否隱藏字數欄位
    parser.add_argument(
        "--no-word-count",
        dest="show_word_count",
        action="store_false",
        default=None,
        help="不顯示字數欄位與總字數",
    )

    # 選填參數：執行緒數量
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="並行處理的執行緒數量（預設：4，最多 8）",
    )

    # 選填參數：設定檔
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML 設定檔路徑（命令列參數優先）",
    )

    # 選填參數：日誌檔案
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="將詳細日誌寫入指定檔案",
    )

    # 選填參數：是否顯示進度條
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="不顯示進度條",
    )

    args = parser.parse_args(argv)

    try:
        file_values = load_config_file(args.config) if args.config else {}
        config = build_config(
            wpm=args.wpm,
            timesort=args.timesort,
            show_word_count=args.show_word_count,
            workers=args.workers,
            file_values=file_values,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    return args, config


def main(argv: Optional[list[str]] = None) -> None:
    """主程式入口點。

    整合參數解析、文件掃描、統計收集與報表輸出。
    單一文件無法讀取不會影響結束碼。
    """
    # 設定主程式的日誌記錄器
    logger = setup_logger()

    args, config = parse_arguments(argv)

    if args.log_file:
        setup_logger(log_file=args.log_file)

    try:
        logger.info(
            f"開始掃描: {args.path} (wpm: {config.words_per_minute:g}, "
            f"排序: {config.sort_by_time}, 執行緒數: {config.max_workers})"
        )
        files = discover_files(args.path)

        if not files:
            print("ℹ️  沒有找到可讀取的文件")
            logger.info(f"{args.path} 中沒有支援格式的文件")
            sys.exit(0)

        aggregator = ReportAggregator(config)
        show_progress = not args.no_progress and len(files) > 1

        with tqdm(
            total=len(files),
            desc="處理文件",
            unit="file",
            ncols=100,
            file=sys.stderr,
            disable=not show_progress,
            leave=False,
        ) as pbar:
            report = aggregator.build_report(files, progress=lambda _: pbar.update(1))

        report.print(Console())

        # 正常結束
        sys.exit(0)

    except PathNotFoundError as e:
        # 路徑不存在
        print("\n❌ 錯誤: 路徑不存在", file=sys.stderr)
        print(f"{e}\n", file=sys.stderr)
        logger.error("路徑不存在: %s", e)
        sys.exit(1)

    except UnsupportedInputError as e:
        # 不支援的檔案
        print("\n❌ 錯誤: 不支援的輸入", file=sys.stderr)
        print(f"{e}\n", file=sys.stderr)
        logger.error("不支援的輸入: %s", e)
        sys.exit(1)

    except KeyboardInterrupt:
        # 使用者中斷
        print("\n\n⚠️  處理已被使用者中斷\n", file=sys.stderr)
        logger.info("處理被使用者中斷")
        sys.exit(130)

    except Exception as e:
        # 其他未預期的錯誤
        print("\n❌ 錯誤: 發生未預期的錯誤", file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        print("請使用 --log-file 取得更多資訊。\n", file=sys.stderr)
        logger.exception("發生未預期的錯誤")
        sys.exit(1)


if __name__ == "__main__":
    main()
