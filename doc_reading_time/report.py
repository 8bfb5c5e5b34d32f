"""報表模組 - 並行收集統計、排序、加總並輸出表格。"""

import io
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .collector import collect_file_stats, zero_stats
from .logger import setup_logger
from .models import FileStats, ReadingSpeedConfig, ReportTotals

# 每完成一個文件呼叫一次（用於更新進度條）
ProgressCallback = Callable[[FileStats], None]


@dataclass(frozen=True)
class Report:
    """排序後的結果與加總 (Ordered results and totals)."""

    results: list[FileStats]
    totals: ReportTotals
    show_word_count: bool = True

    def print(self, console: Console) -> None:
        """輸出表格；超過一個文件時附上總計區塊。"""
        table = build_table(self.results, self.show_word_count)
        if not console.is_terminal:
            # 輸出到管線或檔案時不受 80 欄的預設寬度限制，完整保留檔名
            console.width = max(console.width, console.measure(table).maximum)
        console.print(table)
        if len(self.results) > 1:
            console.print(
                "\n" + render_summary(self.totals, self.show_word_count),
                end="",
                markup=False,
                highlight=False,
            )

    def render(self, width: int = 200) -> str:
        """以字串形式返回報表（不含顏色）。"""
        buffer = io.StringIO()
        self.print(Console(file=buffer, width=width, highlight=False))
        return buffer.getvalue()


def _format_number(value: int) -> str:
    return f"{value:,}"


def build_table(results: list[FileStats], show_word_count: bool = True) -> Table:
    """建立每個文件一列的表格。"""
    table = Table(header_style="cyan", border_style="grey50")
    table.add_column("#", justify="right")
    table.add_column("File", overflow="fold")
    table.add_column("Format")
    if show_word_count:
        table.add_column("Word Count", justify="right")
    table.add_column("Pages", justify="right")
    table.add_column("Reading Time")

    for index, stats in enumerate(results, start=1):
        row = [str(index), escape(stats.file_name), stats.format_label]
        if show_word_count:
            row.append(_format_number(stats.word_count))
        row.extend([_format_number(stats.page_count), stats.reading_time])
        table.add_row(*row)

    return table


def render_summary(totals: ReportTotals, show_word_count: bool = True) -> str:
    """總計區塊。"""
    lines = [f"Total: {totals.document_count} file(s)"]
    if show_word_count:
        lines.append(f"Total word count: {_format_number(totals.word_count)}")
    lines.append(f"Total page count: {_format_number(totals.page_count)}")
    lines.append(f"Total reading time: {totals.reading_time}")
    return "\n".join(lines) + "\n"


class ReportAggregator:
    """閱讀時間報表產生器。

    負責並行處理所有文件、依設定排序、計算總計並輸出表格。
    """

    def __init__(self, config: ReadingSpeedConfig) -> None:
        """初始化報表產生器。

        Args:
            config: 閱讀速度設定（包含執行緒數量與排序選項）
        """
        self.config = config
        self.max_workers = config.max_workers
        self.logger = setup_logger()

    def collect(
        self, files: list[Path], progress: Optional[ProgressCallback] = None
    ) -> list[FileStats]:
        """使用多執行緒收集所有文件的統計。

        單一文件的任何錯誤都會轉換為零值結果，不會中斷其他文件。

        Args:
            files: 文件路徑列表
            progress: 每完成一個文件時呼叫的函式

        Returns:
            list[FileStats]: 與輸入順序相同的統計結果
        """
        results: list[Optional[FileStats]] = [None] * len(files)

        # 如果只有一個執行緒，直接循序處理
        if self.max_workers == 1 or len(files) <= 1:
            for index, path in enumerate(files):
                results[index] = self._collect_one(path)
                if progress:
                    progress(results[index])
            return results

        self.logger.info(f"使用 {self.max_workers} 個執行緒並行處理 {len(files)} 個文件")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(collect_file_stats, path, self.config): index
                for index, path in enumerate(files)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    stats = future.result()
                except Exception as e:
                    # 其他未預期的錯誤 - 只寫入日誌檔，繼續其他執行緒
                    self.logger.info(
                        f"執行緒中發生未預期的錯誤 (文件: {files[index]}): "
                        f"{type(e).__name__} - {e}"
                    )
                    stats = zero_stats(files[index], f"{type(e).__name__}: {e}")

                results[index] = stats
                if progress:
                    progress(stats)

        return results

    def _collect_one(self, path: Path) -> FileStats:
        try:
            return collect_file_stats(path, self.config)
        except Exception as e:
            self.logger.info(
                f"處理文件時發生未預期的錯誤 ({path}): {type(e).__name__} - {e}"
            )
            return zero_stats(path, f"{type(e).__name__}: {e}")

    def sort_results(self, results: list[FileStats]) -> list[FileStats]:
        """依閱讀時間由長到短排序（穩定排序，相同時間保留原順序）。"""
        if self.config.sort_by_time and len(results) > 1:
            return sorted(results, key=lambda s: s.reading_time_minutes, reverse=True)
        return list(results)

    @staticmethod
    def compute_totals(results: list[FileStats]) -> ReportTotals:
        """加總字數、頁數與各文件已進位的閱讀分鐘數。"""
        return ReportTotals(
            document_count=len(results),
            word_count=sum(s.word_count for s in results),
            page_count=sum(s.page_count for s in results),
            reading_time_minutes=sum(s.reading_time_minutes for s in results),
        )

    def build_report(
        self, files: list[Path], progress: Optional[ProgressCallback] = None
    ) -> Report:
        """收集、排序並加總，產生完整報表。"""
        results = self.sort_results(self.collect(files, progress))
        totals = self.compute_totals(results)

        failed = sum(1 for s in results if s.failed)
        self.logger.info(
            f"報表完成 - 文件: {totals.document_count}, 無法讀取: {failed}, "
            f"總閱讀時間: {totals.reading_time}"
        )
        return Report(
            results=results,
            totals=totals,
            show_word_count=self.config.show_word_count,
        )
