"""文字擷取模組 - 依文件格式選擇對應的擷取方式。"""

import logging
import posixpath
import zipfile
from pathlib import Path
from typing import Callable
from urllib.parse import unquote

from bs4 import BeautifulSoup
from docx import Document
from pypdf import PdfReader
from striprtf.striprtf import rtf_to_text

from .errors import ExtractionError
from .models import ExtractedText, SupportedFormat

# 損壞的 PDF 會讓 pypdf 自行輸出警告，報表中以零值呈現即可
logging.getLogger("pypdf").setLevel(logging.ERROR)


def _read_plain_text(path: Path) -> ExtractedText:
    return ExtractedText(path.read_text(encoding="utf-8", errors="replace"))


def _extract_pdf(path: Path) -> ExtractedText:
    """擷取 PDF 各頁文字，並使用 PDF 本身的頁數。"""
    reader = PdfReader(str(path))
    text = "\n".join(page.extract_text() or "" for page in reader.pages)
    return ExtractedText(text, page_count=len(reader.pages))


def _extract_docx(path: Path) -> ExtractedText:
    document = Document(str(path))
    return ExtractedText("\n".join(p.text for p in document.paragraphs))


def _extract_rtf(path: Path) -> ExtractedText:
    raw = path.read_text(encoding="utf-8", errors="replace")
    return ExtractedText(rtf_to_text(raw))


def _html_to_text(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text(separator=" ")


def _extract_html(path: Path) -> ExtractedText:
    return ExtractedText(
        _html_to_text(path.read_text(encoding="utf-8", errors="replace"))
    )


def _epub_spine(archive: zipfile.ZipFile) -> list[str]:
    """依 OPF spine 順序列出 EPUB 內的內容文件。

    找不到 container.xml 或 spine 為空時，退回使用壓縮檔內
    所有 .xhtml / .html 檔案（依名稱排序）。
    """
    names = set(archive.namelist())
    fallback = sorted(
        name for name in names if name.lower().endswith((".xhtml", ".html", ".htm"))
    )

    if "META-INF/container.xml" not in names:
        return fallback

    container = BeautifulSoup(archive.read("META-INF/container.xml"), "xml")
    rootfile = container.find("rootfile")
    if rootfile is None or not rootfile.get("full-path"):
        return fallback

    opf_path = rootfile["full-path"]
    if opf_path not in names:
        return fallback

    opf = BeautifulSoup(archive.read(opf_path), "xml")
    opf_dir = posixpath.dirname(opf_path)

    manifest = {}
    for item in opf.find_all("item"):
        if item.get("id") and item.get("href"):
            href = posixpath.normpath(posixpath.join(opf_dir, unquote(item["href"])))
            manifest[item["id"]] = href

    documents = []
    for itemref in opf.find_all("itemref"):
        href = manifest.get(itemref.get("idref"))
        if href in names:
            documents.append(href)

    return documents or fallback


def _extract_epub(path: Path) -> ExtractedText:
    """EPUB 是 XHTML 文件的 zip 壓縮檔，依 spine 順序串接各章節文字。"""
    with zipfile.ZipFile(path) as archive:
        chapters = [
            _html_to_text(archive.read(name).decode("utf-8", errors="replace"))
            for name in _epub_spine(archive)
        ]
    return ExtractedText("\n".join(chapters))


def _extract_odt(path: Path) -> ExtractedText:
    """擷取 ODT 的段落與標題文字（位於 content.xml）。"""
    with zipfile.ZipFile(path) as archive:
        content = archive.read("content.xml")

    # content.xml 是 XML 文件，不以 HTML 方式解析
    soup = BeautifulSoup(content, "xml")

    # 空白、定位字元與換行在 ODF 中是獨立的標籤
    for tag in soup.find_all(["text:s", "text:tab", "text:line-break"]):
        tag.replace_with(" ")

    blocks = [
        element.get_text()
        for element in soup.find_all(["text:p", "text:h"])
        if element.find_parent(["text:p", "text:h"]) is None
    ]
    return ExtractedText("\n".join(blocks))


# 格式 → 擷取函式對照表
EXTRACTORS: dict[SupportedFormat, Callable[[Path], ExtractedText]] = {
    SupportedFormat.PDF: _extract_pdf,
    SupportedFormat.TXT: _read_plain_text,
    SupportedFormat.MD: _read_plain_text,
    SupportedFormat.DOCX: _extract_docx,
    SupportedFormat.RTF: _extract_rtf,
    SupportedFormat.EPUB: _extract_epub,
    SupportedFormat.HTML: _extract_html,
    SupportedFormat.ODT: _extract_odt,
}


def extract_text(path: Path, file_format: SupportedFormat) -> ExtractedText:
    """擷取文件的純文字。

    Args:
        path: 文件路徑
        file_format: 文件格式

    Returns:
        ExtractedText: 擷取出的文字與（可能有的）原生頁數

    Raises:
        ExtractionError: 格式沒有對應的擷取方式，或擷取過程發生任何錯誤
    """
    extractor = EXTRACTORS.get(file_format)
    if extractor is None:
        raise ExtractionError(f"沒有對應的擷取方式: {file_format}")

    try:
        return extractor(Path(path))
    except Exception as e:
        raise ExtractionError(
            f"無法擷取 {Path(path).name} 的文字: {type(e).__name__} - {e}"
        ) from e
