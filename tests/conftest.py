"""Pytest 配置檔案 - 提供測試用的 fixtures。"""

import logging
import tempfile
import zipfile
from pathlib import Path

import pytest
from docx import Document
from pypdf import PdfWriter

from doc_reading_time.logger import LOGGER_NAME
from doc_reading_time.models import ReadingSpeedConfig


def words(count: int, word: str = "lorem") -> str:
    """產生指定字數的文字。"""
    return " ".join([word] * count)


@pytest.fixture
def temp_dir():
    """建立臨時目錄用於測試。"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """預設閱讀速度設定（每分鐘 200 字，單執行緒）。"""
    return ReadingSpeedConfig(words_per_minute=200, max_workers=1)


@pytest.fixture
def create_text_file(temp_dir):
    """建立指定字數的純文字文件。"""

    def _create(name="doc.txt", word_count=100, content=None):
        path = temp_dir / name
        path.write_text(words(word_count) if content is None else content, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def create_docx_file(temp_dir):
    """使用 python-docx 建立 DOCX 文件。"""

    def _create(name="doc.docx", paragraphs=("one two three", "four five")):
        path = temp_dir / name
        document = Document()
        for paragraph in paragraphs:
            document.add_paragraph(paragraph)
        document.save(str(path))
        return path

    return _create


@pytest.fixture
def create_pdf_file(temp_dir):
    """建立只有空白頁的 PDF 文件。"""

    def _create(name="doc.pdf", pages=3):
        path = temp_dir / name
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=612, height=792)
        with open(path, "wb") as f:
            writer.write(f)
        return path

    return _create


@pytest.fixture
def create_epub_file(temp_dir):
    """建立最小的 EPUB 文件（container.xml + OPF + 章節）。"""

    def _create(name="book.epub", chapters=("one two", "three four five")):
        path = temp_dir / name
        manifest = "".join(
            f'<item id="ch{i}" href="text/ch{i}.xhtml" media-type="application/xhtml+xml"/>'
            for i in range(len(chapters))
        )
        spine = "".join(f'<itemref idref="ch{i}"/>' for i in range(len(chapters)))

        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("mimetype", "application/epub+zip")
            archive.writestr(
                "META-INF/container.xml",
                '<?xml version="1.0"?>'
                '<container version="1.0" '
                'xmlns="urn:oasis:names:tc:opendocument:xmlns:container">'
                "<rootfiles>"
                '<rootfile full-path="OEBPS/content.opf" '
                'media-type="application/oebps-package+xml"/>'
                "</rootfiles></container>",
            )
            archive.writestr(
                "OEBPS/content.opf",
                '<?xml version="1.0"?>'
                '<package xmlns="http://www.idpf.org/2007/opf" version="3.0">'
                f"<manifest>{manifest}</manifest>"
                f"<spine>{spine}</spine>"
                "</package>",
            )
            for i, chapter in enumerate(chapters):
                archive.writestr(
                    f"OEBPS/text/ch{i}.xhtml",
                    '<?xml version="1.0" encoding="utf-8"?>'
                    '<html xmlns="http://www.w3.org/1999/xhtml"><body>'
                    f"<p>{chapter}</p></body></html>",
                )
        return path

    return _create


@pytest.fixture
def create_odt_file(temp_dir):
    """建立最小的 ODT 文件（只含 content.xml）。"""

    def _create(name="doc.odt", body="<text:p>one<text:s/>two</text:p>"):
        path = temp_dir / name
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("mimetype", "application/vnd.oasis.opendocument.text")
            archive.writestr(
                "content.xml",
                '<?xml version="1.0" encoding="UTF-8"?>'
                "<office:document-content "
                'xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
                'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0">'
                f"<office:body><office:text>{body}</office:text></office:body>"
                "</office:document-content>",
            )
        return path

    return _create


@pytest.fixture
def reset_log_files():
    """測試結束後移除加到共用記錄器上的檔案 handler。"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
