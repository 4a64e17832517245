"""PDF document decoder implementation."""

import io
import logging
from typing import Any, Dict, List, Optional

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from ..exceptions import DecodeError, DocumentCorruptedError
from ..interfaces.decoder import IDocumentDecoder
from ..models.document import DecodedDocument
from ..models.enums import DocumentType
from .table_detector import TableHeuristicDetector


logger = logging.getLogger(__name__)

Word = Dict[str, Any]


class PDFDocumentDecoder(IDocumentDecoder):
    """
    Decoder for PDF documents.

    Uses PyPDF2 for validation and page counting and pdfplumber for word
    extraction. Page text is rebuilt from word positions: a gap of at
    least two character widths becomes a tab (a column break), narrower
    gaps a single space, so justified prose never looks like a table row.
    PDFs carry no table markup, so tables are recovered from the rebuilt
    text with TableHeuristicDetector and their lines removed from the text.
    """

    PAGE_SEPARATOR = "\n\n"
    COLUMN_GAP_CHARS = 2.0
    LINE_TOLERANCE = 3.0
    PARAGRAPH_GAP_RATIO = 0.5

    def __init__(self, table_detector: Optional[TableHeuristicDetector] = None):
        self._table_detector = table_detector or TableHeuristicDetector()

    def decode(self, data: bytes, file_name: Optional[str] = None) -> DecodedDocument:
        """
        Decode a PDF document.

        Args:
            data: The PDF file contents.
            file_name: Optional source name for error reporting.

        Returns:
            DecodedDocument with prose text and heuristically detected tables.

        Raises:
            DocumentCorruptedError: If the PDF is corrupted or encrypted.
            DecodeError: If page content cannot be extracted.
        """
        # Open with PyPDF2 first for validation
        try:
            pdf_reader = PdfReader(io.BytesIO(data))
            page_count = len(pdf_reader.pages)
        except PdfReadError as e:
            raise DocumentCorruptedError(
                message="PDF file is corrupted or encrypted",
                file_path=file_name,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise DecodeError(
                message=f"Failed to open PDF: {str(e)}",
                file_path=file_name,
                details={"original_error": str(e)}
            )

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                page_texts = self._extract_page_texts(pdf)
        except Exception as e:
            raise DecodeError(
                message=f"Failed to parse PDF content: {str(e)}",
                file_path=file_name,
                details={"original_error": str(e)}
            )

        tables, text = self._table_detector.split_tables(
            self.PAGE_SEPARATOR.join(page_texts)
        )

        logger.debug(
            f"Decoded PDF {file_name or '<bytes>'}: {page_count} pages, "
            f"{len(tables)} heuristic tables"
        )

        return DecodedDocument(
            doc_type=DocumentType.PDF,
            text=text,
            tables=tables,
            page_count=page_count,
        )

    def _extract_page_texts(self, pdf: pdfplumber.PDF) -> List[str]:
        texts = []
        for page in pdf.pages:
            page_text = self._page_text(page.extract_words())
            # Pages without a text layer (scans) contribute nothing
            if page_text.strip():
                texts.append(page_text)
        return texts

    def _page_text(self, words: List[Word]) -> str:
        """
        Rebuild the text of one page from pdfplumber words.

        A blank line is inserted where the vertical gap between two lines
        exceeds half the height of the upper line.
        """
        lines: List[List[Word]] = []
        for word in sorted(words, key=lambda w: (w["top"], w["x0"])):
            if lines and abs(word["top"] - lines[-1][0]["top"]) <= self.LINE_TOLERANCE:
                lines[-1].append(word)
            else:
                lines.append([word])

        text_lines: List[str] = []
        previous: Optional[List[Word]] = None
        for line in lines:
            line.sort(key=lambda w: w["x0"])
            if previous is not None and self._starts_paragraph(previous, line):
                text_lines.append("")
            text_lines.append(self._join_words(line))
            previous = line
        return "\n".join(text_lines)

    def _join_words(self, line: List[Word]) -> str:
        parts = [line[0]["text"]]
        for before, word in zip(line, line[1:]):
            char_width = (before["x1"] - before["x0"]) / max(len(before["text"]), 1)
            gap = word["x0"] - before["x1"]
            parts.append("\t" if gap >= self.COLUMN_GAP_CHARS * char_width else " ")
            parts.append(word["text"])
        return "".join(parts)

    def _starts_paragraph(self, previous: List[Word], line: List[Word]) -> bool:
        bottom = max(w["bottom"] for w in previous)
        height = max(w["bottom"] - w["top"] for w in previous)
        top = min(w["top"] for w in line)
        return top - bottom > self.PARAGRAPH_GAP_RATIO * height

    def get_supported_extensions(self) -> List[str]:
        return [".pdf"]
