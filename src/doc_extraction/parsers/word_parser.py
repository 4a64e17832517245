"""Word document (.docx) decoder implementation."""

import io
import logging
from typing import List, Optional
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table

from ..exceptions import DecodeError, DocumentCorruptedError
from ..interfaces.decoder import IDocumentDecoder
from ..models.content import TableGrid
from ..models.document import DecodedDocument
from ..models.enums import DocumentType


logger = logging.getLogger(__name__)


class WordDocumentDecoder(IDocumentDecoder):
    """
    Decoder for Word (.docx) documents.

    Every non-empty Word paragraph becomes its own text paragraph, and
    native tables are read cell by cell, so no table heuristics are needed.
    """

    PARAGRAPH_SEPARATOR = "\n\n"

    def decode(self, data: bytes, file_name: Optional[str] = None) -> DecodedDocument:
        """
        Decode a Word document.

        Args:
            data: The .docx file contents.
            file_name: Optional source name for error reporting.

        Returns:
            DecodedDocument with paragraph text and native tables.

        Raises:
            DocumentCorruptedError: If the container is not a valid Word file.
            DecodeError: If the document content cannot be read.
        """
        try:
            doc = Document(io.BytesIO(data))
        except (BadZipFile, PackageNotFoundError, KeyError) as e:
            raise DocumentCorruptedError(
                message="Document is corrupted or not a valid Word file",
                file_path=file_name,
                location="file header",
                details={"original_error": str(e)}
            )
        except Exception as e:
            raise DecodeError(
                message=f"Failed to open document: {str(e)}",
                file_path=file_name,
                details={"original_error": str(e)}
            )

        try:
            paragraphs = self._extract_paragraphs(doc)
            tables = self._extract_tables(doc)
        except Exception as e:
            raise DecodeError(
                message=f"Failed to read document content: {str(e)}",
                file_path=file_name,
                location="word/document.xml",
                details={"original_error": str(e)}
            )

        logger.debug(
            f"Decoded Word document {file_name or '<bytes>'}: "
            f"{len(paragraphs)} paragraphs, {len(tables)} tables"
        )

        return DecodedDocument(
            doc_type=DocumentType.DOCX,
            text=self.PARAGRAPH_SEPARATOR.join(paragraphs),
            tables=tables,
            paragraph_count=len(paragraphs),
        )

    def _extract_paragraphs(self, doc: Document) -> List[str]:
        """Collect the text of all non-empty body paragraphs."""
        return [para.text for para in doc.paragraphs if para.text.strip()]

    def _extract_tables(self, doc: Document) -> List[TableGrid]:
        """Convert every native table; the first row is the header when data rows follow."""
        tables = []
        for table in doc.tables:
            rows = self._read_rows(table)
            if not rows:
                continue

            if len(rows) > 1:
                tables.append(TableGrid(headers=rows[0], rows=rows[1:]))
            else:
                tables.append(TableGrid(rows=rows))
        return tables

    def _read_rows(self, table: Table) -> List[List[str]]:
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if cells:
                rows.append(cells)
        return rows

    def get_supported_extensions(self) -> List[str]:
        return [".docx"]
