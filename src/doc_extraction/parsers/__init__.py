"""Document decoders for the document extraction system."""

from .base import SUPPORTED_EXTENSIONS, DocumentDecoder, detect_document_type
from .word_parser import WordDocumentDecoder
from .pdf_parser import PDFDocumentDecoder
from .table_detector import TableHeuristicDetector

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "DocumentDecoder",
    "detect_document_type",
    "WordDocumentDecoder",
    "PDFDocumentDecoder",
    "TableHeuristicDetector",
]
