"""Document decoder dispatch by document type."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ..exceptions import UnsupportedTypeError
from ..interfaces.decoder import IDocumentDecoder
from ..models.document import DecodedDocument
from ..models.enums import DocumentType
from .pdf_parser import PDFDocumentDecoder
from .word_parser import WordDocumentDecoder


SUPPORTED_EXTENSIONS = {
    ".docx": DocumentType.DOCX,
    ".pdf": DocumentType.PDF,
}


def detect_document_type(file_path: Union[str, Path]) -> DocumentType:
    """
    Detect the document type from the file extension.

    Args:
        file_path: Path to the document file.

    Returns:
        DocumentType enum value.

    Raises:
        UnsupportedTypeError: If the extension is not supported.
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return SUPPORTED_EXTENSIONS[suffix]
    except KeyError:
        raise UnsupportedTypeError(
            message=f"Unsupported file type: {suffix or '(none)'}",
            file_path=str(file_path),
            location="file extension",
            details={"supported_formats": list(SUPPORTED_EXTENSIONS)}
        )


class DocumentDecoder:
    """
    Main decoder that delegates to format-specific decoders.

    The decoder table is fixed at construction time; pass ``decoders`` to
    substitute an implementation for a document type.
    """

    def __init__(self, decoders: Optional[Dict[DocumentType, IDocumentDecoder]] = None):
        self._decoders: Dict[DocumentType, IDocumentDecoder] = {
            DocumentType.DOCX: WordDocumentDecoder(),
            DocumentType.PDF: PDFDocumentDecoder(),
        }
        if decoders:
            self._decoders.update(decoders)

    def decode_file(self, file_path: Union[str, Path]) -> DecodedDocument:
        """
        Decode a document file.

        The type is checked before the file is read.

        Args:
            file_path: Path to the document file.

        Returns:
            DecodedDocument with text and tables.

        Raises:
            UnsupportedTypeError: If the file type is not supported.
            FileNotFoundError: If the file does not exist.
            DecodeError: If the document cannot be decoded.
        """
        doc_type = detect_document_type(file_path)
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        return self.decode(path.read_bytes(), doc_type, file_name=path.name)

    def decode(
        self,
        data: bytes,
        doc_type: DocumentType,
        file_name: Optional[str] = None,
    ) -> DecodedDocument:
        """Decode raw bytes with the decoder registered for ``doc_type``."""
        return self._decoders[doc_type].decode(data, file_name=file_name)

    def get_supported_formats(self) -> List[str]:
        """Return list of supported file extensions."""
        extensions: List[str] = []
        for decoder in self._decoders.values():
            extensions.extend(decoder.get_supported_extensions())
        return extensions
