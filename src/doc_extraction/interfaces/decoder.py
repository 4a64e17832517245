"""Document decoder interface for the document extraction system."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.document import DecodedDocument


class IDocumentDecoder(ABC):
    """
    Abstract interface for document decoding.

    Implementations of this interface turn the raw bytes of one document
    family (Word, PDF) into plain text plus raw table grids.
    """

    @abstractmethod
    def decode(self, data: bytes, file_name: Optional[str] = None) -> DecodedDocument:
        """
        Decode raw document bytes.

        Args:
            data: The complete document contents.
            file_name: Optional source name, used only for error reporting.

        Returns:
            DecodedDocument with text, tables and page/paragraph counts.

        Raises:
            DecodeError: If the bytes cannot be turned into text and tables.
        """
        pass

    @abstractmethod
    def get_supported_extensions(self) -> List[str]:
        """Return the file extensions this decoder handles."""
        pass
