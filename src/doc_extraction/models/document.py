"""Decoder output model for the document extraction system."""

from dataclasses import dataclass, field
from typing import List, Optional

from .content import TableGrid
from .enums import DocumentType


@dataclass
class DecodedDocument:
    """
    Plain text and raw table grids recovered from a source document.

    Produced by a document decoder and consumed by the content analyzer.
    Page and paragraph counts are whichever the decoder could supply.
    """
    doc_type: DocumentType
    text: str = ""
    tables: List[TableGrid] = field(default_factory=list)
    page_count: Optional[int] = None
    paragraph_count: Optional[int] = None

    def __post_init__(self):
        if self.tables is None:
            self.tables = []
