"""Extraction result data models for the document extraction system."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .enums import ContentType, DocumentType


@dataclass
class TableGrid:
    """
    Rectangular tabular data.

    ``headers`` is None when no header row was detected. Rows may be
    ragged; missing cells render as empty strings.
    """
    rows: List[List[str]] = field(default_factory=list)
    headers: Optional[List[str]] = None

    def __post_init__(self):
        if self.rows is None:
            self.rows = []

    def to_text(self) -> str:
        """Render the table as pipe-separated lines."""
        lines = []
        if self.headers:
            lines.append(" | ".join(self.headers))
            lines.append("-" * 50)
        for row in self.rows:
            lines.append(" | ".join(row))
        return "\n".join(lines)


@dataclass(frozen=True)
class Position:
    """Sparse location of a content unit inside its source document."""
    page: Optional[int] = None
    paragraph: Optional[int] = None
    line: Optional[int] = None

    def to_dict(self) -> Dict[str, int]:
        """Only the coordinates the decoder could supply."""
        return {
            key: value
            for key, value in (
                ("page", self.page),
                ("paragraph", self.paragraph),
                ("line", self.line),
            )
            if value is not None
        }


@dataclass(frozen=True)
class ContentUnit:
    """
    One classified fragment of a document.

    Created once by the content analyzer (paragraphs) or the table
    conversion step and never modified afterwards.
    """
    id: str
    type: str
    text: str
    confidence: float
    position: Optional[Position] = None
    table_data: Optional[TableGrid] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_table(self) -> bool:
        return self.type == ContentType.TABLE.value


@dataclass
class DocumentMetadata:
    """Source description attached to an extraction result."""
    file_name: str
    file_type: DocumentType
    extracted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    total_pages: Optional[int] = None
    total_paragraphs: Optional[int] = None


@dataclass
class ExtractionSummary:
    """Item counts, recomputed on every extraction."""
    total_items: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)


@dataclass
class ExtractionResult:
    """
    Result of extracting one document.

    Contents are in encounter order: text units in document order,
    followed by table units in document order.
    """
    metadata: DocumentMetadata
    contents: List[ContentUnit] = field(default_factory=list)
    summary: ExtractionSummary = field(default_factory=ExtractionSummary)

    def __post_init__(self):
        if self.contents is None:
            self.contents = []

    @property
    def tables(self) -> List[ContentUnit]:
        """Units that carry table data."""
        return [unit for unit in self.contents if unit.table_data is not None]
