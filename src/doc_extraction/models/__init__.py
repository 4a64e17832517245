"""Data models and enums for the document extraction system."""

from .enums import (
    DEFAULT_CLASSIFICATION_LABELS,
    ContentType,
    DocumentType,
    ExportFormat,
)
from .content import (
    ContentUnit,
    DocumentMetadata,
    ExtractionResult,
    ExtractionSummary,
    Position,
    TableGrid,
)
from .document import DecodedDocument

__all__ = [
    # Enums
    "DEFAULT_CLASSIFICATION_LABELS",
    "ContentType",
    "DocumentType",
    "ExportFormat",
    # Content models
    "ContentUnit",
    "DocumentMetadata",
    "ExtractionResult",
    "ExtractionSummary",
    "Position",
    "TableGrid",
    # Decoder output
    "DecodedDocument",
]
