"""
Document Extraction System

Turns Word and PDF business documents into typed, confidence-scored
content units (business rules, formulas, conditions, definitions, tables)
and exports them as JSON, CSV or Excel workbooks.
"""

__version__ = "0.1.0"

# Export main components
from .aggregator import ResultAggregator
from .config import ConfigurationError, ConfigurationManager, ExtractorConfig, ValidationResult
from .exceptions import (
    DecodeError,
    DocumentCorruptedError,
    ExportError,
    ExtractionError,
    UnsupportedTypeError,
)
from .exporters import ExtractionResultSerializer, export_result, get_exporter
from .extractors import MergedFieldTable, StructuredField, StructuredFieldExtractor
from .interfaces import ExportOptions, IDocumentDecoder, IExporter, ILabelScorer, LabelScore
from .models import (
    ContentType,
    ContentUnit,
    DecodedDocument,
    DocumentMetadata,
    DocumentType,
    ExportFormat,
    ExtractionResult,
    ExtractionSummary,
    Position,
    TableGrid,
)
from .nlp import ContentAnalyzer, EmbeddingLabelScorer, LabelScorerError, get_label_scorer
from .parsers import DocumentDecoder, TableHeuristicDetector
from .pipeline import BatchItemResult, DocumentExtractor

__all__ = [
    "BatchItemResult",
    "ConfigurationError",
    "ConfigurationManager",
    "ContentAnalyzer",
    "ContentType",
    "ContentUnit",
    "DecodeError",
    "DecodedDocument",
    "DocumentCorruptedError",
    "DocumentDecoder",
    "DocumentExtractor",
    "DocumentMetadata",
    "DocumentType",
    "EmbeddingLabelScorer",
    "ExportError",
    "ExportFormat",
    "ExportOptions",
    "ExtractionError",
    "ExtractionResult",
    "ExtractionResultSerializer",
    "ExtractionSummary",
    "ExtractorConfig",
    "IDocumentDecoder",
    "IExporter",
    "ILabelScorer",
    "LabelScore",
    "LabelScorerError",
    "MergedFieldTable",
    "Position",
    "ResultAggregator",
    "StructuredField",
    "StructuredFieldExtractor",
    "TableGrid",
    "TableHeuristicDetector",
    "UnsupportedTypeError",
    "ValidationResult",
    "export_result",
    "get_exporter",
    "get_label_scorer",
]
