"""Enumerations for the document extraction system."""

from enum import Enum


class DocumentType(Enum):
    """Document format types supported by the system."""
    DOCX = "docx"
    PDF = "pdf"


class ExportFormat(Enum):
    """Serialized output formats for extraction results."""
    JSON = "json"
    CSV = "csv"
    XLSX = "xlsx"


class ContentType(Enum):
    """Built-in content labels.

    Any label string can be configured; these are the defaults plus the
    reserved ``table`` type given to table units.
    """
    BUSINESS_RULE = "business_rule"
    FORMULA = "formula"
    CONDITION = "condition"
    DEFINITION = "definition"
    TEXT = "text"
    TABLE = "table"


DEFAULT_CLASSIFICATION_LABELS = [
    ContentType.BUSINESS_RULE.value,
    ContentType.FORMULA.value,
    ContentType.CONDITION.value,
    ContentType.DEFINITION.value,
    ContentType.TEXT.value,
]
