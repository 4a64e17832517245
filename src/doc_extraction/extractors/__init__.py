"""Structured data extraction components."""

from .structured_fields import MergedFieldTable, StructuredField, StructuredFieldExtractor

__all__ = [
    "MergedFieldTable",
    "StructuredField",
    "StructuredFieldExtractor",
]
