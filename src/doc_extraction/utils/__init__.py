"""Shared helpers for the document extraction system."""

from .text import (
    MIN_PARAGRAPH_LENGTH,
    calculate_confidence,
    generate_id,
    normalize_text,
    split_into_paragraphs,
)

__all__ = [
    "MIN_PARAGRAPH_LENGTH",
    "calculate_confidence",
    "generate_id",
    "normalize_text",
    "split_into_paragraphs",
]
