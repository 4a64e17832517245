"""Abstract interfaces for the document extraction system."""

from .decoder import IDocumentDecoder
from .scorer import ILabelScorer, LabelScore
from .exporter import ExportOptions, IExporter

__all__ = [
    "IDocumentDecoder",
    "ILabelScorer",
    "LabelScore",
    "ExportOptions",
    "IExporter",
]
