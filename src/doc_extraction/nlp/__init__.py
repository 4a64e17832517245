"""Classification components for the document extraction system."""

from .content_analyzer import ContentAnalyzer
from .label_scorer import (
    DEFAULT_MODEL_NAME,
    EmbeddingLabelScorer,
    LabelScorerError,
    get_label_scorer,
)

__all__ = [
    "ContentAnalyzer",
    "DEFAULT_MODEL_NAME",
    "EmbeddingLabelScorer",
    "LabelScorerError",
    "get_label_scorer",
]
