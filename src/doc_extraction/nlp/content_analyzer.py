"""Classification of segmented text into typed content units.

The analyzer bridges paragraphs to the label scorer and applies the
confidence policy:

- Paragraphs shorter than ten characters are never classified.
- The top-ranked label's score is adjusted for text length (see
  ``calculate_confidence``) and the paragraph is dropped entirely when
  the adjusted confidence is below the threshold.
- A scorer failure never escapes: the paragraph is scored zero for every
  label and processing continues with the next paragraph.

Tables bypass the scorer and always become ``table`` units with full
confidence.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config.models import ConfigurationError
from ..interfaces.scorer import ILabelScorer, LabelScore
from ..models.content import ContentUnit, Position, TableGrid
from ..models.enums import DEFAULT_CLASSIFICATION_LABELS, ContentType
from ..utils.text import (
    MIN_PARAGRAPH_LENGTH,
    calculate_confidence,
    generate_id,
    normalize_text,
    split_into_paragraphs,
)


logger = logging.getLogger(__name__)

TABLE_CONFIDENCE = 1.0


class ContentAnalyzer:
    """Turns paragraphs and tables into content units."""

    def __init__(
        self,
        scorer: ILabelScorer,
        confidence_threshold: float = 0.5,
        classification_labels: Optional[Sequence[str]] = None,
    ):
        self._scorer = scorer
        self._confidence_threshold = 0.5
        self._classification_labels = list(DEFAULT_CLASSIFICATION_LABELS)

        self.set_confidence_threshold(confidence_threshold)
        if classification_labels is not None:
            self.set_classification_labels(classification_labels)

    @property
    def confidence_threshold(self) -> float:
        return self._confidence_threshold

    @property
    def classification_labels(self) -> List[str]:
        return list(self._classification_labels)

    def analyze_text(self, text: str, page: Optional[int] = None) -> List[ContentUnit]:
        """
        Segment text into paragraphs and classify each one in order.

        Args:
            text: Raw document text.
            page: Page number to record on every unit, when known.

        Returns:
            Units for the paragraphs that passed the threshold, in document order.
        """
        paragraphs = split_into_paragraphs(normalize_text(text))
        units: List[ContentUnit] = []

        for index, paragraph in enumerate(paragraphs):
            unit = self.classify_paragraph(paragraph, paragraph_index=index, page=page)
            if unit is not None:
                units.append(unit)

        logger.debug(
            f"Classified {len(units)} of {len(paragraphs)} paragraphs "
            f"at threshold {self._confidence_threshold}"
        )
        return units

    def classify_paragraph(
        self,
        text: str,
        paragraph_index: Optional[int] = None,
        labels: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
    ) -> Optional[ContentUnit]:
        """
        Classify one paragraph.

        Args:
            text: Paragraph text.
            paragraph_index: Ordinal of the paragraph in the document.
            labels: Candidate labels; defaults to the configured label set.
            page: Page number, when known.

        Returns:
            A ContentUnit, or None if the paragraph is too short, unscored,
            or below the confidence threshold.
        """
        text = normalize_text(text)
        if len(text) < MIN_PARAGRAPH_LENGTH:
            return None

        candidate_labels = list(labels) if labels is not None else self._classification_labels
        scores = self._score(text, candidate_labels, paragraph_index)
        if not scores:
            return None

        top = scores[0]
        confidence = calculate_confidence(text, top.score)
        if confidence < self._confidence_threshold:
            return None

        return ContentUnit(
            id=generate_id(),
            type=top.label,
            text=text,
            confidence=confidence,
            position=Position(page=page, paragraph=paragraph_index),
        )

    def analyze_tables(
        self,
        tables: Sequence[TableGrid],
        page: Optional[int] = None,
    ) -> List[ContentUnit]:
        """Convert tables to ``table`` units without scoring them."""
        units: List[ContentUnit] = []

        for table in tables:
            units.append(ContentUnit(
                id=generate_id(),
                type=ContentType.TABLE.value,
                text=table.to_text(),
                confidence=TABLE_CONFIDENCE,
                position=Position(page=page) if page is not None else None,
                table_data=table,
            ))

        return units

    def _score(
        self,
        text: str,
        labels: List[str],
        paragraph_index: Optional[int],
    ) -> List[LabelScore]:
        """Score text, degrading to all-zero scores if the scorer fails."""
        try:
            return self._scorer.score(text, labels)
        except Exception as e:
            logger.warning(
                f"Scoring failed for paragraph {paragraph_index}, "
                f"falling back to zero scores: {e}"
            )
            return [LabelScore(label=label, score=0.0) for label in labels]

    def set_confidence_threshold(self, threshold: float) -> None:
        """
        Update the confidence threshold.

        Raises:
            ConfigurationError: If threshold is not between 0.0 and 1.0.
        """
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigurationError("Confidence threshold must be a number")
        if not 0.0 <= threshold <= 1.0:
            raise ConfigurationError("Confidence threshold must be between 0 and 1")
        self._confidence_threshold = float(threshold)

    def set_classification_labels(self, labels: Sequence[str]) -> None:
        """
        Update the classification labels.

        Raises:
            ConfigurationError: If no non-empty label is given.
        """
        cleaned = [label.strip() for label in labels if label and label.strip()]
        if not cleaned:
            raise ConfigurationError("Classification labels cannot be empty")
        self._classification_labels = cleaned
