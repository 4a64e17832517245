"""Merging of classified units into the final result ordering and summary."""

from typing import Dict, Iterable, List, Tuple

from .models.content import ContentUnit, ExtractionSummary


class ResultAggregator:
    """
    Combines text units and table units into one ordered sequence.

    Text units come first, in document order, followed by table units in
    document order. The summary is always recomputed from the merged
    sequence so its counts can never drift from the contents.
    """

    def aggregate(
        self,
        text_units: Iterable[ContentUnit],
        table_units: Iterable[ContentUnit],
    ) -> Tuple[List[ContentUnit], ExtractionSummary]:
        """
        Merge units and compute their summary.

        Args:
            text_units: Classified paragraph units.
            table_units: Table units.

        Returns:
            Tuple of (merged contents, summary).
        """
        contents = list(text_units) + list(table_units)
        return contents, self.build_summary(contents)

    def build_summary(self, contents: Iterable[ContentUnit]) -> ExtractionSummary:
        """Count units overall and per type, in first-seen type order."""
        by_type: Dict[str, int] = {}
        total = 0
        for unit in contents:
            by_type[unit.type] = by_type.get(unit.type, 0) + 1
            total += 1
        return ExtractionSummary(total_items=total, by_type=by_type)
