"""Structured key-value field extraction.

This module recognizes inline ``label: value, value, ...`` assertions in
arbitrary prose, merges repeated labels across a document and reshapes
the merged result into rows for tabular export. For example::

    Country: India, US, China
    TripType: OneWay, RoundTrip

becomes the rows ``{India, OneWay}``, ``{US, RoundTrip}``, ``{China, ""}``.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass
class StructuredField:
    """One detected key/value-list occurrence."""
    key: str
    values: List[str]
    raw_span: str  # exact matched text, kept for debugging


@dataclass
class MergedFieldTable:
    """
    Field keys mapped to the de-duplicated union of their values.

    Keys and values keep first-seen order. Duplicate detection is an exact
    string match with no case folding.
    """
    fields: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def keys(self) -> List[str]:
        return list(self.fields)

    @property
    def row_count(self) -> int:
        return max((len(values) for values in self.fields.values()), default=0)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0

    def add(self, key: str, values: Iterable[str]) -> None:
        """Merge values into ``key``, skipping ones already present."""
        existing = self.fields.setdefault(key, [])
        for value in values:
            if value not in existing:
                existing.append(value)

    def to_rows(self) -> List[Dict[str, str]]:
        """
        Reshape into rows; row i holds each key's i-th value.

        Keys whose value list is exhausted get an empty string, so every
        row has exactly one cell per key.
        """
        rows = []
        for i in range(self.row_count):
            rows.append({
                key: values[i] if i < len(values) else ""
                for key, values in self.fields.items()
            })
        return rows


class StructuredFieldExtractor:
    """
    Pattern-based extractor for ``label: value[, value...]`` fields.

    A label is one or more word tokens on a single line. The value span
    runs to the next semicolon, line break or end of input; commas split
    values but never end the span, so a value cannot contain a comma.
    """

    FIELD_PATTERN = re.compile(r'(\w+(?:[^\S\n]+\w+)*)[^\S\n]*:[^\S\n]*([^;\r\n]+)')
    VALUE_DELIMITERS = re.compile(r'[,;|]')
    CONJUNCTIONS = re.compile(r'\s+(?:and|or)\s+', re.IGNORECASE)

    def extract_fields(self, text: str) -> List[StructuredField]:
        """
        Extract structured fields from a text span.

        Args:
            text: Arbitrary text, possibly multi-line.

        Returns:
            Fields in order of appearance. Matches whose value span yields
            no values are dropped.
        """
        fields: List[StructuredField] = []

        for line in text.split('\n'):
            # Lines without a colon cannot hold a field
            if ':' not in line:
                continue

            for match in self.FIELD_PATTERN.finditer(line):
                key = match.group(1).strip()
                values = self.split_values(match.group(2).strip())
                if values:
                    fields.append(StructuredField(
                        key=key,
                        values=values,
                        raw_span=match.group(0),
                    ))

        return fields

    def split_values(self, span: str) -> List[str]:
        """
        Split a value span into individual values.

        Delimiters (comma, semicolon, pipe) are tried first; only a span
        containing none of them falls back to an ``and``/``or`` split.
        """
        values = [v.strip() for v in self.VALUE_DELIMITERS.split(span)]

        if len(values) == 1:
            values = [v.strip() for v in self.CONJUNCTIONS.split(span)]

        return [v for v in values if v]

    def extract_from_multiple(self, texts: Iterable[str]) -> List[StructuredField]:
        """Extract fields from several text spans, preserving span order."""
        all_fields: List[StructuredField] = []
        for text in texts:
            all_fields.extend(self.extract_fields(text))
        return all_fields

    def merge_fields(self, fields: Iterable[StructuredField]) -> MergedFieldTable:
        """Merge fields sharing the exact same key."""
        merged = MergedFieldTable()
        for structured_field in fields:
            merged.add(structured_field.key, structured_field.values)
        return merged

    def to_flat_structure(self, fields: Iterable[StructuredField]) -> List[Dict[str, str]]:
        """Merge fields and reshape them into rows for tabular export."""
        return self.merge_fields(fields).to_rows()

    def extract_table(self, texts: Iterable[str]) -> MergedFieldTable:
        """Extract and merge fields from every text span of a document."""
        return self.merge_fields(self.extract_from_multiple(texts))
