"""CSV exporter.

One header row, one row per content unit. When metadata is requested,
``#``-prefixed comment lines describing the source document and the
summary are appended after the data rows; readers must skip them.
"""

import csv
from pathlib import Path
from typing import List

from ..interfaces.exporter import ExportOptions
from ..models.content import ContentUnit, ExtractionResult
from ..models.enums import ExportFormat
from .base import FileExporter


CSV_HEADERS = [
    "ID",
    "Type",
    "Content",
    "Confidence",
    "Page",
    "Paragraph",
    "Has Table Data",
]


class CsvExporter(FileExporter):
    """Writes content units as CSV rows with optional trailing comments."""

    format = ExportFormat.CSV

    def _write(self, result: ExtractionResult, options: ExportOptions, path: Path) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADERS)
            for unit in result.contents:
                writer.writerow(self._unit_to_row(unit))

            if options.include_metadata:
                f.write("\n".join(self._comment_lines(result)) + "\n")

    def _unit_to_row(self, unit: ContentUnit) -> List[str]:
        page = unit.position.page if unit.position else None
        paragraph = unit.position.paragraph if unit.position else None
        return [
            unit.id,
            unit.type,
            unit.text.replace("\r", " ").replace("\n", " "),
            format(unit.confidence, "g"),
            "" if page is None else str(page),
            "" if paragraph is None else str(paragraph),
            "Yes" if unit.table_data is not None else "No",
        ]

    def _comment_lines(self, result: ExtractionResult) -> List[str]:
        metadata = result.metadata
        lines = [
            "",
            "# Metadata",
            f"# File Name: {metadata.file_name}",
            f"# File Type: {metadata.file_type.value}",
            f"# Extracted At: {metadata.extracted_at.isoformat()}",
            f"# Total Pages: {_or_na(metadata.total_pages)}",
            f"# Total Paragraphs: {_or_na(metadata.total_paragraphs)}",
            "",
            "# Summary",
            f"# Total Items: {result.summary.total_items}",
            "# By Type:",
        ]
        for content_type, count in result.summary.by_type.items():
            lines.append(f"#   {content_type}: {count}")
        return lines


def _or_na(value) -> str:
    return "N/A" if value is None else str(value)
