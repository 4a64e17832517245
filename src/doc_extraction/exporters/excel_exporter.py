"""Excel workbook exporter.

Writes up to five sheets, in order:

- ``Metadata`` (only when metadata is requested): property/value pairs.
- ``All Data``: one row per content unit.
- ``Tables``: every table unit, captioned ``Table N``.
- ``Structured Data``: merged ``label: values`` fields found in unit text,
  one column per field.
- ``Summary``: count per content type and the total.

Sheets with nothing to show get a single informational row instead of
being left empty.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from ..extractors.structured_fields import StructuredFieldExtractor
from ..interfaces.exporter import ExportOptions
from ..models.content import ExtractionResult
from ..models.enums import ExportFormat
from .base import FileExporter


MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 50

NO_TABLES_MESSAGE = "No tables found in document"
NO_STRUCTURED_DATA_MESSAGE = "No structured key-value data found"


class ExcelExporter(FileExporter):
    """Writes an extraction result as an .xlsx workbook."""

    format = ExportFormat.XLSX

    def __init__(self, field_extractor: Optional[StructuredFieldExtractor] = None):
        self._field_extractor = field_extractor or StructuredFieldExtractor()

    def _write(self, result: ExtractionResult, options: ExportOptions, path: Path) -> None:
        workbook = Workbook()
        workbook.remove(workbook.active)

        if options.include_metadata:
            self._add_sheet(workbook, "Metadata", self._metadata_rows(result))
        self._add_sheet(workbook, "All Data", self._main_data_rows(result))
        self._add_sheet(workbook, "Tables", self._table_rows(result))
        self._add_sheet(workbook, "Structured Data", self._structured_data_rows(result))
        self._add_sheet(workbook, "Summary", self._summary_rows(result))

        workbook.save(path)

    def _metadata_rows(self, result: ExtractionResult) -> List[List[Any]]:
        metadata = result.metadata
        return [
            ["Property", "Value"],
            ["File Name", metadata.file_name],
            ["File Type", metadata.file_type.value],
            ["Extracted At", metadata.extracted_at.isoformat()],
            ["Total Pages", _or_na(metadata.total_pages)],
            ["Total Paragraphs", _or_na(metadata.total_paragraphs)],
            ["Total Extracted Items", str(len(result.contents))],
        ]

    def _main_data_rows(self, result: ExtractionResult) -> List[List[Any]]:
        rows: List[List[Any]] = [["ID", "Type", "Content", "Confidence", "Page", "Paragraph"]]
        for unit in result.contents:
            position = unit.position
            rows.append([
                unit.id,
                unit.type,
                unit.text,
                unit.confidence,
                position.page if position else None,
                position.paragraph if position else None,
            ])
        return rows

    def _table_rows(self, result: ExtractionResult) -> List[List[Any]]:
        tables = result.tables
        if not tables:
            return [[NO_TABLES_MESSAGE]]

        rows: List[List[Any]] = []
        for index, unit in enumerate(tables, start=1):
            rows.append([f"Table {index}"])
            rows.append([])
            if unit.table_data.headers:
                rows.append(list(unit.table_data.headers))
            rows.extend(list(row) for row in unit.table_data.rows)
            rows.append([])
            rows.append([])
        return rows

    def _structured_data_rows(self, result: ExtractionResult) -> List[List[Any]]:
        table = self._field_extractor.extract_table(unit.text for unit in result.contents)
        if table.is_empty:
            return [[NO_STRUCTURED_DATA_MESSAGE]]

        keys = table.keys
        rows: List[List[Any]] = [list(keys)]
        for row in table.to_rows():
            rows.append([row[key] for key in keys])
        return rows

    def _summary_rows(self, result: ExtractionResult) -> List[List[Any]]:
        rows: List[List[Any]] = [["Content Type", "Count"]]
        for content_type, count in result.summary.by_type.items():
            rows.append([content_type, count])
        rows.append([])
        rows.append(["Total Items", result.summary.total_items])
        return rows

    def _add_sheet(self, workbook: Workbook, title: str, rows: Sequence[List[Any]]) -> None:
        worksheet = workbook.create_sheet(title=title)
        for row in rows:
            values = [_clean_cell(cell) for cell in row]
            worksheet.append(values)
            for column, value in enumerate(values, start=1):
                # Unit text such as "= price * qty" is data, not a formula
                if isinstance(value, str) and value.startswith("="):
                    worksheet.cell(row=worksheet.max_row, column=column).data_type = "s"

        for column, width in self._column_widths(rows).items():
            worksheet.column_dimensions[get_column_letter(column)].width = width

    def _column_widths(self, rows: Sequence[List[Any]]) -> Dict[int, int]:
        """Per-column width: longest cell plus two, clamped to [10, 50]."""
        widths: Dict[int, int] = {}
        for row in rows:
            for column, cell in enumerate(row, start=1):
                length = len(str(cell)) if cell is not None else 0
                widths[column] = max(
                    widths.get(column, MIN_COLUMN_WIDTH),
                    min(length + 2, MAX_COLUMN_WIDTH),
                )
        return widths


def _clean_cell(value: Any) -> Any:
    # openpyxl rejects control characters in string cells
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _or_na(value: Optional[int]) -> str:
    return "N/A" if value is None else str(value)
