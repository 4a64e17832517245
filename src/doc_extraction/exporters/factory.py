"""Resolution of export formats to exporters."""

from pathlib import Path
from typing import Dict, List, Union

from ..exceptions import ExportError
from ..interfaces.exporter import ExportOptions, IExporter
from ..models.content import ExtractionResult
from ..models.enums import ExportFormat
from .csv_exporter import CsvExporter
from .excel_exporter import ExcelExporter
from .json_exporter import JsonExporter


EXPORTERS: Dict[ExportFormat, IExporter] = {
    ExportFormat.JSON: JsonExporter(),
    ExportFormat.CSV: CsvExporter(),
    ExportFormat.XLSX: ExcelExporter(),
}


def get_supported_formats() -> List[ExportFormat]:
    return list(EXPORTERS)


def get_exporter(export_format: Union[ExportFormat, str]) -> IExporter:
    """
    Return the exporter for a format.

    Args:
        export_format: An ExportFormat or its string value (``"json"``...).

    Raises:
        ExportError: If the format is not supported.
    """
    if not isinstance(export_format, ExportFormat):
        try:
            export_format = ExportFormat(str(export_format).lower())
        except ValueError:
            raise ExportError(
                message=f"No exporter available for format: {export_format}",
                details={"supported_formats": [f.value for f in EXPORTERS]},
            )

    exporter = EXPORTERS.get(export_format)
    if exporter is None:
        raise ExportError(
            message=f"No exporter available for format: {export_format.value}",
            details={"supported_formats": [f.value for f in EXPORTERS]},
        )
    return exporter


def export_result(result: ExtractionResult, options: ExportOptions) -> Path:
    """Write ``result`` in ``options.format`` to ``options.output_path``."""
    return get_exporter(options.format).export(result, options)
