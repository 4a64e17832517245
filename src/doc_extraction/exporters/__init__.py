"""Exporters writing extraction results as JSON, CSV or Excel workbooks."""

from .base import FileExporter
from .csv_exporter import CsvExporter
from .excel_exporter import ExcelExporter
from .factory import export_result, get_exporter, get_supported_formats
from .json_exporter import JsonExporter
from .serialization import ExtractionResultSerializer

__all__ = [
    "CsvExporter",
    "ExcelExporter",
    "ExtractionResultSerializer",
    "FileExporter",
    "JsonExporter",
    "export_result",
    "get_exporter",
    "get_supported_formats",
]
