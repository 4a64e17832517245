"""JSON exporter."""

from pathlib import Path

from ..interfaces.exporter import ExportOptions
from ..models.content import ExtractionResult
from ..models.enums import ExportFormat
from .base import FileExporter
from .serialization import ExtractionResultSerializer


class JsonExporter(FileExporter):
    """Writes the order-preserving JSON projection of a result."""

    format = ExportFormat.JSON

    def _write(self, result: ExtractionResult, options: ExportOptions, path: Path) -> None:
        content = ExtractionResultSerializer.serialize(
            result,
            include_metadata=options.include_metadata,
            pretty_print=options.pretty_print,
        )
        path.write_text(content, encoding="utf-8")
