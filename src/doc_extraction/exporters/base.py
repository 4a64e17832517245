"""Shared file-writing behaviour for exporters."""

import logging
from abc import abstractmethod
from pathlib import Path
from typing import List

from ..exceptions import ExportError
from ..interfaces.exporter import ExportOptions, IExporter
from ..models.content import ExtractionResult
from ..models.enums import ExportFormat


logger = logging.getLogger(__name__)


class FileExporter(IExporter):
    """
    Base class for exporters that write one file per call.

    Subclasses implement ``_write``. This class creates missing parent
    directories and turns any ``OSError`` into an ``ExportError`` so the
    caller can retry exporting the same result elsewhere.
    """

    format: ExportFormat

    def export(self, result: ExtractionResult, options: ExportOptions) -> Path:
        path = Path(options.output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._write(result, options, path)
        except OSError as e:
            raise ExportError(
                message=f"Failed to export to {self.format.value.upper()}: {e}",
                file_path=str(path),
                details={"format": self.format.value},
            ) from e

        logger.info(f"Exported to {self.format.value.upper()}: {path}")
        return path

    def get_supported_formats(self) -> List[ExportFormat]:
        return [self.format]

    @abstractmethod
    def _write(self, result: ExtractionResult, options: ExportOptions, path: Path) -> None:
        """
        Write the artifact to ``path``.

        Args:
            result: The extraction result to serialize.
            options: Formatting options.
            path: Destination whose parent directory already exists.
        """
        pass
