"""Exporter interface for the document extraction system."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..models.content import ExtractionResult
from ..models.enums import ExportFormat


@dataclass
class ExportOptions:
    """Options shared by every export format."""
    format: ExportFormat
    output_path: Union[str, Path]
    include_metadata: bool = True
    pretty_print: bool = True


class IExporter(ABC):
    """
    Abstract interface for result serialization.

    Each implementation writes exactly one artifact per call, replacing
    any existing file at the destination.
    """

    @abstractmethod
    def export(self, result: ExtractionResult, options: ExportOptions) -> Path:
        """
        Write an extraction result to ``options.output_path``.

        Args:
            result: The extraction result to serialize.
            options: Destination and formatting options.

        Returns:
            Path of the written file.

        Raises:
            ExportError: If the destination cannot be written.
        """
        pass

    @abstractmethod
    def get_supported_formats(self) -> List[ExportFormat]:
        """Return the formats this exporter produces."""
        pass
