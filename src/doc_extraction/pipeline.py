"""End-to-end extraction pipeline for the document extraction system.

This module wires the decoder, content analyzer, aggregator and exporters
together. One document is decoded, classified and aggregated completely
before the next one starts.
"""

import logging
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from .aggregator import ResultAggregator
from .config.config_manager import ConfigurationManager
from .config.models import ExtractorConfig
from .exceptions import ExtractionError
from .exporters.factory import export_result
from .interfaces.exporter import ExportOptions
from .interfaces.scorer import ILabelScorer
from .models.content import DocumentMetadata, ExtractionResult
from .nlp.content_analyzer import ContentAnalyzer
from .nlp.label_scorer import get_label_scorer
from .parsers.base import DocumentDecoder, detect_document_type


logger = logging.getLogger(__name__)


@dataclass
class BatchItemResult:
    """Outcome of extracting one document of a batch."""

    file_path: str
    result: Optional[ExtractionResult] = None
    error: Optional[Exception] = None
    processing_time: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class ExtractorStats:
    """Statistics about extractions run by one extractor."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    average_processing_time: float = 0.0
    total_processing_time: float = 0.0


class DocumentExtractor:
    """
    Main entry point turning documents into extraction results.

    The configuration is validated at construction time, so an invalid
    threshold or label list fails before any document is read. Components
    can be injected; by default the process-wide scorer for the configured
    model is used.
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        decoder: Optional[DocumentDecoder] = None,
        scorer: Optional[ILabelScorer] = None,
        aggregator: Optional[ResultAggregator] = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Extractor configuration (defaults to ExtractorConfig()).
            decoder: Optional document decoder (created if not provided).
            scorer: Optional label scorer (process-wide scorer if not provided).
            aggregator: Optional result aggregator (created if not provided).

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self._config_manager = ConfigurationManager()
        self._config_manager.update(**(config or ExtractorConfig()).to_dict())
        self.stats = ExtractorStats()

        self._owns_scorer = scorer is None
        self._scorer = scorer or get_label_scorer(self.config.model_name)
        self._decoder = decoder or DocumentDecoder()
        self._aggregator = aggregator or ResultAggregator()
        self._analyzer = self._build_analyzer()

        logger.info("Document extractor initialized")

    @property
    def config(self) -> ExtractorConfig:
        return self._config_manager.configuration

    @property
    def scorer(self) -> ILabelScorer:
        return self._scorer

    def _build_analyzer(self) -> ContentAnalyzer:
        return ContentAnalyzer(
            self._scorer,
            confidence_threshold=self.config.confidence_threshold,
            classification_labels=self.config.classification_labels,
        )

    def extract(self, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Extract classified content from a document.

        Args:
            file_path: Path to a .docx or .pdf file.

        Returns:
            ExtractionResult with text units followed by table units.

        Raises:
            UnsupportedTypeError: If the file type is not supported.
            FileNotFoundError: If the file does not exist.
            DecodeError: If the document cannot be decoded.
            LabelScorerError: If the scoring model cannot be loaded.
        """
        start_time = time.time()
        path = Path(file_path)
        logger.info(f"Extracting content from: {path}")

        try:
            doc_type = detect_document_type(path)
            if not path.is_file():
                raise FileNotFoundError(f"File not found: {path}")
            self._scorer.ensure_ready()

            decoded = self._decoder.decode_file(path)
            logger.debug(
                f"Decoded {path.name}: {len(decoded.text)} characters, "
                f"{len(decoded.tables)} tables"
            )

            text_units = self._analyzer.analyze_text(decoded.text)
            table_units = []
            if self.config.enable_table_extraction and decoded.tables:
                table_units = self._analyzer.analyze_tables(decoded.tables)

            contents, summary = self._aggregator.aggregate(text_units, table_units)
            result = ExtractionResult(
                metadata=DocumentMetadata(
                    file_name=path.name,
                    file_type=doc_type,
                    total_pages=decoded.page_count,
                    total_paragraphs=decoded.paragraph_count,
                ),
                contents=contents,
                summary=summary,
            )
        except Exception:
            self._update_stats(success=False, processing_time=time.time() - start_time)
            raise

        processing_time = time.time() - start_time
        self._update_stats(success=True, processing_time=processing_time)
        logger.info(
            f"Extraction complete: {summary.total_items} items extracted "
            f"from {path.name} in {processing_time:.2f}s"
        )
        return result

    def extract_batch(
        self,
        file_paths: Iterable[Union[str, Path]],
    ) -> Iterator[BatchItemResult]:
        """
        Extract several documents one after another.

        A failure on one document is reported in its BatchItemResult and
        does not stop the batch. Results are yielded as each document
        finishes, so a caller can stop between documents.
        """
        for file_path in file_paths:
            start_time = time.time()
            try:
                result = self.extract(file_path)
                yield BatchItemResult(
                    file_path=str(file_path),
                    result=result,
                    processing_time=time.time() - start_time,
                )
            except (ExtractionError, OSError) as e:
                logger.error(f"Failed to extract {file_path}: {e}")
                yield BatchItemResult(
                    file_path=str(file_path),
                    error=e,
                    processing_time=time.time() - start_time,
                )

    def export_result(self, result: ExtractionResult, options: ExportOptions) -> Path:
        """
        Export an extraction result.

        Raises:
            ExportError: If the destination cannot be written.
        """
        return export_result(result, options)

    def extract_and_export(
        self,
        file_path: Union[str, Path],
        options: ExportOptions,
    ) -> Tuple[ExtractionResult, Path]:
        """Extract a document and export the result in one step."""
        result = self.extract(file_path)
        return result, self.export_result(result, options)

    def update_config(self, **changes: Any) -> ExtractorConfig:
        """
        Change configuration values.

        Changes are validated together; if any is invalid nothing is
        applied.

        Raises:
            ConfigurationError: If the resulting configuration is invalid.
        """
        previous_model = self.config.model_name
        self._config_manager.update(**changes)

        if self._owns_scorer and self.config.model_name != previous_model:
            self._scorer = get_label_scorer(self.config.model_name)

        self._analyzer = self._build_analyzer()
        logger.info(f"Configuration updated: {sorted(changes)}")
        return self.get_config()

    def get_config(self) -> ExtractorConfig:
        """Return a copy of the current configuration."""
        return replace(
            self.config,
            classification_labels=list(self.config.classification_labels),
        )

    def _update_stats(self, success: bool, processing_time: float) -> None:
        """Update extractor statistics."""
        self.stats.total_executions += 1
        if success:
            self.stats.successful_executions += 1
        else:
            self.stats.failed_executions += 1

        self.stats.total_processing_time += processing_time
        self.stats.average_processing_time = (
            self.stats.total_processing_time / self.stats.total_executions
        )
