"""Data models for extractor configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.enums import DEFAULT_CLASSIFICATION_LABELS


DEFAULT_MODEL_NAME = "sentence-transformers/all-MiniLM-L6-v2"
DEFAULT_CONFIDENCE_THRESHOLD = 0.5


@dataclass
class ExtractorConfig:
    """
    Settings controlling classification and table extraction.

    Defaults match the command-line defaults.
    """
    classification_labels: List[str] = field(
        default_factory=lambda: list(DEFAULT_CLASSIFICATION_LABELS)
    )
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    enable_table_extraction: bool = True
    model_name: str = DEFAULT_MODEL_NAME

    def __post_init__(self):
        if self.classification_labels is None:
            self.classification_labels = list(DEFAULT_CLASSIFICATION_LABELS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classification_labels": list(self.classification_labels),
            "confidence_threshold": self.confidence_threshold,
            "enable_table_extraction": self.enable_table_extraction,
            "model_name": self.model_name,
        }


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result

    def __str__(self) -> str:
        if self.validation_result and self.validation_result.errors:
            return f"{self.message}: {'; '.join(self.validation_result.errors)}"
        return self.message
