"""Configuration Manager implementation for the document extraction system.

This module provides functionality to load, validate, save and update the
extractor configuration from dictionaries or JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .models import ConfigurationError, ExtractorConfig, ValidationResult


logger = logging.getLogger(__name__)

KNOWN_KEYS = (
    "classification_labels",
    "confidence_threshold",
    "enable_table_extraction",
    "model_name",
)


class ConfigurationManager:
    """
    Manager for extractor configuration.

    Every change, whether loaded from a file or applied as an update,
    goes through the same validation. An invalid configuration is never
    applied: the previous configuration stays in effect.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        """
        Initialize the configuration manager.

        Args:
            config: Starting configuration. Defaults to ExtractorConfig().
        """
        self._configuration = config or ExtractorConfig()
        self._is_loaded = False

    @property
    def configuration(self) -> ExtractorConfig:
        """Get the current extractor configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded from a source."""
        return self._is_loaded

    def load(self, source: Union[str, Path, Dict[str, Any]]) -> ValidationResult:
        """
        Load and validate a configuration.

        Keys missing from the source keep their default values.

        Args:
            source: JSON file path or dictionary.

        Returns:
            ValidationResult with any warnings.

        Raises:
            ConfigurationError: If the file is missing or unreadable, or
                validation fails.
        """
        raw_data = self._parse_source(source)
        result, config = self.validate(raw_data, base=ExtractorConfig())

        self._configuration = config
        self._is_loaded = True
        return result

    def update(self, **changes: Any) -> ValidationResult:
        """
        Apply changes on top of the current configuration.

        Raises:
            ConfigurationError: If the changed configuration is invalid.
        """
        result, config = self.validate(changes, base=self._configuration)
        self._configuration = config
        return result

    def validate(
        self,
        data: Dict[str, Any],
        base: Optional[ExtractorConfig] = None,
    ) -> Tuple[ValidationResult, ExtractorConfig]:
        """
        Validate a configuration dictionary.

        Args:
            data: Configuration values keyed by field name.
            base: Configuration supplying values for missing keys.

        Returns:
            Tuple of (ValidationResult, validated ExtractorConfig).

        Raises:
            ConfigurationError: If any value is invalid. All problems are
                collected before raising.
        """
        result = ValidationResult(is_valid=True)
        base = base or ExtractorConfig()

        if not isinstance(data, dict):
            result.add_error("Configuration must be a JSON object")
            raise ConfigurationError("Configuration validation failed", validation_result=result)

        for key in data:
            if key not in KNOWN_KEYS:
                result.add_warning(f"Unknown configuration key '{key}' ignored")

        labels = list(base.classification_labels)
        if "classification_labels" in data:
            labels = self._validate_labels(data["classification_labels"], result)

        threshold = base.confidence_threshold
        if "confidence_threshold" in data:
            value = data["confidence_threshold"]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                result.add_error("'confidence_threshold' must be a number")
            elif not 0.0 <= value <= 1.0:
                result.add_error("'confidence_threshold' must be between 0.0 and 1.0")
            else:
                threshold = float(value)

        enable_tables = base.enable_table_extraction
        if "enable_table_extraction" in data:
            value = data["enable_table_extraction"]
            if not isinstance(value, bool):
                result.add_error("'enable_table_extraction' must be a boolean")
            else:
                enable_tables = value

        model_name = base.model_name
        if "model_name" in data:
            value = data["model_name"]
            if not isinstance(value, str) or not value.strip():
                result.add_error("'model_name' must be a non-empty string")
            else:
                model_name = value.strip()

        if not result.is_valid:
            raise ConfigurationError(
                "Configuration validation failed",
                validation_result=result
            )

        for warning in result.warnings:
            logger.warning(warning)

        config = ExtractorConfig(
            classification_labels=labels,
            confidence_threshold=threshold,
            enable_table_extraction=enable_tables,
            model_name=model_name,
        )
        return result, config

    def _validate_labels(self, value: Any, result: ValidationResult) -> List[str]:
        """Validate the label list, dropping duplicates with a warning."""
        if not isinstance(value, list):
            result.add_error("'classification_labels' must be a list")
            return []

        labels: List[str] = []
        for i, label in enumerate(value):
            if not isinstance(label, str) or not label.strip():
                result.add_error(
                    f"'classification_labels' [{i}] must be a non-empty string"
                )
                continue
            label = label.strip()
            if label in labels:
                result.add_warning(f"Duplicate classification label '{label}' dropped")
                continue
            labels.append(label)

        if not value:
            result.add_error("'classification_labels' cannot be empty")

        return labels

    def to_dict(self) -> Dict[str, Any]:
        """Return the current configuration as a dictionary."""
        return self._configuration.to_dict()

    def save(self, path: Union[str, Path]) -> Path:
        """
        Write the current configuration as JSON.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            Path of the written file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
        return path

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")

        return source
