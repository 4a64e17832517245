"""Configuration management for the document extraction system."""

from .config_manager import ConfigurationManager
from .models import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_MODEL_NAME,
    ConfigurationError,
    ExtractorConfig,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationError",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "DEFAULT_MODEL_NAME",
    "ExtractorConfig",
    "ValidationResult",
]
