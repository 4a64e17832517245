"""Custom exceptions for document extraction and export."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ExtractionError(Exception):
    """
    Base exception for extraction and export errors.

    Provides detailed error information including file path, location,
    and additional context for debugging and user feedback.

    Attributes:
        message: Human-readable error description.
        file_path: Path to the file that caused the error.
        location: Specific location within the file (page, part name, header).
        details: Additional error details.
    """
    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.location:
            parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": self.details,
        }


@dataclass
class DecodeError(ExtractionError):
    """
    Exception raised when source bytes cannot be turned into text and tables.

    Fatal to the document being decoded; never retried.
    """


@dataclass
class DocumentCorruptedError(DecodeError):
    """
    Exception raised when a document container is corrupted or unreadable.

    The file exists but cannot be opened due to corruption, an invalid
    format, or encryption.
    """


@dataclass
class UnsupportedTypeError(ExtractionError):
    """
    Exception raised when a file extension is not supported.

    Raised before any decode attempt.
    """


@dataclass
class ExportError(ExtractionError):
    """
    Exception raised when an extraction result cannot be exported.

    Fatal to that export call only; the extraction result stays valid
    and may be exported elsewhere.
    """
