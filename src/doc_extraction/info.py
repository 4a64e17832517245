"""Static description of what the extractor supports."""

from typing import Any, Dict, List

from . import __version__
from .config.models import DEFAULT_CONFIDENCE_THRESHOLD, DEFAULT_MODEL_NAME
from .exporters.factory import get_supported_formats
from .models.enums import DEFAULT_CLASSIFICATION_LABELS
from .parsers.base import SUPPORTED_EXTENSIONS


FILE_FORMAT_DESCRIPTIONS = {
    ".docx": "Word documents",
    ".pdf": "PDF documents",
}

EXPORT_FORMAT_DESCRIPTIONS = {
    "json": "JSON",
    "csv": "CSV",
    "xlsx": "XLSX (Excel with multiple sheets)",
}

ALTERNATIVE_MODELS = [
    ("sentence-transformers/paraphrase-MiniLM-L3-v2", "faster"),
    ("sentence-transformers/all-mpnet-base-v2", "better accuracy"),
]


def get_capabilities() -> Dict[str, Any]:
    """Return supported formats, defaults and model suggestions."""
    return {
        "name": "doc-extraction",
        "version": __version__,
        "supported_file_formats": list(SUPPORTED_EXTENSIONS),
        "supported_export_formats": [f.value for f in get_supported_formats()],
        "default_classification_labels": list(DEFAULT_CLASSIFICATION_LABELS),
        "default_confidence_threshold": DEFAULT_CONFIDENCE_THRESHOLD,
        "default_model": DEFAULT_MODEL_NAME,
        "alternative_models": [
            {"name": name, "note": note} for name, note in ALTERNATIVE_MODELS
        ],
    }


def format_capabilities() -> str:
    """Render the capabilities as the text printed by ``doc-extract info``."""
    caps = get_capabilities()
    lines: List[str] = [
        "Document Extractor",
        "==================",
        f"Version: {caps['version']}",
        "",
        "Supported file formats:",
    ]
    for extension in caps["supported_file_formats"]:
        lines.append(f"  - {extension} ({FILE_FORMAT_DESCRIPTIONS.get(extension, extension)})")

    lines += ["", "Supported export formats:"]
    for export_format in caps["supported_export_formats"]:
        lines.append(f"  - {EXPORT_FORMAT_DESCRIPTIONS.get(export_format, export_format)}")

    lines += ["", "Default classification labels:"]
    lines += [f"  - {label}" for label in caps["default_classification_labels"]]

    lines += [
        "",
        f"Default confidence threshold: {caps['default_confidence_threshold']}",
        f"Default model: {caps['default_model']}",
        "",
        "Alternative models:",
    ]
    lines += [f"  - {m['name']} ({m['note']})" for m in caps["alternative_models"]]

    lines += ["", "For more information, run: doc-extract --help"]
    return "\n".join(lines)
