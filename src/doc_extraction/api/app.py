"""Minimal FastAPI application for the document extraction system.

This module exposes the DocumentExtractor over HTTP.

Usage (from project root, after installing the package):

    uvicorn doc_extraction.api.app:app --reload

Then send a multipart/form-data POST request to /api/extract with a
``file`` field and optional ``format``, ``threshold``, ``labels``,
``tables`` and ``include_metadata`` form fields.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from .. import __version__
from ..config.config_manager import ConfigurationManager
from ..config.models import ConfigurationError
from ..exceptions import DecodeError, ExportError, UnsupportedTypeError
from ..info import get_capabilities
from ..interfaces.exporter import ExportOptions
from ..interfaces.scorer import ILabelScorer
from ..models.enums import ExportFormat
from ..nlp.label_scorer import LabelScorerError, get_label_scorer
from ..parsers.base import detect_document_type
from ..pipeline import DocumentExtractor


logger = logging.getLogger(__name__)

app = FastAPI(title="Document Extraction API", version=__version__)

MEDIA_TYPES = {
    ExportFormat.JSON: "application/json",
    ExportFormat.CSV: "text/csv",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def get_scorer() -> ILabelScorer:
    """Process-wide scorer for the default model."""
    return get_label_scorer()


def _save_upload(upload: UploadFile, temp_dir: Path) -> Path:
    """Save an uploaded file under its own name inside ``temp_dir``."""
    path = temp_dir / Path(upload.filename or "upload").name
    with open(path, "wb") as f:
        shutil.copyfileobj(upload.file, f)
    return path


def _parse_format(value: str) -> ExportFormat:
    try:
        return ExportFormat(value.lower())
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported export format: {value}",
        )


@app.post("/api/extract")
def extract_document(
    file: UploadFile = File(..., description="Document to extract (.docx/.pdf)"),
    format: str = Form("json"),
    threshold: Optional[float] = Form(None),
    labels: Optional[str] = Form(None),
    tables: bool = Form(True),
    include_metadata: bool = Form(True),
    scorer: ILabelScorer = Depends(get_scorer),
) -> FileResponse:
    """Extract an uploaded document and return the exported artifact.

    - 400: invalid configuration or export format.
    - 415: unsupported document type.
    - 422: the document cannot be decoded.
    - 503: the scoring model is unavailable.
    """
    export_format = _parse_format(format)

    try:
        detect_document_type(file.filename or "")
    except UnsupportedTypeError as e:
        raise HTTPException(status_code=415, detail=e.to_dict())

    overrides: Dict[str, Any] = {"enable_table_extraction": tables}
    if threshold is not None:
        overrides["confidence_threshold"] = threshold
    if labels is not None:
        overrides["classification_labels"] = [
            label.strip() for label in labels.split(",") if label.strip()
        ]

    try:
        manager = ConfigurationManager()
        manager.update(**overrides)
        extractor = DocumentExtractor(config=manager.configuration, scorer=scorer)
    except ConfigurationError as e:
        errors = e.validation_result.errors if e.validation_result else []
        raise HTTPException(status_code=400, detail={"message": e.message, "errors": errors})

    temp_dir = Path(tempfile.mkdtemp(prefix="doc_extraction_api_"))
    try:
        input_path = _save_upload(file, temp_dir)
        output_path = temp_dir / f"{input_path.stem}_extracted.{export_format.value}"

        extractor.extract_and_export(
            input_path,
            ExportOptions(
                format=export_format,
                output_path=output_path,
                include_metadata=include_metadata,
            ),
        )
    except DecodeError as e:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise HTTPException(status_code=422, detail=e.to_dict())
    except ExportError as e:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise HTTPException(status_code=500, detail=e.to_dict())
    except LabelScorerError as e:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise HTTPException(status_code=503, detail=str(e))
    except Exception:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise

    logger.info(f"Served extraction of {input_path.name} as {export_format.value}")
    return FileResponse(
        output_path,
        media_type=MEDIA_TYPES[export_format],
        filename=output_path.name,
        background=BackgroundTask(shutil.rmtree, temp_dir, ignore_errors=True),
    )


@app.get("/api/info")
def info() -> Dict[str, Any]:
    """Return supported formats, defaults and model suggestions."""
    return get_capabilities()
