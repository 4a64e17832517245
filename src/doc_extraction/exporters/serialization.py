"""Serialization and deserialization utilities for extraction results."""

import json
from datetime import datetime
from typing import Any, Dict, Optional

from ..models.content import (
    ContentUnit,
    DocumentMetadata,
    ExtractionResult,
    ExtractionSummary,
    Position,
    TableGrid,
)
from ..models.enums import DocumentType


class ExtractionResultSerializer:
    """
    Handles serialization and deserialization of ExtractionResult structures.

    Ensures round-trip consistency: deserialize(serialize(result)) == result,
    with timestamps carried as ISO-8601 strings.
    """

    @staticmethod
    def serialize(
        result: ExtractionResult,
        include_metadata: bool = True,
        pretty_print: bool = True,
    ) -> str:
        """
        Serialize an ExtractionResult to JSON string.

        Args:
            result: The ExtractionResult to serialize.
            include_metadata: Whether to emit the ``metadata`` object.
            pretty_print: Indent output; affects whitespace only.

        Returns:
            JSON string representation of the result.
        """
        return json.dumps(
            ExtractionResultSerializer.to_dict(result, include_metadata=include_metadata),
            ensure_ascii=False,
            indent=2 if pretty_print else None
        )

    @staticmethod
    def deserialize(json_str: str) -> ExtractionResult:
        """
        Deserialize a JSON string to an ExtractionResult.

        Args:
            json_str: JSON string to deserialize.

        Returns:
            ExtractionResult reconstructed from the JSON.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {str(e)}")

        return ExtractionResultSerializer.from_dict(data)

    @staticmethod
    def to_dict(result: ExtractionResult, include_metadata: bool = True) -> Dict[str, Any]:
        """Convert ExtractionResult to dictionary."""
        output: Dict[str, Any] = {}
        if include_metadata:
            output["metadata"] = ExtractionResultSerializer._metadata_to_dict(result.metadata)
        output["contents"] = [
            ExtractionResultSerializer._unit_to_dict(unit) for unit in result.contents
        ]
        output["summary"] = {
            "total_items": result.summary.total_items,
            "by_type": dict(result.summary.by_type),
        }
        return output

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ExtractionResult:
        """Convert dictionary to ExtractionResult."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for ExtractionResult")

        if "metadata" not in data:
            raise ValueError("Missing required field: metadata")

        contents = data.get("contents", [])
        if not isinstance(contents, list):
            raise ValueError("Field 'contents' must be a list")

        summary = data.get("summary") or {}
        if not isinstance(summary, dict):
            raise ValueError("Field 'summary' must be an object")

        return ExtractionResult(
            metadata=ExtractionResultSerializer._dict_to_metadata(data["metadata"]),
            contents=[ExtractionResultSerializer._dict_to_unit(u) for u in contents],
            summary=ExtractionSummary(
                total_items=summary.get("total_items", 0),
                by_type=dict(summary.get("by_type", {})),
            ),
        )

    @staticmethod
    def _metadata_to_dict(metadata: DocumentMetadata) -> Dict[str, Any]:
        """Convert DocumentMetadata to dictionary."""
        return {
            "file_name": metadata.file_name,
            "file_type": metadata.file_type.value,
            "extracted_at": metadata.extracted_at.isoformat(),
            "total_pages": metadata.total_pages,
            "total_paragraphs": metadata.total_paragraphs,
        }

    @staticmethod
    def _dict_to_metadata(data: Dict[str, Any]) -> DocumentMetadata:
        """Convert dictionary to DocumentMetadata."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for DocumentMetadata")

        required_fields = ["file_name", "file_type", "extracted_at"]
        for field in required_fields:
            if field not in data:
                raise ValueError(f"Missing required field '{field}' in DocumentMetadata")

        try:
            file_type = DocumentType(data["file_type"])
            extracted_at = datetime.fromisoformat(data["extracted_at"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid DocumentMetadata: {str(e)}")

        return DocumentMetadata(
            file_name=data["file_name"],
            file_type=file_type,
            extracted_at=extracted_at,
            total_pages=data.get("total_pages"),
            total_paragraphs=data.get("total_paragraphs"),
        )

    @staticmethod
    def _unit_to_dict(unit: ContentUnit) -> Dict[str, Any]:
        """Convert ContentUnit to dictionary."""
        return {
            "id": unit.id,
            "type": unit.type,
            "text": unit.text,
            "confidence": unit.confidence,
            "position": unit.position.to_dict() if unit.position else None,
            "table_data": ExtractionResultSerializer._table_to_dict(unit.table_data),
            "metadata": unit.metadata,
        }

    @staticmethod
    def _dict_to_unit(data: Dict[str, Any]) -> ContentUnit:
        """Convert dictionary to ContentUnit."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for ContentUnit")

        required_fields = ["id", "type", "text", "confidence"]
        for field in required_fields:
            if field not in data:
                raise ValueError(f"Missing required field '{field}' in ContentUnit")

        position = None
        if data.get("position") is not None:
            position_data = data["position"]
            if not isinstance(position_data, dict):
                raise ValueError("Expected dictionary for Position")
            position = Position(
                page=position_data.get("page"),
                paragraph=position_data.get("paragraph"),
                line=position_data.get("line"),
            )

        return ContentUnit(
            id=data["id"],
            type=data["type"],
            text=data["text"],
            confidence=data["confidence"],
            position=position,
            table_data=ExtractionResultSerializer._dict_to_table(data.get("table_data")),
            metadata=data.get("metadata") or {},
        )

    @staticmethod
    def _table_to_dict(table: Optional[TableGrid]) -> Optional[Dict[str, Any]]:
        """Convert TableGrid to dictionary."""
        if table is None:
            return None
        return {
            "headers": table.headers,
            "rows": table.rows,
        }

    @staticmethod
    def _dict_to_table(data: Optional[Dict[str, Any]]) -> Optional[TableGrid]:
        """Convert dictionary to TableGrid."""
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for TableGrid")

        rows = data.get("rows", [])
        if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
            raise ValueError("Field 'rows' in TableGrid must be a list of lists")

        return TableGrid(rows=rows, headers=data.get("headers"))
