"""
doc-extract: command-line interface for the document extractor.

Usage:
  doc-extract <command> [options]

Commands:
  extract   Extract classified content from a .docx or .pdf document and
            export it as JSON, CSV or an Excel workbook.
  info      Print supported formats, default labels and models.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config.config_manager import ConfigurationManager
from .config.models import ConfigurationError, ExtractorConfig
from .exceptions import ExtractionError
from .info import format_capabilities
from .interfaces.exporter import ExportOptions
from .models.enums import ExportFormat
from .nlp.label_scorer import LabelScorerError
from .pipeline import DocumentExtractor


logger = logging.getLogger(__name__)

EXPORT_FORMATS = [f.value for f in ExportFormat]


def default_output_path(input_path: Path, export_format: str) -> Path:
    """``<stem>_extracted.<format>`` next to the input file."""
    return input_path.parent / f"{input_path.stem}_extracted.{export_format}"


def parse_labels(value: str) -> List[str]:
    return [label.strip() for label in value.split(",") if label.strip()]


def build_config(args: argparse.Namespace) -> ExtractorConfig:
    """
    Combine an optional configuration file with command-line overrides.

    Raises:
        ConfigurationError: If the combined configuration is invalid.
    """
    manager = ConfigurationManager()
    if args.config:
        manager.load(args.config)

    overrides = {}
    if args.threshold is not None:
        overrides["confidence_threshold"] = args.threshold
    if args.labels is not None:
        overrides["classification_labels"] = parse_labels(args.labels)
    if args.model is not None:
        overrides["model_name"] = args.model
    if args.tables is not None:
        overrides["enable_table_extraction"] = args.tables

    manager.update(**overrides)
    return manager.configuration


def cmd_extract(args: argparse.Namespace) -> int:
    export_format = args.format.lower()
    if export_format not in EXPORT_FORMATS:
        print(f"Error: Format must be one of {', '.join(EXPORT_FORMATS)}", file=sys.stderr)
        return 1

    if args.threshold is not None and not 0.0 <= args.threshold <= 1.0:
        print("Error: Confidence threshold must be between 0 and 1", file=sys.stderr)
        return 1

    input_path = Path(args.input).resolve()
    output_path = (
        Path(args.output).resolve()
        if args.output
        else default_output_path(input_path, export_format)
    )

    try:
        config = build_config(args)
        print("Initializing document extractor...")
        extractor = DocumentExtractor(config=config)
        extractor.extract_and_export(
            input_path,
            ExportOptions(
                format=ExportFormat(export_format),
                output_path=output_path,
                include_metadata=args.metadata,
                pretty_print=not args.compact,
            ),
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ExtractionError, LabelScorerError, OSError) as e:
        logger.error(f"Extraction failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nExtraction complete!")
    print(f"Output saved to: {output_path}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    print(format_capabilities())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doc-extract",
        description="Extract structured insights from business documents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"doc-extract {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    extract = subparsers.add_parser("extract", help="Extract content from a document")
    extract.add_argument("input", help="Path to the input document (.docx or .pdf)")
    extract.add_argument("-o", "--output", help="Output file path")
    extract.add_argument(
        "-f", "--format", default="json",
        help="Output format (json, csv or xlsx); default: json",
    )
    extract.add_argument(
        "-t", "--threshold", type=float, default=None,
        help="Confidence threshold (0-1); default: 0.5",
    )
    extract.add_argument(
        "-l", "--labels", default=None,
        help="Comma-separated classification labels; "
             "default: business_rule,formula,condition,definition,text",
    )
    extract.add_argument("-m", "--model", default=None, help="Embedding model name")
    extract.add_argument(
        "--no-tables", dest="tables", action="store_false", default=None,
        help="Disable table extraction",
    )
    extract.add_argument(
        "--no-metadata", dest="metadata", action="store_false",
        help="Exclude metadata from output",
    )
    extract.add_argument(
        "--compact", action="store_true", help="Compact output (no pretty printing)"
    )
    extract.add_argument("-c", "--config", help="JSON configuration file")
    extract.set_defaults(func=cmd_extract)

    info = subparsers.add_parser("info", help="Display information about the extractor")
    info.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
