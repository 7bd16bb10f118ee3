"""Command-line entry point.

Recovers and cleans text from a single document and prints it to stdout.
Environment variables are loaded from .env file.
"""

import argparse
import logging
import mimetypes
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from textsalvage import __version__
from textsalvage.config import PipelineConfig, get_pipeline_config
from textsalvage.models.schemas import RawDocument
from textsalvage.pipeline import process_document

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EXTRACTION_FAILED = 1
EXIT_UNREADABLE = 2


def _positive_int(value: str) -> int:
    """Parse a CLI budget that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textsalvage",
        description=(
            "Recover readable text from a document, including damaged or "
            "LaTeX-generated PDFs, and print a cleaned, bounded version of it."
        ),
        epilog="Exit codes: 0=text recovered, 1=no extractable text, 2=unreadable file",
    )

    parser.add_argument("file", type=Path, help="Document to process.")

    parser.add_argument(
        "--mime-type",
        metavar="TYPE",
        help="Declared MIME type (default: guessed from the file name).",
    )

    parser.add_argument(
        "--excerpt",
        action="store_true",
        help="Print the short analysis excerpt instead of the full text.",
    )

    parser.add_argument(
        "--max-length",
        type=_positive_int,
        metavar="N",
        help="Character budget for the full text (default: SALVAGE_TEXT_LIMIT or 10000).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _guess_mime_type(path: Path) -> str:
    """Guess the MIME type from the file name, defaulting to opaque binary."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    load_dotenv()

    # Log records go to stderr so stdout carries only the recovered text
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    args = create_parser().parse_args(argv)

    try:
        data = args.file.read_bytes()
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_UNREADABLE

    config = get_pipeline_config()
    if args.max_length is not None:
        config = PipelineConfig(
            windows=config.windows,
            text_limit=args.max_length,
            excerpt_limit=config.excerpt_limit,
        )

    document = RawDocument(data=data, mime_type=args.mime_type or _guess_mime_type(args.file))
    logger.info(f"Processing {args.file} as {document.mime_type}")

    result = process_document(document, config)
    print(result.excerpt if args.excerpt else result.text)

    return EXIT_EXTRACTION_FAILED if result.extraction_failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
