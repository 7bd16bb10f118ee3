"""End-to-end document processing.

Chains extraction, sanitizing, readability filtering and truncation, and
substitutes a fixed notice when a PDF yields no text so that downstream
consumers always receive a string.
"""

import logging

from textsalvage.cleaning import filter_readable_lines, sanitize, truncate
from textsalvage.config import PipelineConfig
from textsalvage.models.schemas import ProcessedDocument, RawDocument
from textsalvage.recovery.orchestrator import NoTextExtractableError, extract_with_strategy

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_NOTICE = (
    "PDF text extraction failed. Please ensure the PDF contains selectable text."
)


def clean_text(text: str, max_length: int) -> str:
    """Sanitize, filter and bound text that is already decoded.

    Args:
        text: Raw text, e.g. pasted by a user or recovered from a file.
        max_length: Character budget for the result.

    Returns:
        Readable text of at most max_length characters.
    """
    cleaned = sanitize(text)
    readable = filter_readable_lines(cleaned)
    logger.debug(
        f"Cleaned text: {len(text)} raw, {len(cleaned)} sanitized, {len(readable)} readable chars"
    )
    return truncate(readable, max_length)


def process_document(document: RawDocument, config: PipelineConfig) -> ProcessedDocument:
    """Run a document through recovery and cleaning.

    Args:
        document: Uploaded bytes and declared MIME type.
        config: Byte windows and character budgets.

    Returns:
        ProcessedDocument with the persisted text and the analysis excerpt.
    """
    extraction_failed = False
    strategy = None

    try:
        raw_text, strategy = extract_with_strategy(document, config.windows)
    except NoTextExtractableError as e:
        logger.warning(f"Text extraction failed for {document.mime_type} document: {e}")
        raw_text = EXTRACTION_FAILED_NOTICE
        extraction_failed = True

    text = clean_text(raw_text, config.text_limit)
    excerpt = truncate(text, config.excerpt_limit)

    logger.info(
        f"Processed {document.mime_type} document: {len(document.data)} bytes -> "
        f"{len(text)} chars ({len(excerpt)} in excerpt)"
    )

    return ProcessedDocument(
        text=text,
        excerpt=excerpt,
        strategy=strategy,
        extraction_failed=extraction_failed,
    )
