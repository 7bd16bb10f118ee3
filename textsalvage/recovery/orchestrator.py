"""Recovery orchestration and MIME-type dispatch.

Runs the recovery strategies as a short-circuiting cascade, cheapest first,
and routes each declared MIME type to the right extraction path.
"""

import logging
from collections.abc import Callable

from textsalvage.config import RecoveryWindows
from textsalvage.models.schemas import RawDocument, RecoveryAttempt, RecoveryStrategy
from textsalvage.recovery.byte_runs import recover_byte_runs
from textsalvage.recovery.encodings import probe_encodings
from textsalvage.recovery.structure import scan_structure

logger = logging.getLogger(__name__)

PLAIN_TEXT_MIME_TYPE = "text/plain"
PDF_MIME_TYPE = "application/pdf"

# Cascade order; the first strategy returning non-blank text wins
RECOVERY_CASCADE: tuple[tuple[RecoveryStrategy, Callable[[bytes, RecoveryWindows], str]], ...] = (
    (RecoveryStrategy.BYTE_RUN, recover_byte_runs),
    (RecoveryStrategy.ENCODING, probe_encodings),
    (RecoveryStrategy.STRUCTURE, scan_structure),
)


class NoTextExtractableError(Exception):
    """Raised when every recovery strategy comes back empty.

    Attributes:
        attempts: The failed attempts, in the order they were tried.
    """

    def __init__(self, attempts: list[RecoveryAttempt]) -> None:
        self.attempts = attempts
        tried = ", ".join(attempt.strategy.value for attempt in attempts)
        super().__init__(f"Could not extract text using any method (tried: {tried})")


def recover_text(data: bytes, windows: RecoveryWindows) -> RecoveryAttempt:
    """Run the recovery cascade over a binary container.

    Args:
        data: Raw document bytes.
        windows: Byte windows bounding each strategy.

    Returns:
        The first attempt that recovered non-blank text.

    Raises:
        NoTextExtractableError: If all strategies return blank text.
    """
    attempts: list[RecoveryAttempt] = []

    for strategy, recover in RECOVERY_CASCADE:
        attempt = RecoveryAttempt(strategy=strategy, text=recover(data, windows))
        attempts.append(attempt)
        if attempt.succeeded:
            logger.info(
                f"Text extracted using {strategy.value} strategy ({len(attempt.text)} chars)"
            )
            return attempt
        logger.debug(f"Strategy {strategy.value} found no text, falling through")

    raise NoTextExtractableError(attempts)


def extract(data: bytes, mime_type: str, windows: RecoveryWindows) -> str:
    """Extract raw text from a document according to its MIME type.

    Plain text is decoded directly, PDFs go through the recovery cascade,
    and any other type gets a best-effort UTF-8 decode.

    Args:
        data: Raw document bytes.
        mime_type: Declared MIME type.
        windows: Byte windows bounding each recovery strategy.

    Returns:
        Unsanitized text.

    Raises:
        NoTextExtractableError: If a PDF yields no text under any strategy.
    """
    return extract_document(RawDocument(data=data, mime_type=mime_type), windows)


def extract_document(document: RawDocument, windows: RecoveryWindows) -> str:
    """Extract raw text from a RawDocument. See extract()."""
    return extract_with_strategy(document, windows)[0]


def extract_with_strategy(
    document: RawDocument, windows: RecoveryWindows
) -> tuple[str, RecoveryStrategy | None]:
    """Extract text and report which recovery strategy, if any, produced it."""
    if document.mime_type == PLAIN_TEXT_MIME_TYPE:
        return document.data.decode("utf-8", errors="replace"), None

    if document.mime_type == PDF_MIME_TYPE:
        attempt = recover_text(document.data, windows)
        return attempt.text, attempt.strategy

    logger.debug(f"No dedicated extractor for {document.mime_type}, decoding as text")
    return document.data.decode("utf-8", errors="ignore"), None
