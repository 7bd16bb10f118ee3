"""Byte-run recovery: pull plausible natural-language text straight out of raw bytes.

Works on the head and tail of the buffer only, where uncompressed text and
metadata tend to sit in PDF files, so scan cost stays bounded on large inputs.
"""

import logging
import re

from textsalvage.config import RecoveryWindows
from textsalvage.recovery.patterns import letter_runs

logger = logging.getLogger(__name__)

# Matches of this length or shorter are noise (operator names, "PDF", "EOF")
MIN_MATCH_LENGTH = 3

_PROPER_NOUNS = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*")
_WITH_YEAR = re.compile(r"[A-Za-z]+(?:\s+[A-Za-z]+)*\s*[0-9]{4}")
_WITH_ACRONYM = re.compile(r"[A-Za-z]+(?:\s+[A-Za-z]+)*\s*[A-Z]{2,}")
_WITH_DATE = re.compile(r"[A-Za-z]+(?:\s+[A-Za-z]+)*\s*[0-9]{1,2}/[0-9]{1,2}/[0-9]{2,4}")


def _window_texts(data: bytes, windows: RecoveryWindows) -> list[str]:
    """Decode the head and tail windows leniently."""
    head = data[: windows.head_window]
    tail = data[max(0, len(data) - windows.tail_window) :] if windows.tail_window else b""
    return [
        chunk.decode("utf-8", errors="replace")
        for chunk in (head, tail)
        if chunk
    ]


def _matches(text: str) -> list[str]:
    """Apply every pattern class to one window, in order."""
    found = letter_runs(text, 10)
    for pattern in (_PROPER_NOUNS, _WITH_YEAR, _WITH_ACRONYM, _WITH_DATE):
        found.extend(pattern.findall(text))
    return [match for match in found if len(match) > MIN_MATCH_LENGTH]


def recover_byte_runs(data: bytes, windows: RecoveryWindows) -> str:
    """Recover text by matching natural-language patterns in the raw bytes.

    Args:
        data: Raw document bytes.
        windows: Head and tail window sizes to scan.

    Returns:
        Unique matches in first-seen order, space-joined. Empty string if
        nothing matched.
    """
    parts: list[str] = []
    for text in _window_texts(data, windows):
        parts.extend(_matches(text))

    unique = list(dict.fromkeys(parts))
    logger.debug(f"Byte-run strategy found {len(unique)} unique matches")
    return " ".join(unique)
