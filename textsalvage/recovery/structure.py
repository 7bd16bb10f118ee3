"""Container-structure scan for PDF-like files.

Looks for the markers that hold displayable text in a PDF container without
parsing it: literal string operands, content streams, and indirect objects.
Each pass is a plain function over the decoded window; the first pass that
finds anything wins. Unbalanced markers simply fail to match.
"""

import logging
import re

from textsalvage.config import RecoveryWindows
from textsalvage.recovery.patterns import letter_runs

logger = logging.getLogger(__name__)

MIN_BLOCK_RUN_LENGTH = 10

_LITERAL_STRING = re.compile(r"\(([^)]+)\)")
_HAS_LETTER = re.compile(r"[A-Za-z]")
# "endstream" contains "stream", so an opening marker must not follow "end"
_STREAM_BLOCK = re.compile(r"(?<!end)stream\s*(.*?)\s*endstream", re.DOTALL)
_OBJECT_BLOCK = re.compile(r"\d+\s+\d+\s+obj\s*(.*?)\s*endobj", re.DOTALL)


def extract_literal_strings(text: str) -> str:
    """Join parenthesized literal strings that look like words."""
    literals = [body.replace("(", "") for body in _LITERAL_STRING.findall(text)]
    words = [
        literal
        for literal in literals
        if len(literal) > 2 and _HAS_LETTER.search(literal)
    ]
    return " ".join(words)


def _first_block_runs(pattern: re.Pattern[str], text: str) -> str:
    """Return letter runs from the first block matched by pattern that has any."""
    for body in pattern.findall(text):
        runs = letter_runs(body, MIN_BLOCK_RUN_LENGTH)
        if runs:
            return " ".join(runs)
    return ""


def extract_stream_text(text: str) -> str:
    """Return letter runs from the first content stream that has any."""
    return _first_block_runs(_STREAM_BLOCK, text)


def extract_object_text(text: str) -> str:
    """Return letter runs from the first indirect object that has any."""
    return _first_block_runs(_OBJECT_BLOCK, text)


def scan_structure(data: bytes, windows: RecoveryWindows) -> str:
    """Recover text from container markers in the leading window.

    Args:
        data: Raw document bytes.
        windows: Provides the size of the leading window to scan.

    Returns:
        Text from the first productive pass (literal strings, then streams,
        then objects), or an empty string.
    """
    # Latin-1 maps every byte to one character, so nothing is ever rejected
    text = data[: windows.structure_window].decode("latin-1")

    for name, extract_pass in (
        ("literal", extract_literal_strings),
        ("stream", extract_stream_text),
        ("object", extract_object_text),
    ):
        result = extract_pass(text)
        if result:
            logger.debug(f"Structure scan succeeded with {name} pass")
            return result

    return ""
