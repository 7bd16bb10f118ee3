"""Encoding probe: re-read the buffer under several text encodings."""

import logging

from textsalvage.config import RecoveryWindows
from textsalvage.recovery.patterns import letter_runs

logger = logging.getLogger(__name__)

# Tried in order; the first encoding that yields readable runs wins
PROBE_ENCODINGS = ("utf-8", "latin-1", "ascii", "utf-16-le")

MIN_RUN_LENGTH = 20


def probe_encodings(data: bytes, windows: RecoveryWindows) -> str:
    """Decode the leading window strictly under each probe encoding.

    Encodings that reject the bytes are skipped. Runs are never merged
    across encodings.

    Args:
        data: Raw document bytes.
        windows: Provides the size of the leading window to decode.

    Returns:
        Space-joined letter runs from the first productive encoding, or an
        empty string.
    """
    window = data[: windows.encoding_window]

    for encoding in PROBE_ENCODINGS:
        try:
            text = window.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug(f"Encoding {encoding} rejected input: {e.reason}")
            continue

        runs = letter_runs(text, MIN_RUN_LENGTH)
        if runs:
            logger.debug(f"Encoding {encoding} yielded {len(runs)} readable runs")
            return " ".join(runs)

    return ""
