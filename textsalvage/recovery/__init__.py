"""Text recovery from raw document bytes.

Turns uploaded bytes into best-effort text without a full container parser.

Responsibilities:
    - Byte-run matching of natural-language patterns
    - Re-decoding under alternative text encodings
    - Scanning PDF literal strings, content streams and indirect objects
    - Ordered fallback across the three strategies and MIME-type dispatch

Output is raw and noisy; the cleaning package turns it into readable text.
"""

from textsalvage.recovery.orchestrator import (
    NoTextExtractableError,
    extract,
    extract_document,
    extract_with_strategy,
    recover_text,
)

__all__ = [
    "NoTextExtractableError",
    "extract",
    "extract_document",
    "extract_with_strategy",
    "recover_text",
]
