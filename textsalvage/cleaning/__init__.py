"""Cleaning stages applied to recovered text.

Responsibilities:
    - Sanitizing control characters, escapes, LaTeX markup and PDF operators
    - Dropping symbol-heavy lines that survive sanitizing
    - Bounding output length at a sentence boundary where possible

All functions are pure and total: any string in, a string out.
"""

from textsalvage.cleaning.readability import filter_readable_lines
from textsalvage.cleaning.sanitizer import sanitize
from textsalvage.cleaning.truncation import truncate

__all__ = ["filter_readable_lines", "sanitize", "truncate"]
