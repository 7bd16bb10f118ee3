"""Line-level readability filter.

Drops lines dominated by symbols. Catches structural residue that survives
sanitizing because it is made of printable ASCII, such as glyph codes and
brace soup.
"""

import re

DEFAULT_MAX_SPECIAL_RATIO = 0.5

_SPECIAL_CHARS = re.compile(r"[^a-zA-Z0-9 .,!?;:()\-]")


def special_char_ratio(line: str) -> float:
    """Return the share of characters outside letters, digits and basic punctuation."""
    if not line:
        return 0.0
    return len(_SPECIAL_CHARS.findall(line)) / len(line)


def filter_readable_lines(
    text: str, max_special_ratio: float = DEFAULT_MAX_SPECIAL_RATIO
) -> str:
    """Keep only lines that read like prose.

    Args:
        text: Sanitized text.
        max_special_ratio: Lines at or above this ratio of special
            characters are dropped.

    Returns:
        Surviving trimmed lines joined by newlines.
    """
    readable_lines = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if trimmed and special_char_ratio(trimmed) < max_special_ratio:
            readable_lines.append(trimmed)

    return "\n".join(readable_lines).strip()
