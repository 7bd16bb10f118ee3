"""Natural-language run heuristic shared by the recovery strategies."""

import re

_HAS_LETTER = re.compile(r"[A-Za-z]")


def letter_runs(text: str, min_length: int) -> list[str]:
    """Return runs of letters and whitespace at least min_length long.

    Runs made only of whitespace (padding in binary containers) are skipped.
    """
    pattern = re.compile(r"[A-Za-z\s]{%d,}" % min_length)
    return [run for run in pattern.findall(text) if _HAS_LETTER.search(run)]
