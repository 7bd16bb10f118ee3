"""Length-bounded truncation that prefers sentence boundaries."""

BOUNDARY_CHARS = ".!?\n"

# A boundary is only used when it falls in the last 20% of the budget
MIN_BOUNDARY_FRACTION = 0.8


def truncate(text: str, max_length: int) -> str:
    """Cap text at max_length characters.

    Cuts just after the last sentence end or newline when that keeps at
    least 80% of the budget, otherwise cuts hard at max_length.

    Args:
        text: Text to bound.
        max_length: Character budget. Negative values act as zero.

    Returns:
        Text of at most max_length characters.
    """
    max_length = max(max_length, 0)
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_boundary = max(truncated.rfind(char) for char in BOUNDARY_CHARS)

    if last_boundary >= max_length * MIN_BOUNDARY_FRACTION:
        return truncated[: last_boundary + 1]

    return truncated
