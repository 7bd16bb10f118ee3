"""Text sanitizer for recovered document text.

Applies a fixed sequence of regex rewrites that remove control characters,
escape sequences, LaTeX markup and PDF operator leftovers, then normalizes
whitespace. Order matters: earlier rewrites change what later ones match.
"""

import re

# LaTeX commands whose braced argument is structure, not content
STRUCTURAL_COMMANDS = frozenset(
    {
        "begin",
        "bibliography",
        "bibliographystyle",
        "cite",
        "documentclass",
        "end",
        "hspace",
        "include",
        "includegraphics",
        "input",
        "label",
        "newcommand",
        "pagestyle",
        "ref",
        "renewcommand",
        "setlength",
        "thispagestyle",
        "usepackage",
        "vspace",
    }
)

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_LINE_ENDINGS = re.compile(r"\r\n?")
_ESCAPES = (
    re.compile(r"\\[0-9]{3}"),
    re.compile(r"\\x[0-9a-fA-F]{2}"),
    re.compile(r"\\u[0-9a-fA-F]{4}"),
)
# Innermost commands only: the argument holds no braces or backslashes, and
# a bare command must not be followed by more letters or an opening brace
_COMMAND = re.compile(r"\\([a-zA-Z]+)(?:\{([^{}\\]*)\}|(?![a-zA-Z{]))")
_HREF_TARGET = re.compile(r"\\href\{[^{}]*\}")
_COMMAND_NAME = re.compile(r"\\[a-zA-Z]+")
_MATH = (
    re.compile(r"\$\$[^$]*\$\$"),
    re.compile(r"\$[^$]*\$"),
)
_BRACES_AND_BACKSLASHES = re.compile(r"[{}\\]")
_PDF_OPERATORS = (
    re.compile(r"\bBT\s+ET\b"),
    re.compile(r"Tj\s*\([^)]*\)"),
    re.compile(r"TJ\s*\[[^\]]*\]"),
    re.compile(r"\b[0-9]+\s+[0-9]+\s+obj\b"),
    re.compile(r"\bendobj\b"),
)
_NON_PRINTABLE = re.compile(r"[^\x20-\x7e\n]")
_SPACES = re.compile(r" {2,}")
_BLANK_LINES = re.compile(r" ?\n[\n ]*")


def _replace_command(match: re.Match[str]) -> str:
    """Keep a formatting command's argument, drop everything else."""
    name, argument = match.group(1), match.group(2)
    if argument is None or name in STRUCTURAL_COMMANDS:
        return ""
    return argument


def _strip_commands(text: str) -> str:
    """Unwrap LaTeX commands from the innermost outwards.

    \\textbf{\\emph{Experience}} needs two rounds: the inner command is
    resolved first, which turns the outer one into a plain \\textbf{...}.
    Names still left afterwards (arguments with literal braces) are dropped.
    """
    text = _HREF_TARGET.sub("", text)
    while True:
        stripped = _COMMAND.sub(_replace_command, text)
        if stripped == text:
            return _COMMAND_NAME.sub("", stripped)
        text = stripped


def _sanitize_pass(text: str) -> str:
    """Apply every rewrite once, in order."""
    text = _CONTROL_CHARS.sub("", text)
    text = _LINE_ENDINGS.sub("\n", text)

    for pattern in _ESCAPES:
        text = pattern.sub("", text)

    # \textbf{Experience} keeps "Experience"; \begin{itemize} goes entirely
    text = _strip_commands(text)

    for pattern in _MATH:
        text = pattern.sub("", text)

    text = _BRACES_AND_BACKSLASHES.sub("", text)

    for pattern in _PDF_OPERATORS:
        text = pattern.sub("", text)

    text = _NON_PRINTABLE.sub(" ", text)
    text = _SPACES.sub(" ", text)
    text = _BLANK_LINES.sub("\n", text)
    return text.strip()


def sanitize(text: str) -> str:
    """Strip control characters, markup and PDF artifacts from text.

    The rewrite pass is repeated until the text stops changing, since a
    removal can expose a token an earlier rewrite would have caught (e.g.
    "BT\\u2603ET" only becomes "BT ET" in the non-printable step). A pass
    never makes the text longer, so this always terminates.

    Args:
        text: Raw recovered text.

    Returns:
        Printable ASCII with single spaces, single newlines and no leading
        or trailing whitespace.
    """
    while True:
        cleaned = _sanitize_pass(text)
        if cleaned == text:
            return cleaned
        text = cleaned
