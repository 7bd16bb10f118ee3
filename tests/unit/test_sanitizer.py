"""Unit tests for the text sanitizer."""

import pytest
import pytest_check as check

from textsalvage.cleaning.sanitizer import sanitize


class TestSanitizeCharacters:
    """Tests for control characters, line endings and escapes."""

    def test_strips_null_bytes(self) -> None:
        """Null bytes are removed without leaving a gap."""
        check.equal(sanitize("Hello\x00World"), "HelloWorld")

    def test_strips_control_characters(self) -> None:
        """Control characters other than newline are removed."""
        check.equal(sanitize("Name\x07:\x1b Jane\x7f"), "Name: Jane")

    def test_normalizes_line_endings(self) -> None:
        """CRLF and CR become LF."""
        check.equal(
            sanitize("line one\r\nline two\rline three"),
            "line one\nline two\nline three",
        )

    def test_strips_escape_sequences(self) -> None:
        """Octal, hex and unicode escape tokens are removed."""
        check.equal(sanitize("caf\\351 menu \\x41 item \\u00e9 end"), "caf menu item end")

    def test_replaces_non_ascii_with_space(self) -> None:
        """Characters outside printable ASCII become spaces."""
        check.equal(sanitize("Résumé — 2024"), "R sum 2024")

    def test_tabs_become_spaces(self) -> None:
        """Tabs are collapsed like any other whitespace."""
        check.equal(sanitize("Skills:\t\tPython"), "Skills: Python")


class TestSanitizeMarkup:
    """Tests for LaTeX markup removal."""

    def test_keeps_formatting_command_argument(self) -> None:
        """Formatting commands are unwrapped, keeping their text."""
        result = sanitize("\\textbf{Experience} John Smith Engineer 2020")

        check.equal(result, "Experience John Smith Engineer 2020")
        check.is_not_in("\\", result)
        check.is_not_in("{", result)
        check.is_not_in("textbf", result)

    def test_drops_structural_commands(self) -> None:
        """Environment and package commands go with their argument."""
        check.equal(sanitize("\\begin{itemize} Python \\end{itemize}"), "Python")

    def test_drops_bare_commands(self) -> None:
        """Commands without an argument are removed."""
        check.equal(sanitize("Skills: \\emph{Python}, \\LaTeX"), "Skills: Python,")

    def test_strips_math_spans(self) -> None:
        """Display and inline math are removed."""
        check.equal(sanitize("Energy $E=mc^2$ and $$x+y$$ done"), "Energy and done")

    def test_unwraps_nested_formatting_commands(self) -> None:
        """An inner command is resolved before the outer one keeps its text."""
        check.equal(sanitize("\\textbf{\\emph{Experience}} John Smith"), "Experience John Smith")
        check.equal(sanitize("\\section{\\textsc{Skills}} Python"), "Skills Python")

    def test_drops_bare_command_inside_argument(self) -> None:
        """Size switches inside an argument leave no name behind."""
        check.equal(sanitize("\\textbf{\\large Jane Doe} Engineer"), "Jane Doe Engineer")

    def test_href_keeps_link_text_only(self) -> None:
        """The link target is dropped and the visible text kept."""
        check.equal(sanitize("\\href{https://example.com}{Portfolio} site"), "Portfolio site")

    def test_drops_name_when_argument_has_literal_braces(self) -> None:
        """Commands that cannot be unwrapped still lose their name."""
        check.equal(sanitize("\\foo{a{b}c} end"), "abc end")

    def test_strips_braces_and_backslashes(self) -> None:
        """Leftover braces and backslashes are removed."""
        check.equal(sanitize("{Group} \\\\ {Lead}"), "Group Lead")


class TestSanitizePdfArtifacts:
    """Tests for PDF operator removal."""

    def test_strips_object_markers(self) -> None:
        """Empty text blocks and object markers are removed."""
        check.equal(sanitize("BT ET Summary 12 0 obj text endobj"), "Summary text")

    def test_strips_show_text_operators(self) -> None:
        """Tj and TJ operators are removed with their operands."""
        check.equal(sanitize("Tj (hidden) TJ [ (a) 5 (b) ] visible"), "visible")

    def test_keeps_words_containing_operator_letters(self) -> None:
        """BT and ET inside longer words are not operators."""
        check.equal(sanitize("DEBT ETHICS"), "DEBT ETHICS")


class TestSanitizeWhitespace:
    """Tests for whitespace normalization."""

    def test_collapses_blank_lines(self) -> None:
        """Blank lines and spaces around newlines collapse to one newline."""
        check.equal(sanitize("First\n\n\n  \nSecond  line \n"), "First\nSecond line")

    def test_trims_result(self) -> None:
        """Leading and trailing whitespace is removed."""
        check.equal(sanitize("   padded   "), "padded")

    def test_empty_input(self) -> None:
        """Empty string stays empty."""
        check.equal(sanitize(""), "")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Plain sentence.",
        "\\textbf{Experience} John Smith Engineer 2020",
        "BT☃ET stays hidden",
        "1  2 obj leftovers",
        "Tj☃(nested) trailing",
        "e\\x41ndobj",
        "$$$ and $ single",
        "\r\n\r\n  \t\x00\x01 mixed ​ space \n\n",
        "{\\emph{a}} {{b}} \\\\\\ c",
        "\\textbf{\\emph{\\large Nested}} \\href{x}{y}",
    ],
)
def test_sanitize_is_idempotent(text: str) -> None:
    """Sanitizing twice gives the same result as sanitizing once."""
    once = sanitize(text)

    assert sanitize(once) == once
