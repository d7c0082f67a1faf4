"""Split hard-wrapped license text into paragraphs."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from attrs import asdict

from .paragraph import Paragraph, indent_level
from .types import LineList

# Characters ending a line. A form feed also ends the current paragraph.
LINE_FEED = "\n"
FORM_FEED = "\f"


class _State(Enum):
    """Position of the scanner relative to the current line."""

    BEFORE_PARAGRAPH = "before_paragraph"
    IN_PARAGRAPH = "in_paragraph"


def _add_line(lines: LineList, line: str) -> None:
    """Record the content of a finished line, ignoring blank ones."""

    line = line.strip()
    if line:
        lines.append(line)


def _take_paragraph(lines: LineList, indent: int | None) -> Paragraph:
    """Build a paragraph from the pending lines and clear them."""

    paragraph = Paragraph(
        text=" ".join(lines), indent=indent if indent is not None else 0
    )
    lines.clear()
    return paragraph


def iter_paragraphs(text: str) -> Iterator[Paragraph]:
    """Lazily split license text into paragraphs.

    Paragraphs end at blank lines, at form feeds, at the end of the text and
    wherever a line is indented deeper than the one before it. Each
    paragraph takes its indentation level from its first line.

    Args:
        text: License text using ``\\n`` line endings and, optionally,
            ``\\f`` as a hard paragraph separator.

    Yields:
        Paragraphs in the order they appear in ``text``.
    """

    lines: LineList = []
    line_start = 0
    last_line_indent = 0
    current_line_indent = 0
    paragraph_indent: int | None = None
    state = _State.BEFORE_PARAGRAPH

    for position, char in enumerate(text):
        if state is _State.BEFORE_PARAGRAPH:
            if char == " ":
                current_line_indent += 1
                line_start = position + 1
                continue

            if char in (LINE_FEED, FORM_FEED):
                if lines:
                    yield _take_paragraph(lines, paragraph_indent)
                last_line_indent = 0
                current_line_indent = 0
                paragraph_indent = None
                line_start = position + 1
                continue

            if char == "[":
                # The LGPL 2.1 opens with a bracketed block whose following
                # lines are indented by one space:
                #
                #   [This is the first released version of the Lesser GPL.
                #    It also counts as ...]
                #
                # Counting the bracket keeps it a single paragraph.
                current_line_indent += 1

            if lines and current_line_indent > last_line_indent:
                yield _take_paragraph(lines, paragraph_indent)
                paragraph_indent = None

            if paragraph_indent is None:
                paragraph_indent = indent_level(current_line_indent)

            state = _State.IN_PARAGRAPH
        elif char == LINE_FEED:
            _add_line(lines, text[line_start:position])
            # A blank first line leaves the paragraph level undetermined.
            if not lines:
                paragraph_indent = None
            last_line_indent = current_line_indent
            current_line_indent = 0
            line_start = position + 1
            state = _State.BEFORE_PARAGRAPH
        elif char == FORM_FEED:
            _add_line(lines, text[line_start:position])
            if lines:
                yield _take_paragraph(lines, paragraph_indent)
            last_line_indent = 0
            current_line_indent = 0
            paragraph_indent = None
            line_start = position + 1
            state = _State.BEFORE_PARAGRAPH

    # Flush the last, possibly unterminated, line.
    if state is _State.IN_PARAGRAPH:
        _add_line(lines, text[line_start:])
    if lines:
        yield _take_paragraph(lines, paragraph_indent)


def segment_text(text: str) -> list[dict[str, Any]]:
    """Split license text into paragraphs represented as plain data.

    Args:
        text: Raw license text.

    Returns:
        List of ``{"text": ..., "indent": ...}`` mappings.
    """

    return [asdict(paragraph) for paragraph in iter_paragraphs(text)]
