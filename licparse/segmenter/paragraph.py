"""Represents a paragraph of license text."""

from __future__ import annotations

from attrs import define

# Indent value marking a paragraph that is centered in the source text.
CENTERED_INDENT = -1

# Lines indented by more than this many spaces are treated as centered.
CENTERED_THRESHOLD = 10

# Number of leading spaces making up one indentation level.
INDENT_UNIT = 3


def indent_level(leading_spaces: int) -> int:
    """Guess the indentation level of a line from its leading spaces.

    The thresholds happen to work for common variants of the BSD and LGPL
    licenses and are not meant as a general rule.

    Args:
        leading_spaces: Number of space characters before the line content.

    Returns:
        ``CENTERED_INDENT`` for deeply indented lines, otherwise the number
        of whole indentation units.
    """

    if leading_spaces > CENTERED_THRESHOLD:
        return CENTERED_INDENT
    return leading_spaces // INDENT_UNIT


@define(slots=True, frozen=True)
class Paragraph:
    """Represents a paragraph of license text.

    Attributes:
        text: Paragraph content with line breaks collapsed to single spaces.
        indent: Indentation level, or ``CENTERED_INDENT`` when the paragraph
            is centered.
    """

    text: str
    indent: int = 0

    @property
    def is_centered(self) -> bool:
        """Whether the paragraph should be rendered centered."""
        return self.indent == CENTERED_INDENT
