"""Render segmented license entries as plain text."""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from licparse.segmenter import LicenseEntry, Paragraph

DEFAULT_WIDTH = 80
DEFAULT_INDENT_WIDTH = 4


def render_paragraph(
    paragraph: Paragraph,
    width: int = DEFAULT_WIDTH,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Wrap a single paragraph to ``width`` columns.

    Args:
        paragraph: Paragraph to render.
        width: Maximum line width.
        indent_width: Spaces per indentation level.

    Returns:
        The wrapped paragraph without a trailing newline.
    """

    if paragraph.is_centered:
        lines = textwrap.wrap(paragraph.text, width=width)
        return "\n".join(line.center(width).rstrip() for line in lines)

    # Deeply nested levels never take more than half of the line.
    prefix = " " * min(paragraph.indent * indent_width, width // 2)
    return textwrap.fill(
        paragraph.text,
        width=width,
        initial_indent=prefix,
        subsequent_indent=prefix,
    )


def render_entry(
    entry: LicenseEntry,
    width: int = DEFAULT_WIDTH,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render a license entry, headed by the names of its packages."""

    blocks: list[str] = []
    if entry.packages:
        blocks.append(", ".join(entry.packages))
    blocks.extend(
        render_paragraph(p, width, indent_width) for p in entry.paragraphs()
    )
    return "\n\n".join(blocks)


def render_entries(
    entries: Iterable[LicenseEntry],
    width: int = DEFAULT_WIDTH,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render license entries separated by horizontal rules.

    Args:
        entries: Entries to render.
        width: Maximum line width.
        indent_width: Spaces per indentation level.

    Returns:
        Text of all entries.
    """

    rule = "\n\n" + "-" * width + "\n\n"
    return rule.join(render_entry(e, width, indent_width) for e in entries)
