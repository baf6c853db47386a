"""Export XMind sheets to markdown.

Markdown format uses:
- An H1 for each sheet's root topic
- Nested headings (H2 and deeper, capped at H6) for the topic tree
- A bare ``[title](href)`` line for topics that carry a link
- A blank separator after every sheet
"""

from __future__ import annotations

import io
from typing import Iterable, TextIO

from .models import Sheet, Topic

MAX_HEADING_LEVEL = 6
SHEET_SEPARATOR = "\n\n"


def heading_level(depth: int) -> int:
    """Heading level for a topic `depth` levels below the root's children.

    First-level children (depth 0) are H2; levels stop growing at H6.
    """
    return min(depth + 2, MAX_HEADING_LEVEL)


def to_markdown(sheets: Iterable[Sheet]) -> str:
    """Export sheets to a markdown string.

    Args:
        sheets: The decoded sheets, in document order.

    Returns:
        Markdown string. Empty when there are no sheets.
    """
    out = io.StringIO()
    write_markdown(sheets, out)
    return out.getvalue()


def write_markdown(sheets: Iterable[Sheet], out: TextIO) -> None:
    """Write every sheet to `out`, in order."""
    for sheet in sheets:
        write_sheet(sheet, out)


def render_sheet(sheet: Sheet) -> str:
    out = io.StringIO()
    write_sheet(sheet, out)
    return out.getvalue()


def write_sheet(sheet: Sheet, out: TextIO) -> None:
    """Write one sheet: the root as an H1, its subtrees, then the separator."""
    root = sheet.root_topic
    out.write(f"# {root.title}\n\n")

    for child in root.attached:
        _write_topic(child, out, depth=0)
    for child in root.detached:
        _write_topic(child, out, depth=0)

    out.write(SHEET_SEPARATOR)


def _write_topic(topic: Topic, out: TextIO, depth: int) -> None:
    """Recursively render a topic as a heading or a link line."""
    if topic.is_link:
        # Link text must stay on one line; heading titles keep their newlines
        title = topic.title.replace("\n", "")
        out.write(f"[{title}]({topic.href})\n")
    else:
        hashes = "#" * heading_level(depth)
        out.write(f"{hashes} {topic.title}\n\n")

    for child in topic.attached:
        _write_topic(child, out, depth + 1)
    for child in topic.detached:
        _write_topic(child, out, depth + 1)
