"""xmind2md: Convert XMind mind map files to markdown.

A pure Python library for turning the content.json of an .xmind archive
into nested markdown headings. No external dependencies required.

Usage:
    import xmind2md

    # Read the sheets of a mind map
    sheets = xmind2md.read("Plan.xmind")
    print(sheets[0])  # Sheet('Plan', 12 topics)

    # Navigate the tree
    for topic in sheets[0].root_topic.attached:
        print(topic.title, len(topic.children))

    # Export to markdown
    md = xmind2md.to_markdown(sheets)

    # Or decode content.json bytes you already have
    sheets = xmind2md.decode(data)
"""

__version__ = "0.1.0"

from .reader import read, decode
from .markdown import to_markdown, write_markdown, render_sheet, write_sheet, heading_level
from .models import Sheet, Topic
from .errors import (
    ConversionError,
    ArchiveOpenError,
    EntryNotFoundError,
    EntryReadError,
    DecodeError,
    OutputCreateError,
    MissingPathError,
)

__all__ = [
    "read",
    "decode",
    "to_markdown",
    "write_markdown",
    "render_sheet",
    "write_sheet",
    "heading_level",
    "Sheet",
    "Topic",
    "ConversionError",
    "ArchiveOpenError",
    "EntryNotFoundError",
    "EntryReadError",
    "DecodeError",
    "OutputCreateError",
    "MissingPathError",
]
