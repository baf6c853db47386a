"""Write exported markdown next to the source archive."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import OutputCreateError

logger = logging.getLogger(__name__)


def output_path_for(path: Union[str, Path]) -> Path:
    """Same path as the input with its extension replaced by ``.md``.

    ``Plan.xmind`` becomes ``Plan.md``; a path without an extension gets
    ``.md`` appended. Everything from the last dot of the file name counts as
    the extension, so ``.xmind`` becomes ``.md``.
    """
    path = Path(path)
    name = path.name
    dot = name.rfind(".")
    stem = name[:dot] if dot >= 0 else name
    return path.with_name(stem + ".md")


def write_output(text: str, path: Union[str, Path]) -> Path:
    """Write markdown text to `path` as UTF-8.

    Args:
        text: The markdown to write.
        path: Destination file. Overwritten if it already exists.

    Returns:
        The path written to.

    Raises:
        OutputCreateError: If the file can't be created or written.
    """
    path = Path(path)
    try:
        # newline="" keeps "\n" as-is on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        raise OutputCreateError(f"Failed to create markdown file {path}: {exc}") from exc

    logger.debug("Wrote %d characters to %s", len(text), path)
    return path
