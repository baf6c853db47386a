"""Read XMind archives into Python objects."""

from __future__ import annotations

import json
import logging
import zipfile
import zlib
from pathlib import Path
from typing import Any, Union

from .errors import (
    ArchiveOpenError,
    DecodeError,
    EntryNotFoundError,
    EntryReadError,
)
from .models import Sheet, Topic

logger = logging.getLogger(__name__)

CONTENT_ENTRY_SUFFIX = "content.json"


def read(path: Union[str, Path]) -> list[Sheet]:
    """Read an .xmind file and return its sheets.

    The first archive entry whose name ends with ``content.json`` is
    decoded; any other entries are ignored.

    Args:
        path: Path to the .xmind file.

    Returns:
        The decoded sheets, in document order.

    Raises:
        ArchiveOpenError: If the file doesn't exist or isn't a valid ZIP.
        EntryNotFoundError: If no content.json entry is present.
        EntryReadError: If the content.json entry can't be decompressed.
        DecodeError: If content.json is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise ArchiveOpenError(f"File not found: {path}")

    try:
        zf = zipfile.ZipFile(path, "r")
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveOpenError(f"Cannot open {path} as an archive: {exc}") from exc

    with zf:
        info = _find_content_entry(zf)
        if info is None:
            raise EntryNotFoundError(f"No {CONTENT_ENTRY_SUFFIX} found in {path}")
        logger.debug("Reading %s from %s", info.filename, path)
        try:
            data = zf.read(info)
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError, RuntimeError, NotImplementedError) as exc:
            raise EntryReadError(f"Failed to read {info.filename} from {path}: {exc}") from exc

    sheets = decode(data)
    logger.debug("Decoded %d sheet(s) from %s", len(sheets), path)
    return sheets


def _find_content_entry(zf: zipfile.ZipFile) -> zipfile.ZipInfo | None:
    for info in zf.infolist():
        if info.filename.endswith(CONTENT_ENTRY_SUFFIX):
            return info
    return None


def decode(data: bytes) -> list[Sheet]:
    """Decode the bytes of a content.json document.

    Missing or null fields fall back to empty values and unknown fields are
    ignored. A JSON ``null`` document decodes to no sheets.

    Raises:
        DecodeError: If the bytes are not UTF-8 JSON, or a value has the
            wrong type for its field.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"content.json is not valid UTF-8: {exc}") from exc

    try:
        doc = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON in content.json: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("content.json is nested too deeply") from exc

    if doc is None:
        return []
    if not isinstance(doc, list):
        raise DecodeError(
            f"Expected a JSON array of sheets, got {_json_type(doc)}"
        )

    try:
        return [_parse_sheet(item, f"sheet[{i}]") for i, item in enumerate(doc)]
    except RecursionError as exc:
        raise DecodeError("content.json topic tree is nested too deeply") from exc


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise DecodeError(f"Invalid JSON in content.json: unexpected {name}")


def _parse_sheet(obj: Any, where: str) -> Sheet:
    obj = _object(obj, where)
    return Sheet(
        id=_string(obj, "id", where),
        class_name=_string(obj, "class", where),
        root_topic=_parse_topic(obj.get("rootTopic"), f"{where}.rootTopic"),
    )


def _parse_topic(obj: Any, where: str) -> Topic:
    """Recursively parse a topic object into a Topic."""
    obj = _object(obj, where)

    children = _object(obj.get("children"), f"{where}.children")
    attached = _topics(children.get("attached"), f"{where}.children.attached")
    detached = _topics(obj.get("detached"), f"{where}.detached")

    return Topic(
        id=_string(obj, "id", where),
        class_name=_string(obj, "class", where),
        title=_string(obj, "title", where),
        structure_class=_string(obj, "structureClass", where),
        branch=_string(obj, "branch", where),
        href=_string(obj, "href", where),
        attached=attached,
        detached=detached,
    )


def _topics(value: Any, where: str) -> tuple[Topic, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DecodeError(f"{where}: expected an array, got {_json_type(value)}")
    return tuple(_parse_topic(item, f"{where}[{i}]") for i, item in enumerate(value))


def _object(value: Any, where: str) -> dict:
    # null stands for an empty object
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{where}: expected an object, got {_json_type(value)}")
    return value


def _string(obj: dict, key: str, where: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{where}.{key}: expected a string, got {_json_type(value)}")
    return value


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"
