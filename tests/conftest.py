import json
import zipfile

import pytest


@pytest.fixture
def make_xmind(tmp_path):
    """Build an .xmind archive from a content.json payload.

    `content` may be a JSON-serialisable object or raw bytes. Extra entries
    can be added through `extra`, and `entry` names the content entry
    (None leaves it out entirely).
    """
    def _make(content=None, *, name="test.xmind", entry="content.json", extra=None):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
            for extra_name, extra_data in (extra or {}).items():
                zf.writestr(extra_name, extra_data)
            if entry is not None:
                if not isinstance(content, bytes):
                    content = json.dumps(content if content is not None else [])
                zf.writestr(entry, content)
        return path

    return _make
