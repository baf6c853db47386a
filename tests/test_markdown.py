"""Tests for the markdown renderer."""

import io

import xmind2md
from xmind2md import Sheet, Topic, heading_level
from xmind2md.markdown import MAX_HEADING_LEVEL, SHEET_SEPARATOR


def _sheet(title, attached=(), detached=()):
    return Sheet(root_topic=Topic(title=title, attached=tuple(attached), detached=tuple(detached)))


def _nested(depth, title="Deep", href=""):
    """A chain of `depth` topics below a root, the innermost titled `title`."""
    topic = Topic(title=title, href=href)
    for level in range(depth - 1, 0, -1):
        topic = Topic(title=f"L{level}", attached=(topic,))
    return _sheet("Root", attached=[topic])


def test_plan_with_one_step():
    sheet = _sheet("Plan", attached=[Topic(title="Step 1")])
    assert xmind2md.render_sheet(sheet) == "# Plan\n\n## Step 1\n\n" + SHEET_SEPARATOR
    assert xmind2md.to_markdown([sheet]) == "# Plan\n\n## Step 1\n\n\n\n"


def test_link_title_newlines_stripped():
    sheet = _sheet("Root", attached=[Topic(title="Go\nHere", href="http://x")])
    md = xmind2md.to_markdown([sheet])
    assert "[GoHere](http://x)\n" in md
    assert "#" not in md.split("\n", 2)[2]


def test_heading_title_keeps_newlines():
    sheet = _sheet("Root", attached=[Topic(title="Two\nLines")])
    assert "## Two\nLines\n\n" in xmind2md.to_markdown([sheet])


def test_heading_level_clamped():
    for depth in range(50):
        assert heading_level(depth) == min(depth + 2, 6)
        assert heading_level(depth) <= MAX_HEADING_LEVEL
        assert heading_level(depth + 1) >= heading_level(depth)


def test_six_levels_deep_is_h6():
    md = xmind2md.to_markdown([_nested(6)])
    assert "###### Deep\n\n" in md
    assert "####### " not in md


def test_deep_nesting_still_emitted_in_order():
    md = xmind2md.to_markdown([_nested(10)])
    lines = [line for line in md.split("\n") if line]
    assert lines == [
        "# Root",
        "## L1",
        "### L2",
        "#### L3",
        "##### L4",
        "###### L5",
        "###### L6",
        "###### L7",
        "###### L8",
        "###### L9",
        "###### Deep",
    ]


def test_link_has_no_heading_markup_at_any_depth():
    md = xmind2md.to_markdown([_nested(4, title="Site", href="https://example.com")])
    assert "\n[Site](https://example.com)\n" in md
    assert "# Site" not in md


def test_attached_subtree_precedes_detached_subtree():
    parent = Topic(
        title="Parent",
        attached=(Topic(title="A", attached=(Topic(title="A1", attached=(Topic(title="A2"),)),)),),
        detached=(Topic(title="D", attached=(Topic(title="D1"),)),),
    )
    md = xmind2md.to_markdown([_sheet("Root", attached=[parent])])

    assert md == (
        "# Root\n\n"
        "## Parent\n\n"
        "### A\n\n"
        "#### A1\n\n"
        "##### A2\n\n"
        "### D\n\n"
        "#### D1\n\n"
        "\n\n"
    )


def test_root_detached_rendered_at_first_level():
    sheet = _sheet("Root", attached=[Topic(title="Main")], detached=[Topic(title="Loose")])
    assert xmind2md.to_markdown([sheet]) == "# Root\n\n## Main\n\n## Loose\n\n\n\n"


def test_empty_title_renders_empty_heading():
    sheet = _sheet("", attached=[Topic()])
    assert xmind2md.to_markdown([sheet]) == "# \n\n## \n\n\n\n"


def test_no_sheets_renders_nothing():
    assert xmind2md.to_markdown([]) == ""


def test_multiple_sheets_concatenated():
    md = xmind2md.to_markdown([_sheet("One"), _sheet("Two")])
    assert md == "# One\n\n\n\n# Two\n\n\n\n"


def test_rendering_is_idempotent():
    sheets = [
        _sheet("A", attached=[Topic(title="x", href="http://x")], detached=[Topic(title="y")]),
        _nested(8),
    ]
    assert xmind2md.to_markdown(sheets) == xmind2md.to_markdown(sheets)


def test_write_sheet_appends_to_stream():
    out = io.StringIO()
    out.write("prefix\n")
    xmind2md.write_sheet(_sheet("Plan"), out)
    assert out.getvalue() == "prefix\n# Plan\n\n\n\n"
