#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for renderers/html.py HtmlSegmentRenderer."""

import html

import pytest

from prettydiff.renderers.html import HTML_TAGS, HtmlSegmentRenderer, escape_segment_text
from prettydiff.segments import DifferenceSegment, SegmentKind


def _seg(kind, text):
    return DifferenceSegment(kind, text)


@pytest.mark.unit
class TestHtmlSegmentRenderer:
    """Tests for the HtmlSegmentRenderer class."""

    def test_init_defaults(self):
        """Test default initialization."""
        renderer = HtmlSegmentRenderer()
        assert renderer.standalone is False
        assert renderer.title == "Diff"

    def test_every_kind_has_tags(self):
        """Test that every segment kind has an element."""
        assert set(HTML_TAGS) == set(SegmentKind)

    def test_insert(self):
        """Test that insertions use a light-green ins element."""
        result = HtmlSegmentRenderer().render([_seg(SegmentKind.INSERT, "new")])
        assert result == '<ins style="background:#e6ffe6;">new</ins>'

    def test_delete(self):
        """Test that deletions use a light-red del element."""
        result = HtmlSegmentRenderer().render([_seg(SegmentKind.DELETE, "old")])
        assert result == '<del style="background:#ffe6e6;">old</del>'

    def test_equal(self):
        """Test that unchanged text uses a plain span."""
        result = HtmlSegmentRenderer().render([_seg(SegmentKind.EQUAL, "same")])
        assert result == "<span>same</span>"

    def test_order_preserved_without_outer_element(self):
        """Test that output is the plain concatenation in segment order."""
        segments = [
            _seg(SegmentKind.EQUAL, "a"),
            _seg(SegmentKind.DELETE, "b"),
            _seg(SegmentKind.INSERT, "c"),
            _seg(SegmentKind.EQUAL, "d"),
        ]
        result = HtmlSegmentRenderer().render(segments)
        assert result == (
            "<span>a</span>"
            '<del style="background:#ffe6e6;">b</del>'
            '<ins style="background:#e6ffe6;">c</ins>'
            "<span>d</span>"
        )

    def test_escapes_markup(self):
        """Test that segment text is HTML-escaped."""
        result = HtmlSegmentRenderer().render([_seg(SegmentKind.EQUAL, "<a href='x'>&</a>")])
        assert result == "<span>&lt;a href=&#x27;x&#x27;&gt;&amp;&lt;/a&gt;</span>"

    def test_quote_entities(self):
        """Test that quotes use the html.escape entities and unescape back."""
        text = "say \"hi\" it's"
        escaped = escape_segment_text(text)
        assert escaped == "say &quot;hi&quot; it&#x27;s"
        assert html.unescape(escaped) == text

    def test_newlines_become_pilcrow_breaks(self):
        """Test that each line terminator becomes a pilcrow and a line break."""
        result = HtmlSegmentRenderer().render([_seg(SegmentKind.INSERT, "a\nb\n")])
        assert result == '<ins style="background:#e6ffe6;">a&para;<br>b&para;<br></ins>'

    def test_empty_sequence(self):
        """Test that no segments render as an empty string."""
        assert HtmlSegmentRenderer().render([]) == ""

    def test_empty_segment_text(self):
        """Test that an empty segment still emits its element."""
        assert HtmlSegmentRenderer().render([_seg(SegmentKind.EQUAL, "")]) == "<span></span>"

    def test_accepts_generator(self):
        """Test that any iterable of segments is accepted."""
        segments = (_seg(SegmentKind.EQUAL, t) for t in ["x", "y"])
        assert HtmlSegmentRenderer().render(segments) == "<span>x</span><span>y</span>"

    def test_standalone_document(self):
        """Test wrapping the fragment in a complete document."""
        renderer = HtmlSegmentRenderer(standalone=True, title="A & B")
        result = renderer.render([_seg(SegmentKind.INSERT, "x")])
        assert result.startswith("<!DOCTYPE html>\n")
        assert "<title>A &amp; B</title>" in result
        assert '<ins style="background:#e6ffe6;">x</ins>' in result
        assert result.endswith("</html>\n")


@pytest.mark.unit
class TestHtmlHelpers:
    """Tests for module-level helpers."""

    def test_escape_segment_text(self):
        """Test escaping and newline replacement together."""
        assert escape_segment_text("1 < 2\n") == "1 &lt; 2&para;<br>"

    def test_standalone_empty_sequence(self):
        """Test that an empty sequence still yields a complete document."""
        result = HtmlSegmentRenderer(standalone=True).render([])
        assert result.startswith("<!DOCTYPE html>")
        assert "<div class='diff-content'></div>" in result
