#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/renderers/html.py
"""HTML renderer for flat difference sequences.

Each segment becomes one inline element: insertions in a light-green
``<ins>``, deletions in a light-red ``<del>`` and unchanged text in a plain
``<span>``. Segment text is HTML-escaped and every line terminator is shown
as a pilcrow followed by ``<br>``. By default the output is a bare fragment
with no outer element; ``standalone=True`` wraps it in a minimal page.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from typing import Iterable

from prettydiff.constants import (
    DEFAULT_HTML_TITLE,
    HTML_DELETE_CLOSE,
    HTML_DELETE_OPEN,
    HTML_EQUAL_CLOSE,
    HTML_EQUAL_OPEN,
    HTML_INSERT_CLOSE,
    HTML_INSERT_OPEN,
    HTML_LINE_BREAK,
)
from prettydiff.segments import DifferenceSegment, SegmentKind

HTML_TAGS: dict[SegmentKind, tuple[str, str]] = {
    SegmentKind.INSERT: (HTML_INSERT_OPEN, HTML_INSERT_CLOSE),
    SegmentKind.DELETE: (HTML_DELETE_OPEN, HTML_DELETE_CLOSE),
    SegmentKind.EQUAL: (HTML_EQUAL_OPEN, HTML_EQUAL_CLOSE),
}


class HtmlSegmentRenderer:
    """Render a difference sequence as color-coded HTML.

    Parameters
    ----------
    standalone : bool, default = False
        If True, wrap the fragment in a complete HTML document
    title : str, default = "Diff"
        Document title used when ``standalone`` is True

    Examples
    --------
    Render a fragment:
        >>> from prettydiff.segments import DifferenceSegment, SegmentKind
        >>> renderer = HtmlSegmentRenderer()
        >>> renderer.render([DifferenceSegment(SegmentKind.INSERT, "a<b")])
        '<ins style="background:#e6ffe6;">a&lt;b</ins>'

    """

    def __init__(
        self,
        standalone: bool = False,
        title: str = DEFAULT_HTML_TITLE,
    ):
        """Initialize the HTML segment renderer."""
        self.standalone = standalone
        self.title = title

    def render(self, segments: Iterable[DifferenceSegment]) -> str:
        """Render segments to an HTML string.

        Parameters
        ----------
        segments : iterable of DifferenceSegment
            Difference sequence in order

        Returns
        -------
        str
            HTML-formatted output

        """
        output = StringIO()
        if self.standalone:
            self._write_html_prefix(output)

        for segment in segments:
            open_tag, close_tag = HTML_TAGS[segment.kind]
            output.write(open_tag)
            output.write(escape_segment_text(segment.text))
            output.write(close_tag)

        if self.standalone:
            self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, output: StringIO) -> None:
        """Write the static HTML prefix."""
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write(f"  <title>{escape(self.title)}</title>\n")
        output.write("  <style>\n")
        output.write("    body { font-family: 'Courier New', Courier, monospace; font-size: 14px; }\n")
        output.write("  </style>\n")
        output.write("</head>\n")
        output.write("<body>\n")
        output.write("<div class='diff-content'>")

    def _write_html_suffix(self, output: StringIO) -> None:
        """Write the closing HTML tags."""
        output.write("</div>\n")
        output.write("</body>\n")
        output.write("</html>\n")


def escape_segment_text(text: str) -> str:
    """Escape segment text for HTML and make line terminators visible."""
    return escape(text).replace("\n", HTML_LINE_BREAK)
