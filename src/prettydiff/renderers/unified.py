#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/renderers/unified.py
"""Unified-style hunk renderer with optional ANSI colors.

Every hunk starts with a coordinate header::

    @@ -<source_start>,<source_length> +<target_start>,<target_length> @@

followed by one row per line of each of its segments, prefixed with ``+``
(inserted), ``-`` (deleted) or a space (unchanged) and the configured
spacing. Line terminators are copied verbatim. When the source or target
text ends without a terminator, the last row of the report ends without one
too; every other row is terminated so the report stays line-separated.
"""

from __future__ import annotations

from io import StringIO
from typing import Sequence, TextIO

from prettydiff.constants import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    HUNK_HEADER_PATTERN,
    HUNK_HEADER_TEMPLATE,
    LINE_TERMINATOR,
    MARKER_DELETE,
    MARKER_EQUAL,
    MARKER_INSERT,
)
from prettydiff.options import RenderConfig
from prettydiff.renderers.ansi import strip_ansi
from prettydiff.segments import Hunk, SegmentKind

# (marker, color) per segment kind
ROW_STYLES: dict[SegmentKind, tuple[str, str]] = {
    SegmentKind.INSERT: (MARKER_INSERT, ANSI_GREEN),
    SegmentKind.DELETE: (MARKER_DELETE, ANSI_RED),
    SegmentKind.EQUAL: (MARKER_EQUAL, ""),
}


def write_marked_block(
    output: TextIO,
    marker: str,
    text: str,
    *,
    spacing: str = "",
    color: str = "",
    is_final: bool = False,
) -> int:
    """Write one marked row per line of ``text``.

    The color code, when given, is written once before the first row and the
    reset code once after the last row, so colors are not repeated per line.

    Parameters
    ----------
    output : TextIO
        Buffer receiving the rows
    marker : str
        Row marker (``+``, ``-`` or a space)
    text : str
        Block text; may contain any number of line terminators
    spacing : str, default = ""
        Written between the marker and the line text
    color : str, default = ""
        ANSI color prefix, or empty for no color
    is_final : bool, default = False
        True only for the last segment of the whole report. A trailing line
        without terminator then stays unterminated; otherwise one is added.

    Returns
    -------
    int
        Number of rows written

    """
    if not text:
        return 0

    if color:
        output.write(color)

    rows = 0
    cursor = 0
    while True:
        end = text.find(LINE_TERMINATOR, cursor)
        if end == -1:
            break
        output.write(marker)
        output.write(spacing)
        output.write(text[cursor : end + 1])
        cursor = end + 1
        rows += 1

    if cursor < len(text):
        output.write(marker)
        output.write(spacing)
        output.write(text[cursor:])
        if not is_final:
            output.write(LINE_TERMINATOR)
        rows += 1

    if color:
        output.write(ANSI_RESET)
    return rows


def format_hunk_header(hunk: Hunk) -> str:
    """Format the coordinate header of a hunk (without terminator)."""
    return HUNK_HEADER_TEMPLATE.format(
        source_start=hunk.source_start,
        source_length=hunk.source_length,
        target_start=hunk.target_start,
        target_length=hunk.target_length,
    )


def parse_hunk_header(line: str) -> tuple[int, int, int, int] | None:
    """Parse a coordinate header row.

    Parameters
    ----------
    line : str
        A row of a rendered report

    Returns
    -------
    tuple of int or None
        ``(source_start, source_length, target_start, target_length)``, or
        None when the row is not a header

    """
    match = HUNK_HEADER_PATTERN.match(line)
    if match is None:
        return None
    source_start, source_length, target_start, target_length = (int(g) for g in match.groups())
    return source_start, source_length, target_start, target_length


def _locate_final_segment(hunks: Sequence[Hunk]) -> tuple[int, int] | None:
    """Return ``(hunk_index, segment_index)`` of the last segment of the last hunk.

    None when there are no hunks or the last hunk has no segments; every
    row is then terminated.
    """
    if not hunks or not hunks[-1].segments:
        return None
    return len(hunks) - 1, len(hunks[-1].segments) - 1


class UnifiedHunkRenderer:
    """Render hunks as a unified-diff-style report.

    Parameters
    ----------
    config : RenderConfig, optional
        Color, spacing and context settings; defaults to ``RenderConfig()``

    Examples
    --------
    Render a single hunk:
        >>> from prettydiff.segments import DifferenceSegment, Hunk, SegmentKind
        >>> hunk = Hunk(1, 1, 1, 1, (
        ...     DifferenceSegment(SegmentKind.DELETE, "old\\n"),
        ...     DifferenceSegment(SegmentKind.INSERT, "new\\n"),
        ... ))
        >>> print(UnifiedHunkRenderer(RenderConfig(spacing=" ")).render([hunk]), end="")
        @@ -1,1 +1,1 @@
        - old
        + new

    """

    def __init__(self, config: RenderConfig | None = None):
        """Initialize the unified hunk renderer."""
        self.config = config if config is not None else RenderConfig()

    def render(self, hunks: Sequence[Hunk]) -> str:
        """Render hunks to a report string.

        Parameters
        ----------
        hunks : sequence of Hunk
            Hunks in report order; coordinates are used verbatim

        Returns
        -------
        str
            The report, or an empty string when there are no hunks

        """
        output = StringIO()
        final = _locate_final_segment(hunks)

        for hunk_index, hunk in enumerate(hunks):
            output.write(format_hunk_header(hunk))
            output.write(LINE_TERMINATOR)

            for segment_index, segment in enumerate(hunk.segments):
                marker, color = ROW_STYLES[segment.kind]
                write_marked_block(
                    output,
                    marker,
                    segment.text,
                    spacing=self.config.spacing,
                    color=color if self.config.color else "",
                    is_final=(hunk_index, segment_index) == final,
                )

        return output.getvalue()


def extract_hunk_headers(report: str) -> list[tuple[int, int, int, int]]:
    """Return the coordinates of every header row in a rendered report.

    Color codes are stripped first: a reset code closing a colored block
    lands at the start of the following row.
    """
    headers = []
    for row in strip_ansi(report).split(LINE_TERMINATOR):
        coordinates = parse_hunk_header(row)
        if coordinates is not None:
            headers.append(coordinates)
    return headers
