#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/renderers/ansi.py
"""Inline ANSI renderer for flat difference sequences.

Insertions are wrapped in green, deletions in red, and unchanged text is
written as is. Stripping the escape codes from the output gives back the
concatenation of every segment text.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from prettydiff.constants import ANSI_ESCAPE_PATTERN, ANSI_GREEN, ANSI_RED, ANSI_RESET
from prettydiff.segments import DifferenceSegment, SegmentKind

ANSI_COLORS: dict[SegmentKind, str] = {
    SegmentKind.INSERT: ANSI_GREEN,
    SegmentKind.DELETE: ANSI_RED,
    SegmentKind.EQUAL: "",
}


class AnsiSegmentRenderer:
    """Render a difference sequence as ANSI-colored text.

    Examples
    --------
        >>> from prettydiff.segments import DifferenceSegment, SegmentKind
        >>> segments = [
        ...     DifferenceSegment(SegmentKind.EQUAL, "a"),
        ...     DifferenceSegment(SegmentKind.DELETE, "b"),
        ... ]
        >>> AnsiSegmentRenderer().render(segments)
        'a\\x1b[31mb\\x1b[0m'

    """

    def render(self, segments: Iterable[DifferenceSegment]) -> str:
        """Render segments to a colored string.

        Parameters
        ----------
        segments : iterable of DifferenceSegment
            Difference sequence in order

        Returns
        -------
        str
            Text with ANSI escape codes around changed segments

        """
        output = StringIO()
        for segment in segments:
            color = ANSI_COLORS[segment.kind]
            if color:
                output.write(color)
                output.write(segment.text)
                output.write(ANSI_RESET)
            else:
                output.write(segment.text)
        return output.getvalue()


def strip_ansi(text: str) -> str:
    """Remove ANSI color escape sequences from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)
