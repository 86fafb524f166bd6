#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/api.py
"""Python API for rendering differences.

This module provides the high-level functions most callers need: render a
difference sequence as HTML or ANSI text, or compare two texts line by line
and render the result as a unified-style report.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from prettydiff.lines import build_hunks
from prettydiff.options import RenderConfig
from prettydiff.renderers.ansi import AnsiSegmentRenderer
from prettydiff.renderers.html import HtmlSegmentRenderer
from prettydiff.renderers.unified import UnifiedHunkRenderer
from prettydiff.segments import DifferenceSegment, Hunk

logger = logging.getLogger(__name__)


def render_segments_html(segments: Iterable[DifferenceSegment]) -> str:
    """Render a difference sequence as an HTML fragment.

    Parameters
    ----------
    segments : iterable of DifferenceSegment
        Difference sequence in order

    Returns
    -------
    str
        Concatenated ``<ins>``/``<del>``/``<span>`` elements

    Examples
    --------
        >>> from prettydiff import DifferenceSegment, SegmentKind, render_segments_html
        >>> render_segments_html([DifferenceSegment(SegmentKind.EQUAL, "a\\n")])
        '<span>a&para;<br></span>'

    """
    return HtmlSegmentRenderer().render(segments)


def render_segments_ansi(segments: Iterable[DifferenceSegment]) -> str:
    """Render a difference sequence as ANSI-colored text.

    Parameters
    ----------
    segments : iterable of DifferenceSegment
        Difference sequence in order

    Returns
    -------
    str
        Segment texts with green insertions and red deletions

    """
    return AnsiSegmentRenderer().render(segments)


def render_hunks(hunks: Sequence[Hunk], config: RenderConfig | None = None) -> str:
    """Render prebuilt hunks as a unified-style report.

    Parameters
    ----------
    hunks : sequence of Hunk
        Hunks in report order; coordinates are used verbatim
    config : RenderConfig, optional
        Render settings; defaults to ``RenderConfig()``

    Returns
    -------
    str
        The rendered report

    """
    return UnifiedHunkRenderer(config).render(hunks)


def render_lines_pretty(config: RenderConfig | None, source_text: str, target_text: str) -> str:
    """Compare two texts line by line and render a unified-style report.

    Parameters
    ----------
    config : RenderConfig or None
        Color, spacing and context settings; None uses the defaults
    source_text : str
        Original text
    target_text : str
        Modified text

    Returns
    -------
    str
        One ``@@`` header per hunk followed by its marked rows; an empty
        string when the texts have the same lines

    Examples
    --------
        >>> from prettydiff import RenderConfig, render_lines_pretty
        >>> report = render_lines_pretty(RenderConfig(spacing=" ", context=4), "foo\\nline 1\\n", "line 1\\nfoo\\n")
        >>> print(report, end="")
        @@ -1,2 +1,2 @@
        - foo
          line 1
        + foo

    """
    if config is None:
        config = RenderConfig()
    hunks = build_hunks(source_text, target_text, config.context)
    logger.debug("Rendering %d hunks (color=%s)", len(hunks), config.color)
    return UnifiedHunkRenderer(config).render(hunks)
