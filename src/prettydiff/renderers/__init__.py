#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/renderers/__init__.py
"""Renderers for difference sequences and hunks.

Available Renderers
-------------------
- HtmlSegmentRenderer: Inline HTML with color-coded ``<ins>``/``<del>``/``<span>``
- AnsiSegmentRenderer: Inline terminal text with green/red ANSI codes
- UnifiedHunkRenderer: Line-oriented report with ``@@`` coordinate headers

Examples
--------
Render a difference sequence for the terminal:
    >>> from prettydiff.lines import compute_segments
    >>> from prettydiff.renderers import AnsiSegmentRenderer
    >>> print(AnsiSegmentRenderer().render(compute_segments("cat", "cart")))

Render a line report:
    >>> from prettydiff.lines import build_hunks
    >>> from prettydiff.renderers import UnifiedHunkRenderer
    >>> hunks = build_hunks("a\\nb\\n", "a\\nc\\n", context=1)
    >>> print(UnifiedHunkRenderer().render(hunks), end="")

"""

from prettydiff.renderers.ansi import AnsiSegmentRenderer
from prettydiff.renderers.html import HtmlSegmentRenderer
from prettydiff.renderers.unified import UnifiedHunkRenderer

__all__ = [
    "AnsiSegmentRenderer",
    "HtmlSegmentRenderer",
    "UnifiedHunkRenderer",
]
