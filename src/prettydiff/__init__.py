#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/__init__.py
"""Presentation layer for text differences.

prettydiff renders difference sequences (insert / delete / equal segments
between two texts) as:

- an HTML fragment with color-coded ``<ins>``, ``<del>`` and ``<span>``
  elements,
- ANSI-colored inline text for terminals,
- a line-oriented, unified-diff-style report with ``@@`` coordinate headers
  and a configurable context margin.

Examples
--------
Render a line report:
    >>> from prettydiff import RenderConfig, render_lines_pretty
    >>> config = RenderConfig(spacing=" ", context=4)
    >>> print(render_lines_pretty(config, "foo\\nline 1\\n", "line 1\\nfoo\\n"), end="")
    @@ -1,2 +1,2 @@
    - foo
      line 1
    + foo

Render a character-level difference as HTML:
    >>> from prettydiff import compute_segments, render_segments_html
    >>> html = render_segments_html(compute_segments("cat", "cart"))

"""

import logging

from prettydiff.api import render_hunks, render_lines_pretty, render_segments_ansi, render_segments_html
from prettydiff.exceptions import ConfigError, FileError, PrettyDiffError, ValidationError
from prettydiff.lines import build_hunks, compute_segments
from prettydiff.options import RenderConfig
from prettydiff.segments import DifferenceSegment, Hunk, SegmentKind, segments_from_diffs

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "DifferenceSegment",
    "FileError",
    "Hunk",
    "PrettyDiffError",
    "RenderConfig",
    "SegmentKind",
    "ValidationError",
    "build_hunks",
    "compute_segments",
    "render_hunks",
    "render_lines_pretty",
    "render_segments_ansi",
    "render_segments_html",
    "segments_from_diffs",
]
