#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/constants.py
"""Constants and default values for the prettydiff library.

Constants are organized by category:
1. Type Definitions - Literal types used by the CLI and config layer
2. Render Defaults - RenderConfig defaults
3. ANSI Escape Codes - Terminal colors
4. HTML Markup - Tags and styles used by the HTML segment renderer
5. Unified Report - Markers and header format for the hunk renderer
6. Configuration Discovery - File names and environment prefix
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["unified", "ansi", "html"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Render Defaults
# =============================================================================

DEFAULT_COLOR = False
DEFAULT_SPACING = ""
DEFAULT_CONTEXT = 3

# Seconds the difference producer may spend before settling for a coarser diff
DEFAULT_DIFF_TIMEOUT = 1.0

# =============================================================================
# ANSI Escape Codes
# =============================================================================

ANSI_GREEN = "\x1b[32m"
ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"

# Matches SGR sequences such as "\x1b[32m" and "\x1b[0m"
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

# =============================================================================
# HTML Markup
# =============================================================================

HTML_INSERT_OPEN = '<ins style="background:#e6ffe6;">'
HTML_INSERT_CLOSE = "</ins>"
HTML_DELETE_OPEN = '<del style="background:#ffe6e6;">'
HTML_DELETE_CLOSE = "</del>"
HTML_EQUAL_OPEN = "<span>"
HTML_EQUAL_CLOSE = "</span>"

# Replacement for every line terminator inside HTML segment text
HTML_LINE_BREAK = "&para;<br>"

DEFAULT_HTML_TITLE = "Diff"

# =============================================================================
# Unified Report
# =============================================================================

MARKER_INSERT = "+"
MARKER_DELETE = "-"
MARKER_EQUAL = " "

LINE_TERMINATOR = "\n"

HUNK_HEADER_TEMPLATE = "@@ -{source_start},{source_length} +{target_start},{target_length} @@"
HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+),(\d+) \+(\d+),(\d+) @@")

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES = [".prettydiff.toml", ".prettydiff.yaml", ".prettydiff.yml", ".prettydiff.json"]
PYPROJECT_TOOL_SECTION = "prettydiff"
ENV_PREFIX = "PRETTYDIFF_"
