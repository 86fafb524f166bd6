#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for renderers/unified.py UnifiedHunkRenderer."""

import pytest

from prettydiff.api import render_hunks
from prettydiff.options import RenderConfig
from prettydiff.renderers.unified import (
    ROW_STYLES,
    UnifiedHunkRenderer,
    extract_hunk_headers,
    format_hunk_header,
    parse_hunk_header,
)
from prettydiff.segments import DifferenceSegment, Hunk, SegmentKind

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


def _eq(text):
    return DifferenceSegment(SegmentKind.EQUAL, text)


def _del(text):
    return DifferenceSegment(SegmentKind.DELETE, text)


def _ins(text):
    return DifferenceSegment(SegmentKind.INSERT, text)


@pytest.mark.unit
class TestUnifiedHunkRenderer:
    """Tests for the UnifiedHunkRenderer class."""

    def test_init_defaults(self):
        """Test default initialization."""
        assert UnifiedHunkRenderer().config == RenderConfig()

    def test_every_kind_has_row_style(self):
        """Test that every segment kind has a marker and color."""
        assert set(ROW_STYLES) == set(SegmentKind)
        assert ROW_STYLES[SegmentKind.INSERT] == ("+", GREEN)
        assert ROW_STYLES[SegmentKind.DELETE] == ("-", RED)
        assert ROW_STYLES[SegmentKind.EQUAL] == (" ", "")

    @pytest.mark.parametrize(
        "config",
        [
            RenderConfig(),
            RenderConfig(color=True),
            RenderConfig(spacing="  ", context=0),
            RenderConfig(color=True, spacing=" ", context=10),
        ],
    )
    def test_empty_hunk_sequence(self, config):
        """Test that no hunks render as an empty string for every config."""
        assert UnifiedHunkRenderer(config).render([]) == ""

    def test_single_hunk(self):
        """Test header followed by marked rows."""
        hunk = Hunk(1, 2, 1, 2, (_del("foo\n"), _eq("line 1\n"), _ins("foo\n")))
        result = UnifiedHunkRenderer(RenderConfig(spacing=" ")).render([hunk])
        assert result == "@@ -1,2 +1,2 @@\n- foo\n  line 1\n+ foo\n"

    def test_coordinates_used_verbatim(self):
        """Test that hunk coordinates are not recomputed from the segments."""
        hunk = Hunk(10, 99, 20, 0, (_eq("x\n"),))
        assert render_hunks([hunk]) == "@@ -10,99 +20,0 @@\n x\n"

    def test_final_segment_keeps_missing_terminator(self):
        """Test that the last row of the report stays unterminated."""
        hunk = Hunk(1, 1, 1, 1, (_del("a"), _ins("b")))
        assert render_hunks([hunk]) == "@@ -1,1 +1,1 @@\n-a\n+b"

    def test_only_last_segment_of_last_hunk_is_final(self):
        """Test that an unterminated segment in an earlier hunk is still separated."""
        hunks = [
            Hunk(1, 1, 1, 1, (_eq("x"),)),
            Hunk(5, 0, 5, 1, (_ins("y"),)),
        ]
        assert render_hunks(hunks) == "@@ -1,1 +1,1 @@\n x\n@@ -5,0 +5,1 @@\n+y"

    def test_unterminated_segment_before_last_in_same_hunk(self):
        """Test that a non-final unterminated segment gets a separator."""
        hunk = Hunk(1, 1, 1, 1, (_del("a"), _ins("a\n")))
        assert render_hunks([hunk]) == "@@ -1,1 +1,1 @@\n-a\n+a\n"

    def test_trailing_hunk_without_segments(self):
        """Test that rows stay terminated when the last hunk is empty."""
        hunks = [Hunk(1, 0, 1, 1, (_ins("y"),)), Hunk(4, 0, 5, 0)]
        assert render_hunks(hunks) == "@@ -1,0 +1,1 @@\n+y\n@@ -4,0 +5,0 @@\n"

    def test_multiple_hunks(self):
        """Test that hunks are concatenated with no extra separator."""
        hunks = [
            Hunk(1, 2, 1, 2, (_del("a\n"), _ins("b\n"), _eq("c\n"))),
            Hunk(8, 2, 8, 1, (_eq("h\n"), _del("i\n"))),
        ]
        assert render_hunks(hunks) == "@@ -1,2 +1,2 @@\n-a\n+b\n c\n@@ -8,2 +8,1 @@\n h\n-i\n"

    def test_color(self):
        """Test that changed blocks are colored and headers are not."""
        hunk = Hunk(1, 2, 1, 2, (_del("a\n"), _ins("b\n"), _eq("c\n")))
        result = render_hunks([hunk], RenderConfig(color=True, spacing=" "))
        assert result == f"@@ -1,2 +1,2 @@\n{RED}- a\n{RESET}{GREEN}+ b\n{RESET}  c\n"

    def test_color_block_spans_lines(self):
        """Test that a multi-line block is wrapped once."""
        hunk = Hunk(1, 0, 1, 3, (_ins("a\nb\nc"),))
        result = render_hunks([hunk], RenderConfig(color=True))
        assert result == f"@@ -1,0 +1,3 @@\n{GREEN}+a\n+b\n+c{RESET}"

    def test_spacing(self):
        """Test arbitrary spacing between marker and text."""
        hunk = Hunk(1, 1, 1, 1, (_del("a\n"), _ins("b\n")))
        assert render_hunks([hunk], RenderConfig(spacing=" | ")) == "@@ -1,1 +1,1 @@\n- | a\n+ | b\n"

    def test_render_does_not_alias_input(self):
        """Test that rendering twice gives the same result."""
        hunks = [Hunk(1, 1, 1, 1, (_del("a\n"), _ins("b\n")))]
        renderer = UnifiedHunkRenderer()
        assert renderer.render(hunks) == renderer.render(hunks)


@pytest.mark.unit
class TestHunkHeaders:
    """Tests for header formatting and parsing."""

    def test_format_hunk_header(self):
        """Test the header layout."""
        assert format_hunk_header(Hunk(3, 2, 4, 5)) == "@@ -3,2 +4,5 @@"

    def test_format_always_includes_lengths(self):
        """Test that single-line ranges still show their length."""
        assert format_hunk_header(Hunk(7, 1, 7, 1)) == "@@ -7,1 +7,1 @@"

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("@@ -1,2 +3,4 @@", (1, 2, 3, 4)),
            ("@@ -0,0 +1,12 @@\n", (0, 0, 1, 12)),
            ("@@ -10,5 +12,7 @@ def test()", (10, 5, 12, 7)),
        ],
    )
    def test_parse_hunk_header(self, line, expected):
        """Test parsing coordinates from a header row."""
        assert parse_hunk_header(line) == expected

    @pytest.mark.parametrize("line", ["", " context", "+@@ -1,1 +1,1 @@", "@@ -1 +1 @@", "--- a.txt"])
    def test_parse_non_header(self, line):
        """Test that other rows are not headers."""
        assert parse_hunk_header(line) is None

    def test_extract_hunk_headers_round_trip(self):
        """Test that headers of a colored report parse back to the hunk coordinates."""
        hunks = [
            Hunk(1, 1, 1, 1, (_del("a\n"), _ins("b\n"))),
            Hunk(9, 1, 9, 2, (_eq("x\n"), _ins("y"))),
        ]
        report = render_hunks(hunks, RenderConfig(color=True))
        assert extract_hunk_headers(report) == [h.coordinates for h in hunks]

    def test_extract_ignores_content_rows(self):
        """Test that content that looks like a header is not picked up."""
        hunks = [Hunk(2, 1, 2, 1, (_del("@@ -9,9 +9,9 @@\n"), _ins("x\n")))]
        assert extract_hunk_headers(render_hunks(hunks)) == [(2, 1, 2, 1)]
