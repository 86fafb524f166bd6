#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/lines.py
"""Line-level difference pipeline feeding the hunk renderer.

The renderers consume already-computed differences. This module wires up
the collaborators that compute them:

- :func:`encode_lines` maps every distinct line to a single code point so
  the character-level algorithm works on whole lines.
- ``diff_match_patch.diff_main`` produces the ordered edit script. Texts
  with more distinct lines than there are code points fall back to
  ``difflib.SequenceMatcher`` opcodes.
- ``difflib.SequenceMatcher.get_grouped_opcodes`` groups the line edits
  into hunks bounded by the context margin.

Lines are split on ``\\n`` only and keep their terminator, so ``\\r\\n``
endings and a missing final terminator survive into the rendered report.
"""

from __future__ import annotations

import difflib
import logging
import re
import sys
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from diff_match_patch import diff_match_patch

from prettydiff.constants import DEFAULT_DIFF_TIMEOUT
from prettydiff.exceptions import PrettyDiffError, ValidationError
from prettydiff.segments import DifferenceSegment, Hunk, SegmentKind, segments_from_diffs

logger = logging.getLogger(__name__)

OpcodeTag = Literal["replace", "delete", "insert", "equal"]
Opcode = Tuple[OpcodeTag, int, int, int, int]

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")

# Line codes start at U+0001 and skip the UTF-16 surrogate block
_SURROGATE_START = 0xD800
_SURROGATE_COUNT = 0x800
MAX_ENCODED_LINES = sys.maxunicode - _SURROGATE_COUNT


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's ``\\n`` terminator.

    Parameters
    ----------
    text : str
        Text to split

    Returns
    -------
    list of str
        Lines in order; a final line without terminator is kept as is

    """
    return _LINE_RE.findall(text)


def _line_code(index: int) -> str:
    code_point = index + 1
    if code_point >= _SURROGATE_START:
        code_point += _SURROGATE_COUNT
    return chr(code_point)


def encode_lines(
    source_lines: Sequence[str],
    target_lines: Sequence[str],
    max_lines: Optional[int] = None,
) -> Optional[Tuple[str, str]]:
    """Encode two line lists as strings with one code point per line.

    Equal lines share a code point, distinct lines never do.

    Parameters
    ----------
    source_lines : sequence of str
        Lines of the original text
    target_lines : sequence of str
        Lines of the modified text
    max_lines : int, optional
        Largest number of distinct lines to encode; defaults to
        ``MAX_ENCODED_LINES``

    Returns
    -------
    tuple of str or None
        ``(source_chars, target_chars)``, each as long as its line list, or
        None when the texts have more than ``max_lines`` distinct lines

    """
    if max_lines is None:
        max_lines = MAX_ENCODED_LINES

    codes: Dict[str, str] = {}
    encoded: List[str] = []
    for lines in (source_lines, target_lines):
        chars = []
        for line in lines:
            code = codes.get(line)
            if code is None:
                if len(codes) >= max_lines:
                    return None
                code = _line_code(len(codes))
                codes[line] = code
            chars.append(code)
        encoded.append("".join(chars))
    return encoded[0], encoded[1]


def _new_differ(timeout: float) -> diff_match_patch:
    if timeout < 0:
        raise ValidationError(
            f"timeout must be non-negative, got {timeout}",
            parameter_name="timeout",
            parameter_value=timeout,
        )
    differ = diff_match_patch()
    differ.Diff_Timeout = timeout
    return differ


def _diffs_to_opcodes(diffs: Sequence[tuple[int, str]]) -> List[Opcode]:
    """Convert line-encoded diffs to ``(tag, i1, i2, j1, j2)`` opcodes.

    Each character of an encoded diff stands for one line. Runs of deletions
    and insertions between two equalities become a single ``replace``.
    """
    opcodes: List[Opcode] = []
    i = j = 0
    deleted = inserted = 0

    # Trailing sentinel equality flushes the last run of changes
    for operation, chars in [*diffs, (diff_match_patch.DIFF_EQUAL, "")]:
        if operation == diff_match_patch.DIFF_DELETE:
            deleted += len(chars)
            continue
        if operation == diff_match_patch.DIFF_INSERT:
            inserted += len(chars)
            continue

        if deleted or inserted:
            tag: OpcodeTag
            if deleted and inserted:
                tag = "replace"
            elif deleted:
                tag = "delete"
            else:
                tag = "insert"
            opcodes.append((tag, i, i + deleted, j, j + inserted))
            i += deleted
            j += inserted
            deleted = inserted = 0

        if chars:
            opcodes.append(("equal", i, i + len(chars), j, j + len(chars)))
            i += len(chars)
            j += len(chars)

    return opcodes


def diff_lines(source: str, target: str, *, timeout: float = DEFAULT_DIFF_TIMEOUT) -> List[Opcode]:
    """Compute a line-level edit script between two texts.

    Parameters
    ----------
    source : str
        Original text
    target : str
        Modified text
    timeout : float, default = 1.0
        Seconds the difference producer may spend; 0 means no limit

    Returns
    -------
    list of tuple
        ``(tag, i1, i2, j1, j2)`` opcodes over the lines returned by
        :func:`split_lines`, in the same format as ``difflib``

    """
    return _line_opcodes(split_lines(source), split_lines(target), timeout)


def _line_opcodes(source_lines: list[str], target_lines: list[str], timeout: float) -> List[Opcode]:
    differ = _new_differ(timeout)
    encoded = encode_lines(source_lines, target_lines)

    if encoded is None:
        logger.debug("Too many distinct lines to encode, using difflib for the line diff")
        matcher = difflib.SequenceMatcher(None, source_lines, target_lines, autojunk=False)
        opcodes: List[Opcode] = list(matcher.get_opcodes())  # type: ignore[arg-type]
    else:
        source_chars, target_chars = encoded
        diffs = differ.diff_main(source_chars, target_chars, False)
        opcodes = _diffs_to_opcodes(diffs)

    covered_source = opcodes[-1][2] if opcodes else 0
    covered_target = opcodes[-1][4] if opcodes else 0
    if covered_source != len(source_lines) or covered_target != len(target_lines):
        raise PrettyDiffError(
            f"Line diff covers {covered_source}/{covered_target} lines, "
            f"expected {len(source_lines)}/{len(target_lines)}"
        )

    logger.debug(
        "Line diff: %d source lines, %d target lines, %d opcodes",
        len(source_lines),
        len(target_lines),
        len(opcodes),
    )
    return opcodes


class _LineOpcodeMatcher(difflib.SequenceMatcher):
    """SequenceMatcher whose opcodes come from a precomputed line diff."""

    def __init__(self, source_lines: list[str], target_lines: list[str], opcodes: List[Opcode]):
        super().__init__(None, source_lines, target_lines, autojunk=False)
        self._precomputed_opcodes = opcodes

    def get_opcodes(self) -> list:  # type: ignore[override]
        # get_grouped_opcodes rewrites the first and last entries in place
        return list(self._precomputed_opcodes)


def _unified_range(start: int, stop: int) -> tuple[int, int]:
    """Convert a 0-based half-open range to ``diff -u`` start and length."""
    length = stop - start
    beginning = start + 1
    if not length:
        beginning -= 1
    return beginning, length


def _group_to_hunk(group: Sequence[Opcode], source_lines: list[str], target_lines: list[str]) -> Hunk:
    segments: list[DifferenceSegment] = []
    for tag, i1, i2, j1, j2 in group:
        if tag == "equal":
            if i1 < i2:
                segments.append(DifferenceSegment(SegmentKind.EQUAL, "".join(source_lines[i1:i2])))
            continue
        # Deletions come before insertions at a point of divergence
        if tag in ("replace", "delete") and i1 < i2:
            segments.append(DifferenceSegment(SegmentKind.DELETE, "".join(source_lines[i1:i2])))
        if tag in ("replace", "insert") and j1 < j2:
            segments.append(DifferenceSegment(SegmentKind.INSERT, "".join(target_lines[j1:j2])))

    first, last = group[0], group[-1]
    source_start, source_length = _unified_range(first[1], last[2])
    target_start, target_length = _unified_range(first[3], last[4])
    return Hunk(source_start, source_length, target_start, target_length, tuple(segments))


def build_hunks(
    source: str,
    target: str,
    context: int,
    *,
    timeout: float = DEFAULT_DIFF_TIMEOUT,
) -> list[Hunk]:
    """Group the line differences between two texts into hunks.

    Each hunk keeps at most ``context`` unchanged lines before its first
    change and after its last change; fewer when the text has fewer. Two
    changes separated by no more than ``2 * context`` unchanged lines share
    a hunk.

    Parameters
    ----------
    source : str
        Original text
    target : str
        Modified text
    context : int
        Context margin in lines
    timeout : float, default = 1.0
        Seconds the difference producer may spend; 0 means no limit

    Returns
    -------
    list of Hunk
        Hunks in order; empty when the texts are identical

    """
    if isinstance(context, bool) or not isinstance(context, int) or context < 0:
        raise ValidationError(
            f"context must be a non-negative integer, got {context!r}",
            parameter_name="context",
            parameter_value=context,
        )

    source_lines = split_lines(source)
    target_lines = split_lines(target)
    opcodes = _line_opcodes(source_lines, target_lines, timeout)

    matcher = _LineOpcodeMatcher(source_lines, target_lines, opcodes)
    hunks = [_group_to_hunk(group, source_lines, target_lines) for group in matcher.get_grouped_opcodes(context)]
    logger.debug("Built %d hunks with context %d", len(hunks), context)
    return hunks


def compute_segments(
    source: str,
    target: str,
    *,
    timeout: float = DEFAULT_DIFF_TIMEOUT,
    semantic_cleanup: bool = False,
) -> list[DifferenceSegment]:
    """Compute a character-level difference sequence between two texts.

    Parameters
    ----------
    source : str
        Original text
    target : str
        Modified text
    timeout : float, default = 1.0
        Seconds the difference producer may spend; 0 means no limit
    semantic_cleanup : bool, default = False
        Run diff-match-patch's semantic cleanup to favour human-readable
        segment boundaries

    Returns
    -------
    list of DifferenceSegment
        Segments whose EQUAL+DELETE texts rebuild ``source`` and whose
        EQUAL+INSERT texts rebuild ``target``

    """
    differ = _new_differ(timeout)
    diffs = differ.diff_main(source, target)
    if semantic_cleanup:
        differ.diff_cleanupSemantic(diffs)
    return segments_from_diffs(diffs)
