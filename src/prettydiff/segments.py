#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/segments.py
"""Data model for difference sequences and hunks.

A difference sequence is an ordered list of :class:`DifferenceSegment`
values. Concatenating the ``EQUAL`` and ``INSERT`` texts reconstructs the
target text; concatenating the ``EQUAL`` and ``DELETE`` texts reconstructs
the source text. A :class:`Hunk` groups the segments around one region of
change together with its unified-diff coordinates.

All values are immutable and validated when they are constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from prettydiff.exceptions import ValidationError


class SegmentKind(Enum):
    """Kind of a difference segment.

    The set of kinds is closed: every renderer defines its output for each
    of the three members.
    """

    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"

    @classmethod
    def from_operation(cls, operation: int) -> SegmentKind:
        """Map a diff-match-patch operation code to a segment kind.

        Parameters
        ----------
        operation : int
            ``-1`` (delete), ``0`` (equal) or ``1`` (insert)

        Returns
        -------
        SegmentKind
            The matching kind

        Raises
        ------
        ValidationError
            If the operation code is unknown

        """
        try:
            return _OPERATION_KINDS[operation]
        except KeyError:
            raise ValidationError(
                f"Unknown diff operation code: {operation!r}",
                parameter_name="operation",
                parameter_value=operation,
            ) from None


_OPERATION_KINDS = {
    -1: SegmentKind.DELETE,
    0: SegmentKind.EQUAL,
    1: SegmentKind.INSERT,
}


@dataclass(frozen=True, slots=True)
class DifferenceSegment:
    """One (kind, text) unit of a difference sequence.

    Parameters
    ----------
    kind : SegmentKind
        Whether the text was inserted, deleted or left unchanged
    text : str
        Segment text; may span several lines

    """

    kind: SegmentKind
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, SegmentKind):
            raise ValidationError(
                f"kind must be a SegmentKind, got {type(self.kind).__name__}",
                parameter_name="kind",
                parameter_value=self.kind,
            )
        if not isinstance(self.text, str):
            raise ValidationError(
                f"text must be a string, got {type(self.text).__name__}",
                parameter_name="text",
                parameter_value=self.text,
            )

    @property
    def line_count(self) -> int:
        """Number of rendered rows this text occupies.

        A trailing line without terminator counts as one line.
        """
        if not self.text:
            return 0
        return self.text.count("\n") + (0 if self.text.endswith("\n") else 1)


@dataclass(frozen=True, slots=True)
class Hunk:
    """A group of segments with its unified-diff coordinates.

    Coordinates are 1-based and follow ``diff -u`` numbering: when a length
    is zero, the start names the line just before the empty range.

    Parameters
    ----------
    source_start : int
        First source line covered by the hunk
    source_length : int
        Number of source lines covered by the hunk
    target_start : int
        First target line covered by the hunk
    target_length : int
        Number of target lines covered by the hunk
    segments : sequence of DifferenceSegment
        Segments in the hunk, stored as a tuple

    """

    source_start: int
    source_length: int
    target_start: int
    target_length: int
    segments: tuple[DifferenceSegment, ...] = ()

    def __post_init__(self) -> None:
        for name in ("source_start", "source_length", "target_start", "target_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValidationError(
                    f"{name} must be a non-negative integer, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
        segments = tuple(self.segments)
        for segment in segments:
            if not isinstance(segment, DifferenceSegment):
                raise ValidationError(
                    f"segments must contain DifferenceSegment values, got {type(segment).__name__}",
                    parameter_name="segments",
                    parameter_value=segment,
                )
        # Frozen dataclass: normalise lists to tuples in place
        object.__setattr__(self, "segments", segments)

    @property
    def coordinates(self) -> tuple[int, int, int, int]:
        """Return ``(source_start, source_length, target_start, target_length)``."""
        return (self.source_start, self.source_length, self.target_start, self.target_length)


def segments_from_diffs(diffs: Iterable[tuple[int, str]]) -> list[DifferenceSegment]:
    """Convert diff-match-patch ``(operation, text)`` tuples to segments.

    Parameters
    ----------
    diffs : iterable of (int, str)
        Output of ``diff_match_patch.diff_main`` or a cleanup pass

    Returns
    -------
    list of DifferenceSegment
        Segments in the same order

    """
    return [DifferenceSegment(SegmentKind.from_operation(op), text) for op, text in diffs]


def source_text(segments: Sequence[DifferenceSegment]) -> str:
    """Reconstruct the source text from a difference sequence."""
    return "".join(s.text for s in segments if s.kind is not SegmentKind.INSERT)


def target_text(segments: Sequence[DifferenceSegment]) -> str:
    """Reconstruct the target text from a difference sequence."""
    return "".join(s.text for s in segments if s.kind is not SegmentKind.DELETE)
