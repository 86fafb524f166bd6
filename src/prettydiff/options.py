#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/options.py
"""Render configuration for the line-oriented report.

:class:`RenderConfig` is a frozen dataclass. Invalid values are rejected
when the object is created, so a renderer never sees a configuration it
cannot honour.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from prettydiff.constants import DEFAULT_COLOR, DEFAULT_CONTEXT, DEFAULT_SPACING
from prettydiff.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RenderConfig(CloneFrozenMixin):
    """Configuration for the unified-style hunk report.

    Parameters
    ----------
    color : bool, default=False
        Wrap inserted and deleted blocks in ANSI color codes
    spacing : str, default=""
        Text written between the row marker and the line text
    context : int, default=3
        Maximum number of unchanged lines kept around each change

    Examples
    --------
    >>> config = RenderConfig(spacing=" ", context=4)
    >>> config.create_updated(color=True).color
    True

    """

    color: bool = field(
        default=DEFAULT_COLOR,
        metadata={"help": "Colorize inserted (green) and deleted (red) rows with ANSI codes"},
    )
    spacing: str = field(
        default=DEFAULT_SPACING,
        metadata={"help": "Separator between the row marker and the line text"},
    )
    context: int = field(
        default=DEFAULT_CONTEXT,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate field types and ranges.

        Raises
        ------
        ValidationError
            If any field value is of the wrong type or outside its valid range.

        """
        if not isinstance(self.color, bool):
            raise ValidationError(
                f"color must be a bool, got {type(self.color).__name__}",
                parameter_name="color",
                parameter_value=self.color,
            )
        if not isinstance(self.spacing, str):
            raise ValidationError(
                f"spacing must be a string, got {type(self.spacing).__name__}",
                parameter_name="spacing",
                parameter_value=self.spacing,
            )
        # A terminator in the spacing would split every row in two
        if "\n" in self.spacing or "\r" in self.spacing:
            raise ValidationError(
                "spacing must not contain line terminators",
                parameter_name="spacing",
                parameter_value=self.spacing,
            )
        if isinstance(self.context, bool) or not isinstance(self.context, int):
            raise ValidationError(
                f"context must be an integer, got {type(self.context).__name__}",
                parameter_name="context",
                parameter_value=self.context,
            )
        if self.context < 0:
            raise ValidationError(
                f"context must be non-negative, got {self.context}",
                parameter_name="context",
                parameter_value=self.context,
            )

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the names of all configurable fields."""
        return tuple(f.name for f in fields(cls))
