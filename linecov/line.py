# -*- coding:utf-8 -*-

#  ************************** Copyrights and license ***************************
#
# This file is part of linecov 1.0, a line coverage model for source files.
#
# _____________________________________________________________________________
#
# Copyright (c) 2024-2026 the linecov authors
#
# This software is distributed under the 3-clause BSD License.
# For more information, see the README.rst file.
#
# ****************************************************************************

"""
A single source line together with its coverage classification.
"""

from __future__ import annotations
from dataclasses import dataclass
import enum
from typing import Optional

from .exceptions import LineValidationError


class LineStatus(enum.Enum):
    """The coverage category of a line. Every line has exactly one."""

    COVERED = "covered"
    MISSED = "missed"
    NEVER = "never"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Line:
    """
    One physical line of a source file.

    ``coverage`` is either ``None`` (the line isn't relevant for coverage,
    e.g. a comment), ``0`` (the line was missed) or the number of times
    the line was executed.

    >>> Line("x = 1\\n", 1, 3).status
    <LineStatus.COVERED: 'covered'>
    >>> Line("x = 1\\n", 1, 3, skipped=True).status
    <LineStatus.SKIPPED: 'skipped'>
    >>> Line("# comment\\n", 2, None).never
    True
    """

    src: str
    line_number: int
    coverage: Optional[int]
    skipped: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.src, str):
            raise LineValidationError(
                f"Only str accepted for source, got {type(self.src).__name__}."
            )
        if isinstance(self.line_number, bool) or not isinstance(
            self.line_number, int
        ):
            raise LineValidationError(
                f"Only int accepted for line_number, got {type(self.line_number).__name__}."
            )
        if self.line_number < 1:
            raise LineValidationError(
                f"Line numbers start at 1, got {self.line_number}."
            )
        if not isinstance(self.skipped, bool):
            raise LineValidationError(
                f"Only bool accepted for skipped, got {type(self.skipped).__name__}."
            )
        if self.coverage is not None:
            if isinstance(self.coverage, bool) or not isinstance(self.coverage, int):
                raise LineValidationError(
                    f"Only int and None accepted for coverage, got {type(self.coverage).__name__}."
                )
            if self.coverage < 0:
                raise LineValidationError(
                    f"Coverage must not be negative, got {self.coverage} for line {self.line_number}."
                )

    @property
    def source(self) -> str:
        """Alias for ``src``."""
        return self.src

    @property
    def line(self) -> int:
        """Alias for ``line_number``."""
        return self.line_number

    @property
    def number(self) -> int:
        """Alias for ``line_number``."""
        return self.line_number

    @property
    def status(self) -> LineStatus:
        """The coverage category, an exclusion always wins over the raw count."""
        if self.skipped:
            return LineStatus.SKIPPED
        if self.coverage is None:
            return LineStatus.NEVER
        if self.coverage == 0:
            return LineStatus.MISSED
        return LineStatus.COVERED

    @property
    def covered(self) -> bool:
        """True if the line was executed at least once."""
        return self.status is LineStatus.COVERED

    @property
    def missed(self) -> bool:
        """True if the line should have been covered, but was not."""
        return self.status is LineStatus.MISSED

    @property
    def never(self) -> bool:
        """True if the line is not relevant for coverage."""
        return self.status is LineStatus.NEVER
