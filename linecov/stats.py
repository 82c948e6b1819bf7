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

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class LineCoverageStat:
    """The line coverage statistic of a file, or of several files added up."""

    covered: int
    """How many lines were executed."""

    missed: int
    """How many relevant lines were not executed."""

    never: int
    """How many lines are not relevant for coverage."""

    skipped: int
    """How many lines were excluded by markers."""

    @staticmethod
    def new_empty() -> LineCoverageStat:
        """Create a empty coverage statistic."""
        return LineCoverageStat(0, 0, 0, 0)

    @property
    def total(self) -> int:
        """Get the number of all lines."""
        return self.covered + self.missed + self.never + self.skipped

    @property
    def relevant(self) -> int:
        """Get the number of lines which count for the percentage."""
        return self.total - self.never - self.skipped

    @property
    def percent(self) -> float:
        """Percentage of covered lines.

        >>> LineCoverageStat(2, 1, 1, 0).percent
        66.66666666666667

        A file without any relevant line is fully covered:
        >>> LineCoverageStat(0, 0, 0, 0).percent
        100.0
        >>> LineCoverageStat(0, 0, 5, 0).percent
        100.0

        This also holds if the remaining lines are skipped:
        >>> LineCoverageStat(0, 0, 0, 3).percent
        100.0
        >>> LineCoverageStat(0, 0, 2, 3).percent
        100.0
        """
        if self.total == 0 or self.total == self.never:
            return 100.0

        if self.relevant == 0:
            return 100.0

        return self.covered * 100 / float(self.relevant)

    def __iadd__(self, other: LineCoverageStat) -> LineCoverageStat:
        self.covered += other.covered
        self.missed += other.missed
        self.never += other.never
        self.skipped += other.skipped
        return self
