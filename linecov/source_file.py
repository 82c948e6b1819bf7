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
The coverage of a single source file.

The raw execution counts and the source lines are combined into
:class:`~linecov.line.Line` objects, everything derived from them
is computed on first access and kept for the lifetime of the object.
"""

from __future__ import annotations
import logging
from threading import Lock
from typing import List, Optional, Sequence, Set

from .exceptions import LineNumberOutOfRangeError
from .exclusions import DEFAULT_EXCLUDE_MARKER_TAG, find_skipped_line_numbers
from .line import Line, LineStatus
from .stats import LineCoverageStat

LOGGER = logging.getLogger("linecov")


class SourceFile:
    """
    Representation of a source file including its coverage data.

    Arguments:
        filename: the name of the file, only used for messages
        coverage: the execution count of each line, ``None`` if not relevant
        src: the source lines of the file
        exclude_marker_tag: the tag of the ``#:nocov:`` toggle markers

    >>> source_file = SourceFile("example.py", [1, 0, None, 2], ["a\\n", "b\\n", "c\\n", "d\\n"])
    >>> [line.status.value for line in source_file.lines]
    ['covered', 'missed', 'never', 'covered']
    >>> round(source_file.covered_percent, 2)
    66.67
    """

    def __init__(
        self,
        filename: str,
        coverage: Sequence[Optional[int]],
        src: Sequence[str],
        *,
        exclude_marker_tag: str = DEFAULT_EXCLUDE_MARKER_TAG,
    ) -> None:
        self.filename = filename
        self.coverage = list(coverage)
        self.src = list(src)
        self.skipped_line_numbers: Set[int] = find_skipped_line_numbers(
            self.src, tag=exclude_marker_tag, filename=filename
        )

        self.__lock = Lock()
        self.__lines: Optional[List[Line]] = None
        self.__lines_by_status: dict[LineStatus, List[Line]] = {}

    @classmethod
    def from_path(
        cls,
        filename: str,
        coverage: Sequence[Optional[int]],
        *,
        encoding: str = "utf-8",
        exclude_marker_tag: str = DEFAULT_EXCLUDE_MARKER_TAG,
    ) -> SourceFile:
        """Read the source lines from the file, line endings are kept."""
        LOGGER.debug(f"Reading source file {filename} with encoding {encoding}.")
        with open(filename, encoding=encoding, errors="replace") as source_file:
            src = source_file.readlines()

        return cls(filename, coverage, src, exclude_marker_tag=exclude_marker_tag)

    def __repr__(self) -> str:
        return f"SourceFile({self.filename!r}, lines={len(self.src)})"

    @property
    def source(self) -> List[str]:
        """Alias for ``src``."""
        return self.src

    @property
    def lines(self) -> List[Line]:
        """All source lines of the file with their coverage data."""
        if self.__lines is None:
            with self.__lock:
                if self.__lines is None:
                    self.__lines = self._build_lines()
        return self.__lines

    @property
    def source_lines(self) -> List[Line]:
        """Alias for ``lines``."""
        return self.lines

    def _build_lines(self) -> List[Line]:
        if len(self.coverage) > len(self.src):
            LOGGER.warning(
                f"Coverage data has {len(self.coverage)} entries but "
                f"{self.filename} has only {len(self.src)} lines, "
                "ignoring the extra entries."
            )

        return [
            Line(
                code,
                lineno,
                self.coverage[lineno - 1] if lineno <= len(self.coverage) else None,
                lineno in self.skipped_line_numbers,
            )
            for lineno, code in enumerate(self.src, 1)
        ]

    def line(self, number: int) -> Line:
        """Get the line by its number, the first line is 1."""
        lines = self.lines
        if not 1 <= number <= len(lines):
            raise LineNumberOutOfRangeError(self.filename, number, len(lines))
        return lines[number - 1]

    def _lines_with_status(self, status: LineStatus) -> List[Line]:
        if status not in self.__lines_by_status:
            lines = self.lines
            with self.__lock:
                if status not in self.__lines_by_status:
                    self.__lines_by_status[status] = [
                        line for line in lines if line.status is status
                    ]
        return self.__lines_by_status[status]

    @property
    def covered_lines(self) -> List[Line]:
        """All lines which were executed."""
        return self._lines_with_status(LineStatus.COVERED)

    @property
    def missed_lines(self) -> List[Line]:
        """All lines that should have been, but were not covered."""
        return self._lines_with_status(LineStatus.MISSED)

    @property
    def never_lines(self) -> List[Line]:
        """All lines that are not relevant for coverage."""
        return self._lines_with_status(LineStatus.NEVER)

    @property
    def skipped_lines(self) -> List[Line]:
        """All lines inside of exclusion regions."""
        return self._lines_with_status(LineStatus.SKIPPED)

    @property
    def stats(self) -> LineCoverageStat:
        """The line coverage statistic of this file."""
        return LineCoverageStat(
            covered=len(self.covered_lines),
            missed=len(self.missed_lines),
            never=len(self.never_lines),
            skipped=len(self.skipped_lines),
        )

    @property
    def covered_percent(self) -> float:
        """The coverage in percent, 100.0 if the file has no relevant lines."""
        return self.stats.percent
