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
Handle explicit exclusion markers in source code, e.g. ``#:nocov:``.

A marker line toggles the exclusion state. Everything between two markers
is skipped, a region which is never closed extends up to the end of the file.
"""

import enum
import functools
import logging
import re
from typing import Iterable, Optional, Set

LOGGER = logging.getLogger("linecov")

DEFAULT_EXCLUDE_MARKER_TAG = "nocov"


class _ScanState(enum.Enum):
    SCANNING = enum.auto()
    EXCLUDING = enum.auto()


@functools.lru_cache(maxsize=None)
def _marker_pattern(tag: str) -> "re.Pattern[str]":
    return re.compile(rf"^\s*#\s*:{re.escape(tag)}:\s*$")


def is_exclusion_marker(code: str, tag: str = DEFAULT_EXCLUDE_MARKER_TAG) -> bool:
    """
    Check if the line consists of nothing but the exclusion marker.

    >>> is_exclusion_marker("  #:nocov:\\n")
    True
    >>> is_exclusion_marker("# :nocov:")
    True
    >>> is_exclusion_marker("x = 1  # :nocov:")
    False
    >>> is_exclusion_marker("# nocov")
    False
    >>> is_exclusion_marker("# :skip:", tag="skip")
    True
    """
    return _marker_pattern(tag).match(code) is not None


def find_skipped_line_numbers(
    lines: Iterable[str],
    *,
    tag: str = DEFAULT_EXCLUDE_MARKER_TAG,
    filename: Optional[str] = None,
) -> Set[int]:
    """
    Scan through all lines to find the line numbers inside exclusion regions.

    The marker lines themselves are not excluded:
    >>> source = ["a", "#:nocov:", "b", "c", "#:nocov:", "d"]
    >>> sorted(find_skipped_line_numbers(source))
    [3, 4]

    A region which is not closed runs until the end of the file:
    >>> sorted(find_skipped_line_numbers(["a", "#:nocov:", "b", "c"]))
    [3, 4]

    There is no nesting, each marker toggles the state:
    >>> sorted(find_skipped_line_numbers(["#:nocov:", "a", "#:nocov:", "#:nocov:", "b"]))
    [2, 5]
    """

    skipped_line_numbers: Set[int] = set()
    state = _ScanState.SCANNING
    region_start: Optional[int] = None

    for lineno, code in enumerate(lines, 1):
        if is_exclusion_marker(code, tag):
            if state is _ScanState.SCANNING:
                state = _ScanState.EXCLUDING
                region_start = lineno
            else:
                state = _ScanState.SCANNING
                region_start = None
        elif state is _ScanState.EXCLUDING:
            skipped_line_numbers.add(lineno)

    if state is _ScanState.EXCLUDING:
        LOGGER.debug(
            f"Exclusion region started on line {region_start} is open up to the end"
            f" of file {filename or '<unknown>'}."
        )

    LOGGER.debug(
        f"Excluded {len(skipped_line_numbers)} line(s) by :{tag}: markers"
        f" in file {filename or '<unknown>'}."
    )

    return skipped_line_numbers
