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
Line coverage of single source files.

The raw execution count of each line is combined with the source text,
``#:nocov:`` markers exclude regions of the source from the statistic.
"""

from .exceptions import (
    CoverageDataError,
    LinecovError,
    LineNumberOutOfRangeError,
    LineValidationError,
)
from .exclusions import find_skipped_line_numbers, is_exclusion_marker
from .line import Line, LineStatus
from .source_file import SourceFile
from .stats import LineCoverageStat
from .version import __version__

__all__ = [
    "CoverageDataError",
    "Line",
    "LineCoverageStat",
    "LineNumberOutOfRangeError",
    "LineStatus",
    "LineValidationError",
    "LinecovError",
    "SourceFile",
    "__version__",
    "find_skipped_line_numbers",
    "is_exclusion_marker",
]
