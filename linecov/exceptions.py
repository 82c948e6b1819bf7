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

"""Exceptions used in linecov."""


class LinecovError(Exception):
    """Base class for all errors raised by linecov."""


class LineValidationError(LinecovError, ValueError):
    """Raised when a Line is constructed from invalid values."""


class LineNumberOutOfRangeError(LinecovError, IndexError):
    """Raised when a line is looked up by a number outside of the file."""

    def __init__(self, filename: str, number: int, length: int) -> None:
        super().__init__(
            f"Line {number} is out of range [1, {length}] in file {filename}."
        )
        self.filename = filename
        self.number = number
        self.length = length


class CoverageDataError(LinecovError):
    """Raised when the coverage data file can't be interpreted."""
