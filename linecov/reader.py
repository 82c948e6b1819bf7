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
Read the raw execution counts from a JSON file.

Two layouts are understood, a plain mapping of filenames to line lists::

    {"lib/foo.py": [1, null, 0]}

and a result set where each command holds a ``coverage`` mapping,
the line list may be wrapped into an object with a ``lines`` key::

    {"RSpec": {"coverage": {"lib/foo.py": {"lines": [1, null, 0]}}}}
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from .exceptions import CoverageDataError

LOGGER = logging.getLogger("linecov")

RawCoverage = List[Optional[int]]


def read_coverage_file(filename: str) -> Dict[str, RawCoverage]:
    """Read the coverage file and return the raw coverage by filename."""
    LOGGER.debug(f"Reading coverage data from {filename}.")
    try:
        with open(filename, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as err:
        raise CoverageDataError(f"Invalid JSON in {filename}: {err}") from None
    except UnicodeDecodeError as err:
        raise CoverageDataError(f"{filename} is not UTF-8 encoded: {err}") from None

    return parse_coverage_data(data, filename)


def parse_coverage_data(data: Any, filename: str = "<data>") -> Dict[str, RawCoverage]:
    """
    Extract the raw coverage by filename from the decoded JSON data.

    >>> parse_coverage_data({"foo.py": [1, None, 0]})
    {'foo.py': [1, None, 0]}
    >>> parse_coverage_data({"cmd": {"coverage": {"foo.py": {"lines": [2]}}}})
    {'foo.py': [2]}
    >>> parse_coverage_data({"foo.py": [1, -1]})
    Traceback (most recent call last):
    linecov.exceptions.CoverageDataError: <data>: entry 2 of foo.py must be null or a non-negative integer, got -1.
    """
    if not isinstance(data, dict):
        raise CoverageDataError(f"{filename}: expected a JSON object at top level.")

    result: Dict[str, RawCoverage] = {}
    for key, value in data.items():
        if isinstance(value, dict) and "coverage" in value:
            coverage = value["coverage"]
            if not isinstance(coverage, dict):
                raise CoverageDataError(
                    f"{filename}: 'coverage' of {key} must be a JSON object."
                )
            for source_name, lines in coverage.items():
                result[source_name] = _parse_lines(source_name, lines, filename)
        else:
            result[key] = _parse_lines(key, value, filename)

    return result


def _parse_lines(source_name: str, value: Any, filename: str) -> RawCoverage:
    if isinstance(value, dict):
        if "lines" not in value:
            raise CoverageDataError(
                f"{filename}: coverage of {source_name} has no 'lines' entry."
            )
        value = value["lines"]

    if not isinstance(value, list):
        raise CoverageDataError(
            f"{filename}: coverage of {source_name} must be a list."
        )

    for index, count in enumerate(value, 1):
        if count is None:
            continue
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise CoverageDataError(
                f"{filename}: entry {index} of {source_name} must be null "
                f"or a non-negative integer, got {count!r}."
            )

    return value


def find_coverage(
    coverage_by_file: Dict[str, RawCoverage], source_name: str
) -> Optional[RawCoverage]:
    """
    Look up the raw coverage of a source file.

    The name is matched as given first, then by absolute path.

    >>> find_coverage({"foo.py": [1]}, "foo.py")
    [1]
    >>> find_coverage({"foo.py": [1]}, "bar.py") is None
    True
    """
    if source_name in coverage_by_file:
        return coverage_by_file[source_name]

    abs_name = os.path.abspath(source_name)
    for key, value in coverage_by_file.items():
        if os.path.abspath(key) == abs_name:
            return value

    return None
