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

from contextlib import contextmanager
import os
import sys
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .line import Line, LineStatus
from .options import Options
from .source_file import SourceFile
from .stats import LineCoverageStat

# Widths of the various columns
COL_FILE_WIDTH = 40
COL_TOTAL_COUNT_WIDTH = 8
COL_COVERED_COUNT_WIDTH = 8
COL_PERCENTAGE_WIDTH = 7  # including "%" percentage sign
UN_COVERED_SEPARATOR = "   "
LINE_WIDTH = 78

COL_COUNT_WIDTH = 7
STATUS_MARKERS = {
    LineStatus.COVERED: " ",
    LineStatus.MISSED: "!",
    LineStatus.NEVER: " ",
    LineStatus.SKIPPED: "-",
}


@contextmanager
def open_text_for_writing(filename: Optional[str], **kwargs: Any) -> Iterator[Any]:
    """Context manager to open and close a file for text writing.

    Stdout is used if `filename` is None or '-'.
    """
    if filename is not None and filename != "-":
        with open(filename, "w", **kwargs) as fh_out:  # pylint: disable=unspecified-encoding
            yield fh_out
    else:
        yield sys.stdout


def write_report(
    source_files: List[SourceFile], output_file: Optional[str], options: Options
) -> LineCoverageStat:
    """Produce the text report and return the accumulated statistic."""

    total_stat = LineCoverageStat.new_empty()
    with open_text_for_writing(output_file, encoding="utf-8") as fh:
        # Header
        fh.write("-" * LINE_WIDTH + "\n")
        fh.write("Line Coverage Report".center(LINE_WIDTH).rstrip() + "\n")
        fh.write("-" * LINE_WIDTH + "\n")
        title_un_covered = "Covered" if options.get("txt_report_covered") else "Missing"
        fh.write(
            "File".ljust(COL_FILE_WIDTH)
            + "Lines".rjust(COL_TOTAL_COUNT_WIDTH)
            + "Exec".rjust(COL_COVERED_COUNT_WIDTH)
            + "Cover".rjust(COL_PERCENTAGE_WIDTH)
            + UN_COVERED_SEPARATOR
            + title_un_covered
            + "\n"
        )
        fh.write("-" * LINE_WIDTH + "\n")

        # Data
        for source_file in source_files:
            stat = source_file.stats
            total_stat += stat
            if options.get("txt_report_covered"):
                ranges = _lines_str(source_file.covered_lines)
            else:
                ranges = _lines_str(source_file.missed_lines)
            fh.write(_format_line(_presentable_filename(source_file.filename), stat, ranges) + "\n")

        # Footer & summary
        fh.write("-" * LINE_WIDTH + "\n")
        fh.write(_format_line("TOTAL", total_stat, "") + "\n")
        fh.write("-" * LINE_WIDTH + "\n")

        if options.get("show_lines"):
            for source_file in source_files:
                fh.write("\n")
                _write_annotated_source(fh, source_file)

    return total_stat


def _write_annotated_source(fh: Any, source_file: SourceFile) -> None:
    fh.write(f"{_presentable_filename(source_file.filename)}:\n")
    for line in source_file.lines:
        fh.write(format_annotated_line(line) + "\n")


def format_annotated_line(line: Line) -> str:
    r"""
    Format a single line with its count and status marker.

    >>> format_annotated_line(Line("x = 1\n", 3, 5))
    '      5      3 | x = 1'
    >>> format_annotated_line(Line("y = 2\n", 4, 0))
    '!     0      4 | y = 2'
    >>> format_annotated_line(Line("# hello\n", 5, None))
    '      -      5 | # hello'
    """
    status = line.status
    if status is LineStatus.SKIPPED:
        count = "skip"
    elif status is LineStatus.NEVER:
        count = "-"
    else:
        count = str(line.coverage)

    return (
        STATUS_MARKERS[status]
        + count.rjust(COL_COUNT_WIDTH - 1)
        + str(line.line_number).rjust(COL_COUNT_WIDTH)
        + " | "
        + line.src.rstrip("\r\n")
    )


def _presentable_filename(filename: str) -> str:
    """Make the filename relative to the current directory if it is inside of it."""
    relative = os.path.relpath(os.path.abspath(filename), os.getcwd())
    if relative.startswith(os.pardir):
        relative = filename
    return relative.replace("\\", "/")


def _format_line(name: str, stat: LineCoverageStat, uncovered_lines: str) -> str:
    percent = str(int(stat.percent))

    name = name.ljust(COL_FILE_WIDTH)
    if len(name) > COL_FILE_WIDTH:
        name = name + "\n" + " " * COL_FILE_WIDTH

    line = (
        name
        + str(stat.relevant).rjust(COL_TOTAL_COUNT_WIDTH)
        + str(stat.covered).rjust(COL_COVERED_COUNT_WIDTH)
        + percent.rjust(COL_PERCENTAGE_WIDTH - 1)
        + "%"
    )

    if uncovered_lines:
        line += UN_COVERED_SEPARATOR + uncovered_lines

    return line


def _lines_str(lines: Iterable[Line]) -> str:
    """
    Walk through the lines and return a string with the consecutive ranges.

    >>> _lines_str([Line("", n, 0) for n in (1, 2, 3, 5, 8, 9)])
    '1-3,5,8-9'
    """
    return ",".join(
        _format_range(first, last)
        for first, last in _find_consecutive_ranges(
            sorted(line.line_number for line in lines)
        )
    )


def _find_consecutive_ranges(items: Iterable[int]) -> Iterable[Tuple[int, int]]:
    first = last = None
    for item in items:
        if last is None:
            first = last = item
            continue

        if item == (last + 1):
            last = item
            continue

        if first is None:  # pragma: no cover
            raise AssertionError("First must not be 'None'")
        yield first, last
        first = last = item

    if last is not None:
        if first is None:  # pragma: no cover
            raise AssertionError("First must not be 'None'")
        yield first, last


def _format_range(first: int, last: int) -> str:
    if first == last:
        return str(first)
    return f"{first}-{last}"
