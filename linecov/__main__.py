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

import logging
import sys

from argparse import ArgumentError, ArgumentParser
from typing import List, Optional

from .configuration import add_arguments, load_config, merge_options
from .exceptions import CoverageDataError
from .logging import configure_logging, update_logging
from .options import Options
from .reader import find_coverage, read_coverage_file
from .source_file import SourceFile
from .stats import LineCoverageStat
from .txt import write_report
from .version import __version__

LOGGER = logging.getLogger("linecov")


EXIT_SUCCESS = 0
EXIT_CMDLINE_ERROR = 1
EXIT_LINE_NOK = 2
EXIT_READ_ERROR = 64
EXIT_WRITE_ERROR = 128


def get_exit_code(stat: LineCoverageStat, threshold_line: float) -> int:
    """Fail if the total line coverage is below the threshold."""
    if threshold_line > 0.0 and stat.percent < threshold_line:
        LOGGER.error(
            f"failed minimum line coverage (got {stat.percent:0.1f}%, minimum {threshold_line}%)"
        )
        return EXIT_LINE_NOK
    return EXIT_SUCCESS


def create_argument_parser() -> ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog="linecov",
        usage="linecov [options] [source_files...]",
        description=(
            "Classify the lines of source files by their execution counts "
            "and summarize the line coverage."
        ),
        exit_on_error=False,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        default=False,
        help="Print the version number, then exit.",
    )
    add_arguments(parser)
    return parser


COPYRIGHT = "Copyright (c) 2024-2026 the linecov authors\n"


def collect_source_files(options: Options) -> List[SourceFile]:
    """Create the source file models for all requested files."""
    coverage_by_file = {}
    if options.coverage_file is not None:
        coverage_by_file = read_coverage_file(options.coverage_file)

    source_files = []
    for filename in options.source_files:
        coverage = find_coverage(coverage_by_file, filename)
        if coverage is None:
            LOGGER.warning(
                f"No coverage data found for {filename}, all lines are treated as not relevant."
            )
            coverage = []
        source_files.append(
            SourceFile.from_path(
                filename,
                coverage,
                encoding=options.source_encoding,
                exclude_marker_tag=options.exclude_marker_tag,
            )
        )

    return source_files


def main(args: Optional[List[str]] = None) -> int:  # pylint: disable=too-many-return-statements
    """The main entry point of linecov."""
    configure_logging()
    try:
        cli_options = create_argument_parser().parse_args(args=args)
    except SystemExit as e:
        return EXIT_SUCCESS if e.code == 0 else EXIT_CMDLINE_ERROR
    except ArgumentError as e:
        sys.stderr.write(f"linecov: error: {e}\n")
        return EXIT_CMDLINE_ERROR

    if cli_options.version:
        sys.stdout.write(f"linecov {__version__}\n\n{COPYRIGHT}")
        return EXIT_SUCCESS

    try:
        config = load_config(getattr(cli_options, "config", None))
    except (OSError, ValueError) as e:
        LOGGER.error(f"Error in configuration: {e}")
        return EXIT_CMDLINE_ERROR
    options = merge_options(config, cli_options)

    update_logging(options)

    if not options.source_files:
        LOGGER.error("no source files given.")
        return EXIT_CMDLINE_ERROR

    try:
        source_files = collect_source_files(options)
    except (OSError, CoverageDataError) as e:
        LOGGER.error(f"Error reading the input: {e}")
        return EXIT_READ_ERROR

    try:
        total_stat = write_report(source_files, options.output, options)
    except OSError as e:
        LOGGER.error(f"Error writing the report: {e}")
        return EXIT_WRITE_ERROR

    return get_exit_code(total_stat, options.fail_under_line)


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
