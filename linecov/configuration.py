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
Command line options and the TOML configuration.

Settings are read from ``--config FILE``, ``linecov.toml`` or the
``[tool.linecov]`` table of ``pyproject.toml``. Keys are the long option
names without the leading dashes, command line values win.
"""

# cspell:ignore getpreferredencoding

from __future__ import annotations
from argparse import SUPPRESS, ArgumentParser, ArgumentTypeError, Namespace
from locale import getpreferredencoding
import logging
import os
import sys
from typing import Any, Callable, Dict, Optional

from .exclusions import DEFAULT_EXCLUDE_MARKER_TAG
from .options import (
    Options,
    check_encoding,
    check_input_file,
    check_marker_tag,
    check_percentage,
)

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

LOGGER = logging.getLogger("linecov")

DEFAULTS: Dict[str, Any] = {
    "verbose": False,
    "no_color": False,
    "force_color": False,
    "config": None,
    "source_files": [],
    "coverage_file": None,
    "source_encoding": getpreferredencoding(),
    "exclude_marker_tag": DEFAULT_EXCLUDE_MARKER_TAG,
    "fail_under_line": 0.0,
    "output": None,
    "txt_report_covered": False,
    "show_lines": False,
}

SWITCHES = {"verbose", "no_color", "force_color", "txt_report_covered", "show_lines"}

CHECKERS: Dict[str, Callable[[str], Any]] = {
    "source_encoding": check_encoding,
    "exclude_marker_tag": check_marker_tag,
    "fail_under_line": check_percentage,
}

CONFIG_KEYS = {
    "verbose": "verbose",
    "no-color": "no_color",
    "force-color": "force_color",
    "source-files": "source_files",
    "coverage": "coverage_file",
    "source-encoding": "source_encoding",
    "exclude-marker-tag": "exclude_marker_tag",
    "fail-under-line": "fail_under_line",
    "output": "output",
    "txt-report-covered": "txt_report_covered",
    "show-lines": "show_lines",
}


def add_arguments(parser: ArgumentParser) -> None:
    """Add the linecov options, unset options stay absent from the namespace."""
    parser.add_argument(
        "source_files",
        nargs="*",
        default=SUPPRESS,
        help="The source files to report on.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=SUPPRESS,
        help="Print progress messages. Please include this output in bug reports.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=SUPPRESS,
        help="Turn off colored logging. Ignored if --force-color is used.",
    )
    parser.add_argument(
        "--force-color",
        action="store_true",
        default=SUPPRESS,
        help="Force colored logging, this is the default for a terminal.",
    )
    parser.add_argument(
        "--config",
        metavar="CONFIG",
        type=check_input_file,
        default=SUPPRESS,
        help=(
            "Load that TOML configuration file. Defaults to linecov.toml "
            "or the [tool.linecov] table of pyproject.toml."
        ),
    )

    coverage_group = parser.add_argument_group(
        "Coverage Options",
        description=(
            "The execution counts are read from a JSON file which maps "
            "each source file to a list with one entry per line. "
            "An entry is null for lines which are not relevant for coverage."
        ),
    )
    coverage_group.add_argument(
        "--coverage",
        dest="coverage_file",
        metavar="FILE",
        type=check_input_file,
        default=SUPPRESS,
        help="Read the execution counts from this JSON file.",
    )
    coverage_group.add_argument(
        "--source-encoding",
        metavar="CODEC",
        type=check_encoding,
        default=SUPPRESS,
        help=(
            "Select the source file encoding. Defaults to the system "
            f"default encoding ({DEFAULTS['source_encoding']})."
        ),
    )
    coverage_group.add_argument(
        "--exclude-marker-tag",
        metavar="TAG",
        type=check_marker_tag,
        default=SUPPRESS,
        help=(
            "Use this tag for the exclusion markers, a line '#:TAG:' toggles "
            f"an excluded region. Default: {DEFAULT_EXCLUDE_MARKER_TAG}."
        ),
    )
    coverage_group.add_argument(
        "--fail-under-line",
        metavar="MIN",
        type=check_percentage,
        default=SUPPRESS,
        help="Exit with a status of 2 if the total line coverage is less than MIN.",
    )

    output_group = parser.add_argument_group(
        "Output Options",
        description="Linecov prints a text report to the standard output by default.",
    )
    output_group.add_argument(
        "-o",
        "--output",
        metavar="OUTPUT",
        default=SUPPRESS,
        help="Print output to this filename. Defaults to stdout.",
    )
    output_group.add_argument(
        "--txt-report-covered",
        action="store_true",
        default=SUPPRESS,
        help="Report the covered lines instead of the missed lines.",
    )
    output_group.add_argument(
        "--show-lines",
        action="store_true",
        default=SUPPRESS,
        help="Print the annotated source of each file after the summary table.",
    )


def options_from_table(table: Dict[str, Any], filename: str) -> Dict[str, Any]:
    """
    Check the values of a TOML table and map them to option names.

    >>> options_from_table({"fail-under-line": 75, "show-lines": True}, "linecov.toml")
    {'fail_under_line': 75.0, 'show_lines': True}
    >>> options_from_table({"color": "yes"}, "linecov.toml")
    Traceback (most recent call last):
    ValueError: linecov.toml: color: unknown config option
    """
    basedir = os.path.dirname(filename)
    result: Dict[str, Any] = {}
    for key, value in table.items():
        if key not in CONFIG_KEYS:
            raise ValueError(f"{filename}: {key}: unknown config option")
        name = CONFIG_KEYS[key]

        if name in SWITCHES:
            if not isinstance(value, bool):
                raise ValueError(f"{filename}: {key}: must be true or false")
            result[name] = value
        elif name == "source_files":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{filename}: {key}: must be a list of paths")
            result[name] = value
        else:
            try:
                if name == "coverage_file":
                    result[name] = check_input_file(str(value), basedir)
                else:
                    result[name] = CHECKERS.get(name, str)(str(value))
            except ArgumentTypeError as err:
                raise ValueError(f"{filename}: {key}: {err}") from None

    return result


def load_config(filename: Optional[str] = None) -> Dict[str, Any]:
    """Load the given configuration file or the first default one found."""
    if filename is None:
        if os.path.isfile("linecov.toml"):
            filename = "linecov.toml"
        elif os.path.isfile("pyproject.toml"):
            with open("pyproject.toml", "rb") as buf:
                table = tomllib.load(buf).get("tool", {}).get("linecov")
            if table is None:
                return {}
            LOGGER.debug("Using the [tool.linecov] table of pyproject.toml.")
            return options_from_table(table, "pyproject.toml")
        else:
            return {}

    LOGGER.debug(f"Using configuration file {filename}.")
    with open(filename, "rb") as buf:
        return options_from_table(tomllib.load(buf), filename)


def merge_options(config: Dict[str, Any], cli_options: Namespace) -> Options:
    """
    Combine defaults, config file and command line, later ones win.

    >>> options = merge_options({"fail_under_line": 50.0, "show_lines": True},
    ...                         Namespace(fail_under_line=75.0, version=False))
    >>> options.fail_under_line, options.show_lines, options.exclude_marker_tag
    (75.0, True, 'nocov')
    """
    merged = dict(DEFAULTS)
    merged.update(config)
    merged.update(
        (name, value) for name, value in vars(cli_options).items() if name in DEFAULTS
    )
    return Options(**merged)
