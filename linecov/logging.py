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

"""Colored log output on stderr for the command line tool."""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

from .options import Options

LOGGER = logging.getLogger("linecov")
HANDLER = logging.StreamHandler(sys.stderr)
ANNOTATION_HANDLER = logging.StreamHandler(sys.stderr)

LOG_FORMAT = "(%(levelname)s) %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# GitHub Actions turns these prefixes into annotations
GITHUB_PREFIXES = {logging.WARNING: "::warning::", logging.ERROR: "::error::"}


class GithubFormatter(logging.Formatter):
    """Prefix warnings and errors so that they show up as annotations."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = GITHUB_PREFIXES.get(record.levelno)
        return "" if prefix is None else prefix + super().format(record)


def make_formatter(options: Optional[Options] = None) -> ColoredFormatter:
    """Create the formatter, color follows the terminal unless forced either way."""
    force_color = bool(options and options.get("force_color"))
    no_color = bool(options and options.get("no_color")) and not force_color
    return ColoredFormatter(
        f"%(log_color)s{LOG_FORMAT}",
        log_colors=LOG_COLORS,
        force_color=force_color,
        no_color=no_color,
        stream=sys.stderr,
    )


def configure_logging() -> None:
    """Send the log records of linecov to stderr."""
    HANDLER.setFormatter(make_formatter())
    logging.basicConfig(level=logging.INFO, handlers=[HANDLER])

    root = logging.getLogger()
    if "GITHUB_ACTIONS" in os.environ and ANNOTATION_HANDLER not in root.handlers:
        ANNOTATION_HANDLER.setFormatter(GithubFormatter(LOG_FORMAT))
        ANNOTATION_HANDLER.setLevel(logging.WARNING)
        root.addHandler(ANNOTATION_HANDLER)


def update_logging(options: Options) -> None:
    """Apply the verbosity and color options once they are known."""
    if options.get("verbose"):
        LOGGER.setLevel(logging.DEBUG)
    HANDLER.setFormatter(make_formatter(options))
