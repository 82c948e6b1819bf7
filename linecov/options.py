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

"""Value checkers shared by the command line and the TOML configuration."""

from __future__ import annotations
from argparse import ArgumentTypeError
import codecs
import os
from typing import Any, Optional


def check_percentage(value: str) -> float:
    r"""
    Convert a threshold like ``80`` or ``80%`` into a float.

    >>> check_percentage("80%")
    80.0
    >>> check_percentage("101")
    Traceback (most recent call last):
    argparse.ArgumentTypeError: 101 not in range [0.0, 100.0]
    """
    number = value[:-1] if value.endswith("%") else value
    try:
        percent = float(number)
    except ValueError:
        percent = -1.0
    if not 0.0 <= percent <= 100.0:
        raise ArgumentTypeError(f"{number} not in range [0.0, 100.0]")
    return percent


def check_input_file(value: str, basedir: Optional[str] = None) -> str:
    r"""
    Resolve an existing file, relative paths start at ``basedir`` or the working directory.
    """
    path = os.path.normpath(os.path.join(basedir or os.getcwd(), value))
    if not os.path.isfile(path):
        raise ArgumentTypeError(f"Should be a file that already exists: {path!r}")
    return os.path.abspath(path)


def check_marker_tag(value: str) -> str:
    r"""
    Check that the exclusion marker tag is a single word.

    >>> check_marker_tag("nocov")
    'nocov'
    >>> check_marker_tag("no cov")
    Traceback (most recent call last):
    argparse.ArgumentTypeError: marker tag must be a non-empty word without ':' or spaces, got 'no cov'
    """
    if not value or ":" in value or any(c.isspace() for c in value):
        raise ArgumentTypeError(
            f"marker tag must be a non-empty word without ':' or spaces, got {value!r}"
        )
    return value


def check_encoding(value: str) -> str:
    r"""
    Check that Python knows the source encoding.

    >>> check_encoding("latin-1")
    'latin-1'
    >>> check_encoding("no-such-codec")
    Traceback (most recent call last):
    argparse.ArgumentTypeError: unknown encoding: 'no-such-codec'
    """
    try:
        codecs.lookup(value)
    except LookupError:
        raise ArgumentTypeError(f"unknown encoding: {value!r}") from None
    return value


class Options:
    """The merged options of command line and configuration file."""

    def __init__(self, **kwargs: Any) -> None:
        self.__dict__.update(kwargs)

    def get(self, name: str) -> Any:
        """Function to get an option by name."""
        return self.__dict__.get(name)
