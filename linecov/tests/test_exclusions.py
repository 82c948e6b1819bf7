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

from ..exclusions import find_skipped_line_numbers, is_exclusion_marker

import pytest


@pytest.mark.parametrize(
    "code,expected",
    [
        ("#:nocov:", True),
        ("#:nocov:\n", True),
        ("# :nocov:\n", True),
        ("    #:nocov:  \r\n", True),
        ("\t# :nocov:\n", True),
        ("x = 1  #:nocov:\n", False),
        ("#:nocov: because\n", False),
        ("# nocov\n", False),
        ("#nocov:\n", False),
        ("// :nocov:\n", False),
        ("#:NOCOV:\n", False),
        ("", False),
    ],
)
def test_is_exclusion_marker(code, expected) -> None:
    assert is_exclusion_marker(code) is expected


def test_custom_tag() -> None:
    assert is_exclusion_marker("# :skip-me:\n", tag="skip-me")
    assert not is_exclusion_marker("# :nocov:\n", tag="skip-me")
    assert find_skipped_line_numbers(
        ["a\n", "#:x.y:\n", "b\n", "#:x.y:\n"], tag="x.y"
    ) == {3}


def test_no_markers() -> None:
    assert find_skipped_line_numbers(["a\n", "b\n", "c\n"]) == set()


def test_empty_file() -> None:
    assert find_skipped_line_numbers([]) == set()


def test_closed_region() -> None:
    source = ["a\n", "#:nocov:\n", "b\n", "c\n", "#:nocov:\n", "d\n"]
    assert find_skipped_line_numbers(source) == {3, 4}


def test_region_open_until_end_of_file() -> None:
    source = ["a\n", "# :nocov:\n", "b\n"]
    assert find_skipped_line_numbers(source) == {3}


def test_adjacent_markers_exclude_nothing() -> None:
    source = ["a\n", "#:nocov:\n", "#:nocov:\n", "b\n"]
    assert find_skipped_line_numbers(source) == set()


def test_three_markers_leave_region_open() -> None:
    source = ["#:nocov:\n", "a\n", "#:nocov:\n", "b\n", "#:nocov:\n", "c\n", "d\n"]
    assert find_skipped_line_numbers(source) == {2, 6, 7}


def test_unclosed_region_is_no_warning(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="linecov")
    find_skipped_line_numbers(["#:nocov:\n", "a\n"], filename="foo.py")

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any(
        "started on line 1 is open up to the end of file foo.py" in message
        for message in caplog.messages
    )
