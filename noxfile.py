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

import os

import nox

DEFAULT_TEST_DIRECTORIES = ["linecov"]
DEFAULT_LINT_ARGUMENTS = ["noxfile.py", "setup.py"] + DEFAULT_TEST_DIRECTORIES


@nox.session(python=False)
def qa(session: nox.Session) -> None:
    """Run the quality tests."""
    session.notify("lint")
    session.notify("tests")


@nox.session(python=False)
def lint(session: nox.Session) -> None:
    """Run the linters."""
    session.notify("ruff_check")
    session.notify("ruff_format")
    session.notify("mypy")


@nox.session
def ruff_check(session: nox.Session) -> None:
    """Run ruff check command."""
    session.install("ruff")
    if session.posargs:
        args = session.posargs
    else:
        args = DEFAULT_LINT_ARGUMENTS
    session.run("ruff", "check", *args)


@nox.session
def ruff_format(session: nox.Session) -> None:
    """Run ruff format command."""
    session.install("ruff")
    if session.posargs:
        args = session.posargs
    else:
        args = ["--diff", *DEFAULT_LINT_ARGUMENTS]
    session.run("ruff", "format", *args)


@nox.session
def mypy(session: nox.Session) -> None:
    """Run mypy command."""
    session.install("mypy", "pytest")
    session.install("-e", ".")
    if session.posargs:
        args = session.posargs
    else:
        args = DEFAULT_TEST_DIRECTORIES
    session.run("mypy", *args)


@nox.session
def tests(session: nox.Session) -> None:
    """Run the unit tests and the doctests."""
    use_coverage = os.environ.get("USE_COVERAGE") == "true"
    requirements = ["pytest"]
    if use_coverage:
        requirements += ["coverage", "pytest-cov"]
    session.install(*requirements)
    session.install("-e", ".")

    args = ["-m", "pytest", "--doctest-modules"]
    if use_coverage:
        args += ["--cov=linecov", "--cov-branch"]
    args += session.posargs
    if "--" not in args:
        args += ["--"] + DEFAULT_TEST_DIRECTORIES

    session.run("python", *args)
