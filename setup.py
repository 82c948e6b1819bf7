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
Script to generate the installer for linecov.
"""

import os

from runpy import run_path
from setuptools import setup, find_packages


version = run_path("./linecov/version.py")["__version__"]
# read the contents of your README file
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, "README.rst"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="linecov",
    version=version,
    description="Classify source lines by their execution counts and summarize line coverage.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    platforms=["any"],
    python_requires=">=3.9",
    packages=find_packages(include=["linecov*"]),
    install_requires=[
        "colorlog>=6",
        "tomli >= 1.1.0 ; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "linecov=linecov.__main__:main",
        ],
    },
)
