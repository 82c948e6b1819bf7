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

import json

from ..__main__ import (
    EXIT_CMDLINE_ERROR,
    EXIT_LINE_NOK,
    EXIT_READ_ERROR,
    EXIT_SUCCESS,
    main,
)
from ..version import __version__

import pytest


SOURCE = (
    "import os\n"
    "\n"
    "def used():\n"
    "    return os.getcwd()\n"
    "\n"
    "def unused():\n"
    "    return 42\n"
    "\n"
    "# :nocov:\n"
    "def debug():\n"
    "    print('debug')\n"
    "# :nocov:\n"
)
COVERAGE = [1, None, 1, 3, None, 1, 0, None, None, 0, 0, None]


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "module.py").write_text(SOURCE, encoding="utf-8")
    (tmp_path / "coverage.json").write_text(
        json.dumps({"module.py": COVERAGE}), encoding="utf-8"
    )
    return tmp_path


def test_version(capsys) -> None:
    assert main(["--version"]) == EXIT_SUCCESS
    out, _ = capsys.readouterr()
    assert out.startswith(f"linecov {__version__}\n")


def test_help(capsys) -> None:
    assert main(["--help"]) == EXIT_SUCCESS
    out, _ = capsys.readouterr()
    assert "--exclude-marker-tag" in out
    assert "--fail-under-line" in out


def test_text_report(project, capsys) -> None:
    assert main(["--coverage", "coverage.json", "module.py"]) == EXIT_SUCCESS
    out, _ = capsys.readouterr()

    lines = out.splitlines()
    assert "Line Coverage Report" in lines[1]
    assert lines[3].split() == ["File", "Lines", "Exec", "Cover", "Missing"]
    assert lines[5].split() == ["module.py", "5", "4", "80%", "7"]
    assert lines[7].split() == ["TOTAL", "5", "4", "80%"]


def test_text_report_covered(project, capsys) -> None:
    assert (
        main(["--coverage", "coverage.json", "--txt-report-covered", "module.py"])
        == EXIT_SUCCESS
    )
    out, _ = capsys.readouterr()
    assert out.splitlines()[5].split() == ["module.py", "5", "4", "80%", "1,3-4,6"]


def test_show_lines(project, capsys) -> None:
    assert (
        main(["--coverage", "coverage.json", "--show-lines", "module.py"])
        == EXIT_SUCCESS
    )
    out, _ = capsys.readouterr()

    assert "module.py:\n" in out
    assert "      3      4 |     return os.getcwd()\n" in out
    assert "!     0      7 |     return 42\n" in out
    assert "-  skip     10 | def debug():\n" in out
    assert "      -      9 | # :nocov:\n" in out


def test_output_file(project, capsys) -> None:
    assert (
        main(["--coverage", "coverage.json", "-o", "report.txt", "module.py"])
        == EXIT_SUCCESS
    )
    out, _ = capsys.readouterr()
    assert out == ""
    assert "module.py" in (project / "report.txt").read_text(encoding="utf-8")


def test_fail_under_line(project, caplog) -> None:
    assert (
        main(["--coverage", "coverage.json", "--fail-under-line", "90", "module.py"])
        == EXIT_LINE_NOK
    )
    assert "failed minimum line coverage (got 80.0%, minimum 90.0%)" in caplog.text

    assert (
        main(["--coverage", "coverage.json", "--fail-under-line", "80", "module.py"])
        == EXIT_SUCCESS
    )


def test_config_from_pyproject(project, capsys) -> None:
    (project / "pyproject.toml").write_text(
        "[tool.linecov]\n"
        'source-files = ["module.py"]\n'
        'coverage = "coverage.json"\n'
        'fail-under-line = "95%"\n',
        encoding="utf-8",
    )

    assert main([]) == EXIT_LINE_NOK
    out, _ = capsys.readouterr()
    assert "module.py" in out


def test_config_file_option(project, capsys) -> None:
    (project / "custom.toml").write_text(
        'coverage = "coverage.json"\ntxt-report-covered = true\n', encoding="utf-8"
    )

    assert main(["--config", "custom.toml", "module.py"]) == EXIT_SUCCESS
    out, _ = capsys.readouterr()
    assert "Covered" in out


def test_invalid_config(project, caplog) -> None:
    (project / "linecov.toml").write_text("unknown = 1\n", encoding="utf-8")

    assert main(["module.py"]) == EXIT_CMDLINE_ERROR
    assert "unknown config option" in caplog.text


def test_missing_coverage_entry(project, capsys, caplog) -> None:
    (project / "other.py").write_text("x = 1\n", encoding="utf-8")

    assert main(["--coverage", "coverage.json", "other.py"]) == EXIT_SUCCESS
    assert "No coverage data found for other.py" in caplog.text
    out, _ = capsys.readouterr()
    assert out.splitlines()[5].split() == ["other.py", "0", "0", "100%"]


def test_no_source_files(project, caplog) -> None:
    assert main([]) == EXIT_CMDLINE_ERROR
    assert "no source files given" in caplog.text


def test_missing_coverage_file(project, capsys) -> None:
    assert main(["--coverage", "missing.json", "module.py"]) == EXIT_CMDLINE_ERROR
    _, err = capsys.readouterr()
    assert "Should be a file that already exists" in err


def test_broken_coverage_file(project, caplog) -> None:
    (project / "broken.json").write_text('{"module.py": [1, -2]}', encoding="utf-8")

    assert main(["--coverage", "broken.json", "module.py"]) == EXIT_READ_ERROR
    assert "must be null or a non-negative integer" in caplog.text


def test_missing_source_file(project, caplog) -> None:
    assert main(["--coverage", "coverage.json", "nothing.py"]) == EXIT_READ_ERROR
    assert "Error reading the input" in caplog.text


def test_cli_overrides_config(project, capsys) -> None:
    (project / "linecov.toml").write_text(
        'source-files = ["module.py"]\ncoverage = "coverage.json"\nfail-under-line = 95\n',
        encoding="utf-8",
    )

    assert main(["--fail-under-line", "50"]) == EXIT_SUCCESS
    out, _ = capsys.readouterr()
    assert "module.py" in out


def test_invalid_config_value(project, caplog) -> None:
    (project / "linecov.toml").write_text("show-lines = \"yes\"\n", encoding="utf-8")

    assert main(["module.py"]) == EXIT_CMDLINE_ERROR
    assert "linecov.toml: show-lines: must be true or false" in caplog.text


def test_coverage_file_not_utf8(project, caplog) -> None:
    (project / "latin.json").write_bytes(b'{"module.py": [1]}\xff')

    assert main(["--coverage", "latin.json", "module.py"]) == EXIT_READ_ERROR
    assert "is not UTF-8 encoded" in caplog.text


def test_unknown_source_encoding(project, capsys) -> None:
    assert (
        main(["--coverage", "coverage.json", "--source-encoding", "no-such-codec", "module.py"])
        == EXIT_CMDLINE_ERROR
    )
    _, err = capsys.readouterr()
    assert "unknown encoding: 'no-such-codec'" in err


def test_unknown_source_encoding_in_config(project, caplog) -> None:
    (project / "linecov.toml").write_text(
        'source-encoding = "no-such-codec"\n', encoding="utf-8"
    )

    assert main(["module.py"]) == EXIT_CMDLINE_ERROR
    assert "unknown encoding: 'no-such-codec'" in caplog.text


def test_source_encoding(project, capsys) -> None:
    (project / "latin.py").write_bytes("s = 'café'\n".encode("latin-1"))
    (project / "latin.json").write_text('{"latin.py": [1]}', encoding="utf-8")

    assert (
        main(["--coverage", "latin.json", "--source-encoding", "latin-1", "--show-lines", "latin.py"])
        == EXIT_SUCCESS
    )
    out, _ = capsys.readouterr()
    assert "s = 'café'" in out
