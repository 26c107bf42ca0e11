# SPDX-License-Identifier: MIT
"""Tests for the rpm-version command line."""

from __future__ import annotations

import json

from click.testing import CliRunner

from rpm_version.cli import cli


class TestParseCommand:
    """Tests for rpm-version parse."""

    def test_parse_prints_fields(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1:2.0-3.el7"])

        assert result.exit_code == 0
        assert "Epoch: 1" in result.output
        assert "Upstream version: 2.0" in result.output
        assert "Revision: 3.el7" in result.output

    def test_parse_without_revision(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2.0"])

        assert result.exit_code == 0
        assert "Revision: (none)" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "2.0", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "epoch": 0,
            "upstream_version": "2.0",
            "revision": None,
        }

    def test_parse_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.0 beta"])

        assert result.exit_code == 1
        assert "Unable to parse '1.0 beta'" in result.output


class TestCompareCommand:
    """Tests for rpm-version compare."""

    def test_compare_segments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0~rc1", "1.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_compare_equal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "010", "10"])

        assert result.output.strip() == "0"

    def test_compare_evr_partial(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--evr", "1.0", "1.0-5.el7"])

        assert result.exit_code == 0
        assert result.output.strip() == "0"

    def test_compare_evr_epoch(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "--evr", "1:1.0-1", "2.0-1"])

        assert result.output.strip() == "1"


class TestSortCommand:
    """Tests for rpm-version sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.10-1", "1.0~rc1-1", "1.9-1"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0~rc1-1", "1.9-1", "1.10-1"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-r", "1.0-1", "2.0-1"])

        assert result.output.splitlines() == ["2.0-1", "1.0-1"]

    def test_sort_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0", "bad version"])

        assert result.exit_code == 1
        assert "Unable to parse 'bad version'" in result.output

    def test_sort_requires_versions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort"])

        assert result.exit_code != 0


def test_version_option(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
