"""Tests for the root CLI group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from warungctl import __version__
from warungctl.cli import cli


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "order" in result.output

    def test_help_lists_workspace_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "--workspace" in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["publish"]).exit_code == 2


class TestWorkspaceSelection:
    def test_explicit_workspace(
        self,
        cli_runner: CliRunner,
        workspace_root: Path,
        tmp_path_factory: pytest.TempPathFactory,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        result = cli_runner.invoke(cli, ["--workspace", str(workspace_root), "render"])
        assert result.exit_code == 0, result.output
        assert (workspace_root / "dist" / "index.html").is_file()

    def test_run_from_subdirectory(
        self, cli_runner: CliRunner, workspace_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = workspace_root / "dist"
        nested.mkdir()
        monkeypatch.chdir(nested)
        result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 0, result.output
        assert (nested / "index.html").is_file()
        assert not (nested / "dist").exists()

    def test_missing_workspace_rejected_by_click(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["--workspace", str(tmp_path / "nope"), "render"])
        assert result.exit_code == 2
