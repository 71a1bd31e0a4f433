"""Tests for the customize command group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from warungctl.cli import cli
from warungctl.infrastructure.documents import load_document


@pytest.mark.usefixtures("_isolated_workspace")
class TestCustomizeCommand:
    def test_rename(self, cli_runner: CliRunner, workspace_root: Path) -> None:
        result = cli_runner.invoke(cli, ["customize", "rename", "Warung Bu Sari"])
        assert result.exit_code == 0, result.output
        assert "mutator:  rename" in result.output
        html = (workspace_root / "dist" / "index.html").read_text(encoding="utf-8")
        assert "Warung Bu Sari" in html
        assert load_document(workspace_root / "site.yaml").identity.name == (
            "Warung Makan Sederhana"
        )

    def test_rename_write(self, cli_runner: CliRunner, workspace_root: Path) -> None:
        result = cli_runner.invoke(cli, ["customize", "rename", "Warung Bu Sari", "--write"])
        assert result.exit_code == 0
        assert load_document(workspace_root / "site.yaml").identity.name == "Warung Bu Sari"

    def test_recolor(self, cli_runner: CliRunner, workspace_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["customize", "recolor", "#E74C3C", "#34495E", "#F1C40F", "--write"]
        )
        assert result.exit_code == 0, result.output
        assert "refreshed:  colors" in result.output
        colors = load_document(workspace_root / "site.yaml").branding.colors
        assert colors.primary == "#E74C3C"

    def test_recolor_bad_color(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["customize", "recolor", "red", "#34495E", "#F1C40F"])
        assert result.exit_code == 2
        assert "#RRGGBB" in result.output

    def test_handle(self, cli_runner: CliRunner, workspace_root: Path) -> None:
        result = cli_runner.invoke(cli, ["customize", "handle", "6289999", "--write"])
        assert result.exit_code == 0
        doc = load_document(workspace_root / "site.yaml")
        assert doc.contact.messaging_handle == "6289999"
        html = (workspace_root / "dist" / "index.html").read_text(encoding="utf-8")
        assert "https://wa.me/6289999?text=" in html
