"""Tests for the template environment and workspace overrides."""

from __future__ import annotations

from pathlib import Path

from warungctl.infrastructure.templates import build_template_environment


class TestTemplateEnvironment:
    def test_packaged_fragment(self) -> None:
        env = build_template_environment("fragments")
        output = env.get_template("menu_tabs.html.j2").render(value=[])
        assert output.strip() == ""

    def test_workspace_override_wins(self, tmp_path: Path) -> None:
        override = tmp_path / ".warungctl" / "templates" / "fragments"
        override.mkdir(parents=True)
        (override / "hero_hours.html.j2").write_text("custom {{ value }}", encoding="utf-8")
        env = build_template_environment("fragments", workspace_root=tmp_path)
        assert env.get_template("hero_hours.html.j2").render(value="x") == "custom x"

    def test_shared_override_root(self, tmp_path: Path) -> None:
        root = tmp_path / ".warungctl" / "templates"
        root.mkdir(parents=True)
        (root / "_head.html.j2").write_text("<title>override</title>", encoding="utf-8")
        env = build_template_environment("skins", workspace_root=tmp_path)
        assert env.get_template("_head.html.j2").render() == "<title>override</title>"

    def test_html_autoescaped_other_verbatim(self) -> None:
        env = build_template_environment("init")
        toml = env.get_template("warungctl.toml.j2").render(
            document="site.yaml", skin="warung"
        )
        assert 'document = "site.yaml"' in toml
        fragments = build_template_environment("fragments")
        html = fragments.get_template("footer_description.html.j2").render(value="<2015>")
        assert "&lt;2015&gt;" in html
