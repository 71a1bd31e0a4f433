"""Tests for SiteService — validate, render and customize."""

from __future__ import annotations

from pathlib import Path

from tests.conftest import site_data, write_site
from warungctl.config.settings import WarungSettings
from warungctl.infrastructure.documents import load_document
from warungctl.infrastructure.workspace import Workspace
from warungctl.services.site import SiteService


def _service(root: Path) -> SiteService:
    return SiteService(Workspace(WarungSettings.from_cli(workspace_root=root)))


class TestValidate:
    def test_clean_document(self, workspace: Workspace) -> None:
        result = SiteService(workspace).validate()
        assert result.ok
        assert result.data["count"] == 0

    def test_findings_are_not_errors(self, tmp_path: Path) -> None:
        write_site(tmp_path, site_data(contact={"messaging_handle": "0812"}))
        result = _service(tmp_path).validate()
        assert result.ok
        assert result.data["findings"][0]["kind"] == "bad_handle_format"

    def test_strict_fails_on_findings(self, tmp_path: Path) -> None:
        write_site(tmp_path, site_data(contact={"messaging_handle": "0812"}))
        result = _service(tmp_path).validate(strict=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"
        assert result.data["count"] == 1

    def test_missing_document(self, tmp_path: Path) -> None:
        result = _service(tmp_path).validate()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOCUMENT_ERROR"


class TestRender:
    def test_writes_page(self, workspace: Workspace, workspace_root: Path) -> None:
        result = SiteService(workspace).render()
        assert result.ok
        page = workspace_root / "dist" / "index.html"
        assert result.data["path"] == str(page)
        assert result.data["skin"] == "warung"
        assert "Warung Makan Sederhana" in page.read_text(encoding="utf-8")

    def test_custom_output_dir_and_skin(self, workspace: Workspace, tmp_path: Path) -> None:
        out = tmp_path / "public"
        result = SiteService(workspace).render(skin="modern", output_dir=out)
        assert result.ok
        html = (out / "index.html").read_text(encoding="utf-8")
        assert "cart-items" not in html

    def test_fail_open_on_findings(self, tmp_path: Path) -> None:
        colors = {"primary": "orange", "secondary": "#2C3E50", "accent": "#F39C12"}
        write_site(tmp_path, site_data(identity={"name": None}, branding={"colors": colors}))
        result = _service(tmp_path).render()
        assert result.ok
        assert any("identity.name" in w for w in result.warnings)
        assert any("branding.colors.primary" in w for w in result.warnings)
        html = (tmp_path / "dist" / "index.html").read_text(encoding="utf-8")
        assert "--primary-color: orange;" in html
        assert "--primary-dark:" not in html
        assert "--secondary-dark: #122436;" in html

    def test_incomplete_entries_are_skipped(self, tmp_path: Path) -> None:
        write_site(
            tmp_path,
            site_data(
                categories=[{"id": "makanan", "label": "Makanan"}, {"id": "minuman"}],
                promotions=[{"description": "Tanpa judul"}],
            ),
        )
        result = _service(tmp_path).render()
        assert result.ok
        assert any("categories.1.label" in w for w in result.warnings)
        html = (tmp_path / "dist" / "index.html").read_text(encoding="utf-8")
        assert 'data-tab="makanan"' in html
        assert 'data-tab="minuman"' not in html
        assert "Promo Spesial" not in html

    def test_unknown_skin(self, workspace: Workspace) -> None:
        result = SiteService(workspace).render(skin="retro")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_SKIN"

    def test_structurally_invalid_document(self, tmp_path: Path) -> None:
        (tmp_path / "site.yaml").write_text("categories: 5\n", encoding="utf-8")
        result = _service(tmp_path).render()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOCUMENT_ERROR"


class TestCustomize:
    def test_rename_without_write(self, workspace: Workspace, workspace_root: Path) -> None:
        result = SiteService(workspace).rename("Warung Bu Sari")
        assert result.ok
        assert result.data["dirty"] == ["cart", "contact", "identity", "meta"]
        assert "header.business-name" in result.data["changed_regions"]
        assert result.data["written"] is False
        page = (workspace_root / "dist" / "index.html").read_text(encoding="utf-8")
        assert "Warung Bu Sari" in page
        on_disk = load_document(workspace_root / "site.yaml")
        assert on_disk.identity.name == "Warung Makan Sederhana"

    def test_rename_with_write(self, workspace: Workspace, workspace_root: Path) -> None:
        assert SiteService(workspace).rename("Warung Bu Sari", write=True).ok
        assert load_document(workspace_root / "site.yaml").identity.name == "Warung Bu Sari"

    def test_recolor_changes_only_root(self, workspace: Workspace) -> None:
        result = SiteService(workspace).recolor("#E74C3C", "#34495E", "#F1C40F")
        assert result.ok
        assert result.data["dirty"] == ["colors"]
        assert result.data["changed_regions"] == [":root"]

    def test_change_handle_with_write(self, workspace: Workspace, workspace_root: Path) -> None:
        result = SiteService(workspace).change_handle("6289999", write=True)
        assert result.ok
        assert result.data["dirty"] == ["contact", "social"]
        doc = load_document(workspace_root / "site.yaml")
        assert doc.contact.messaging_handle == "6289999"
