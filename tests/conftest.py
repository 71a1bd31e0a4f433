"""Shared pytest fixtures and test helpers for warungctl tests."""

from __future__ import annotations

import copy
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner
from ruamel.yaml import YAML

from warungctl.config.settings import WarungSettings
from warungctl.domain.document import ConfigurationDocument
from warungctl.infrastructure.workspace import Workspace

BUSINESS_NAME = "Warung Makan Sederhana"
HANDLE = "6281234567890"

SITE_DATA: dict[str, Any] = {
    "identity": {
        "name": BUSINESS_NAME,
        "tagline": "Masakan Rumahan Terlezat",
        "description": "Cita rasa rumahan dengan bumbu pilihan",
        "owner_name": "Bu Sari",
        "owner_title": "Pemilik & Koki Utama",
        "year_established": 2015,
        "story": "Berawal dari dapur kecil di Menteng.",
    },
    "contact": {
        "phone": "0812-3456-7890",
        "messaging_handle": HANDLE,
        "email": "halo@warungsederhana.id",
        "address": {
            "street": "Jl. Merdeka No. 12",
            "area": "Menteng",
            "city": "Jakarta",
            "postal_code": "10310",
        },
        "hours": {
            "open": "08:00",
            "close": "21:00",
            "delivery_start": "10:00",
            "delivery_end": "20:00",
            "days": "Senin - Minggu",
        },
        "social": {"instagram": "warungsederhana"},
    },
    "branding": {
        "colors": {"primary": "#FF6B35", "secondary": "#2C3E50", "accent": "#F39C12"},
        "images": {"logo": "img/logo.png", "hero_background": "img/hero.jpg"},
    },
    "categories": [
        {"id": "makanan", "label": "Makanan", "icon": "🍛"},
        {"id": "minuman", "label": "Minuman", "icon": "🥤"},
    ],
    "ordering": {
        "minimum_order": 25000,
        "delivery_zones": [
            {"distance": "0-3 km", "fee": 0, "description": "GRATIS"},
            {"distance": "3-5 km", "fee": 5000},
        ],
        "delivery_time": {"min": 30, "max": 45},
        "payment_methods": ["Tunai", "Transfer Bank"],
    },
    "website": {
        "title": "Warung Makan Sederhana - Masakan Rumahan",
        "description": "Masakan rumahan khas Jakarta",
        "keywords": "warung, masakan rumahan, jakarta",
        "maps_embed_url": "https://maps.example.com/embed?q=menteng",
    },
    "promotions": [
        {"title": "Gratis Es Teh", "description": "Setiap pembelian paket", "badge": "HOT"},
        {"title": "Promo Lama", "active": False},
    ],
    "highlights": [
        {"icon": "👨‍🍳", "title": "Resep Turun Temurun", "description": "Sejak 2015"},
    ],
}


def site_data(**overrides: dict[str, Any]) -> dict[str, Any]:
    """Deep copy of SITE_DATA with top-level sections merged from *overrides*."""
    data = copy.deepcopy(SITE_DATA)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(data.get(section), dict):
            data[section].update(values)
        else:
            data[section] = values
    return data


def write_site(root: Path, data: dict[str, Any] | None = None) -> Path:
    """Write *data* (default SITE_DATA) as ``site.yaml`` under *root*."""
    path = root / "site.yaml"
    yaml = YAML()
    yaml.allow_unicode = True
    with path.open("w", encoding="utf-8") as fh:
        yaml.dump(data if data is not None else site_data(), fh)
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_doc() -> ConfigurationDocument:
    return ConfigurationDocument.model_validate(site_data())


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary workspace holding a complete ``site.yaml``.

    This is the single source of truth for the workspace layout; the
    settings, workspace and _isolated_workspace fixtures build on it.
    """
    monkeypatch.delenv("WARUNGCTL_CONFIG", raising=False)
    write_site(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workspace_root: Path) -> WarungSettings:
    return WarungSettings.from_cli(workspace_root=workspace_root)


@pytest.fixture
def workspace(settings: WarungSettings) -> Workspace:
    return Workspace(settings)


@pytest.fixture
def _isolated_workspace(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp workspace so the CLI resolves it.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    monkeypatch.chdir(workspace_root)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging and bind the workspace; undo both."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("warungctl")
    app_level = app.level
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
