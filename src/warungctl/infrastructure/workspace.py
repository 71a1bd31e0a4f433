"""Workspace — the directory a site is built from.

Owns the settings, the lazily loaded site document, and the template
environments.  Services receive a Workspace and never resolve paths on
their own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from warungctl.infrastructure.documents import load_document
from warungctl.infrastructure.skins import Skin, get_skin
from warungctl.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from warungctl.config.settings import WarungSettings
    from warungctl.domain.document import ConfigurationDocument

logger = logging.getLogger(__name__)

PAGE_FILENAME = "index.html"


class Workspace:
    """Site document, settings and templates for one workspace root."""

    def __init__(self, settings: WarungSettings) -> None:
        self.settings = settings
        self._document: ConfigurationDocument | None = None
        self._environments: dict[str, Environment] = {}

    @property
    def root(self) -> Path:
        return self.settings.workspace_root

    @property
    def document_path(self) -> Path:
        return self.settings.document_path

    @property
    def document(self) -> ConfigurationDocument:
        """The site document, loaded on first access.

        Raises:
            DocumentError: the file is missing or structurally invalid.
        """
        if self._document is None:
            logger.debug("Loading site document %s", self.document_path)
            self._document = load_document(self.document_path)
        return self._document

    def environment(self, group: str) -> Environment:
        env = self._environments.get(group)
        if env is None:
            env = build_template_environment(group, workspace_root=self.root)
            self._environments[group] = env
        return env

    def skin(self, name: str | None = None) -> Skin:
        return get_skin(name or self.settings.site.skin)

    def write_page(self, html: str, output_dir: Path | None = None) -> Path:
        """Write the rendered page and return its path."""
        target_dir = output_dir or self.settings.output_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / PAGE_FILENAME
        target.write_text(html, encoding="utf-8")
        return target
