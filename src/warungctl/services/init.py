"""InitService — scaffold a new workspace from the packaged starters."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from warungctl.config.discovery import CONFIG_FILENAME
from warungctl.config.models import SiteConfig
from warungctl.infrastructure.skins import UnknownSkinError, get_skin
from warungctl.infrastructure.templates import build_template_environment
from warungctl.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

# Skins whose page has no cart section get a starter with the cart disabled.
_CARTLESS_SKINS = frozenset({"modern"})


class InitService:
    """Workspace scaffolding.  Static: there is no workspace to bind to yet."""

    @staticmethod
    def init_workspace(
        path: Path,
        *,
        name: str,
        skin: str = "warung",
        force: bool = False,
    ) -> ServiceResult:
        op = "init"
        try:
            get_skin(skin)
        except UnknownSkinError as exc:
            return failure(op, "UNKNOWN_SKIN", str(exc), skin=skin)

        document = SiteConfig().document
        targets = {
            "site.yaml.j2": path / document,
            "warungctl.toml.j2": path / CONFIG_FILENAME,
        }
        existing = [str(p) for p in targets.values() if p.exists()]
        if existing and not force:
            return failure(
                op,
                "WORKSPACE_EXISTS",
                "Workspace files already exist (use --force to overwrite)",
                files=existing,
            )

        env = build_template_environment("init")
        context = {
            "name": name,
            "skin": skin,
            "document": document,
            "year": datetime.now().year,
            "enable_cart": skin not in _CARTLESS_SKINS,
        }
        path.mkdir(parents=True, exist_ok=True)
        written: list[str] = []
        for template_name, target in targets.items():
            target.write_text(env.get_template(template_name).render(**context), encoding="utf-8")
            written.append(str(target))
            logger.debug("Wrote %s", target)

        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "name": name, "skin": skin, "files": written},
            warnings=[f"Overwrote {p}" for p in existing],
        )
