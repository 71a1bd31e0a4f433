"""SiteService — validate the site document and render the static page.

Pipeline for ``render``: LOAD -> VALIDATE (fail-open) -> BIND -> RENDER -> WRITE

The customize operations open a bound Storefront, apply one named
mutator, report which regions changed, re-render the page and optionally
persist the patch to ``site.yaml``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from warungctl.domain.mutators import DirtySet
from warungctl.domain.validation import validate
from warungctl.infrastructure.documents import DocumentError, update_document_file
from warungctl.infrastructure.skins import UnknownSkinError
from warungctl.services.base import BaseService
from warungctl.services.result import ServiceResult, failure
from warungctl.services.storefront import Storefront

if TYPE_CHECKING:
    from warungctl.infrastructure.skins import Skin

logger = logging.getLogger(__name__)


class SiteService(BaseService):
    """Document validation, page rendering and operator patches."""

    def validate(self, *, strict: bool = False) -> ServiceResult:
        """Report validation findings.

        Findings are data, not errors, unless *strict* is set; even then
        nothing else is gated on them.
        """
        op = "validate"
        try:
            doc = self._workspace.document
        except DocumentError as exc:
            return failure(op, "DOCUMENT_ERROR", str(exc))

        findings = validate(doc, handle_prefix=self._workspace.settings.site.handle_prefix)
        data: dict[str, Any] = {
            "document": str(self._workspace.document_path),
            "count": len(findings),
            "findings": [f.model_dump(mode="json") for f in findings],
        }
        if strict and findings:
            result = failure(
                op,
                "VALIDATION_FAILED",
                f"{len(findings)} validation finding(s)",
                count=len(findings),
            )
            return result.model_copy(update={"data": data})
        return ServiceResult(ok=True, op=op, data=data)

    def render(
        self,
        *,
        skin: str | None = None,
        output_dir: Path | None = None,
    ) -> ServiceResult:
        op = "render"
        warnings: list[str] = []
        try:
            page = self._workspace.skin(skin)
            self._check_document(self._workspace.document, warnings)
            storefront = Storefront.open(self._workspace, skin=page.name)
        except UnknownSkinError as exc:
            return failure(op, "UNKNOWN_SKIN", str(exc), skin=skin)
        except DocumentError as exc:
            return failure(op, "DOCUMENT_ERROR", str(exc))

        path = self._write_page(page, storefront, output_dir)
        present = [s for s in storefront.tree.selectors() if storefront.tree.present(s)]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "skin": page.name,
                "regions_bound": len(present),
                "regions_declared": len(storefront.tree.selectors()),
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Customize
    # ------------------------------------------------------------------

    def rename(self, name: str, *, skin: str | None = None, write: bool = False) -> ServiceResult:
        return self._customize(
            "rename",
            lambda sf: sf.rename_business(name),
            {"identity.name": name.strip() or None},
            skin=skin,
            write=write,
        )

    def recolor(
        self,
        primary: str,
        secondary: str,
        accent: str,
        *,
        skin: str | None = None,
        write: bool = False,
    ) -> ServiceResult:
        return self._customize(
            "recolor",
            lambda sf: sf.recolor(primary, secondary, accent),
            {
                "branding.colors.primary": primary,
                "branding.colors.secondary": secondary,
                "branding.colors.accent": accent,
            },
            skin=skin,
            write=write,
        )

    def change_handle(
        self,
        handle: str,
        *,
        skin: str | None = None,
        write: bool = False,
    ) -> ServiceResult:
        return self._customize(
            "handle",
            lambda sf: sf.change_messaging_handle(handle),
            {"contact.messaging_handle": handle.strip() or None},
            skin=skin,
            write=write,
        )

    def _customize(
        self,
        mutator: str,
        apply: Callable[[Storefront], DirtySet],
        changes: dict[str, Any],
        *,
        skin: str | None,
        write: bool,
    ) -> ServiceResult:
        """SNAPSHOT -> MUTATE -> REFRESH -> RENDER -> (WRITE)"""
        op = "customize"
        try:
            page = self._workspace.skin(skin)
            storefront = Storefront.open(self._workspace, skin=page.name)
        except UnknownSkinError as exc:
            return failure(op, "UNKNOWN_SKIN", str(exc), skin=skin)
        except DocumentError as exc:
            return failure(op, "DOCUMENT_ERROR", str(exc))

        before = storefront.tree.snapshot()
        dirty = apply(storefront)
        changed = storefront.tree.changed_since(before)
        logger.debug("%s refreshed %s; %d region(s) changed", mutator, sorted(dirty), len(changed))

        path = self._write_page(page, storefront, None)
        if write:
            try:
                update_document_file(self._workspace.document_path, changes)
            except DocumentError as exc:
                return failure(op, "DOCUMENT_ERROR", str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "mutator": mutator,
                "dirty": sorted(d.value for d in dirty),
                "changed_regions": changed,
                "path": str(path),
                "written": write,
            },
        )

    def _write_page(self, page: Skin, storefront: Storefront, output_dir: Path | None) -> Path:
        html = page.render(storefront.tree, self._workspace.environment("skins"))
        path = self._workspace.write_page(html, output_dir)
        logger.info("Wrote %s", path)
        return path
