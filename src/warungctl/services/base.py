"""BaseService — shared foundation for warungctl services.

Every service receives a :class:`Workspace` at construction time.  The
Workspace owns the settings, the loaded site document and the template
environments.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from warungctl.domain.validation import Finding, validate

if TYPE_CHECKING:
    from warungctl.domain.document import ConfigurationDocument
    from warungctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class SiteService(BaseService):
            def render(self) -> ServiceResult:
                doc = self._workspace.document
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _check_document(self, doc: ConfigurationDocument, warnings: list[str]) -> list[Finding]:
        """Validate *doc* and record findings as warnings.

        INVARIANT: findings never stop the caller (fail-open).
        """
        findings = validate(doc, handle_prefix=self._workspace.settings.site.handle_prefix)
        for finding in findings:
            logger.warning("%s: %s", finding.field, finding.message)
            warnings.append(f"{finding.field}: {finding.message}")
        return findings
