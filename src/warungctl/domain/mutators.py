"""Named in-place patches on the site document.

Each mutator updates its fields and returns the sub-bindings whose
regions are now stale.  Callers refresh exactly those; no mutator
triggers re-validation.
"""

from __future__ import annotations

from enum import StrEnum

from warungctl.domain.document import ConfigurationDocument


class SubBinding(StrEnum):
    """Independently refreshable groups of presentation regions."""

    IDENTITY = "identity"
    META = "meta"
    COLORS = "colors"
    IMAGERY = "imagery"
    CONTACT = "contact"
    ORDERING_POLICY = "ordering_policy"
    CATEGORIES = "categories"
    SOCIAL = "social"
    MAP = "map"
    PROMOTIONS = "promotions"
    HIGHLIGHTS = "highlights"
    CART = "cart"


DirtySet = frozenset[SubBinding]

# The name appears in the page title, the greeting link and the cart heading.
RENAME_DIRTY: DirtySet = frozenset(
    {SubBinding.IDENTITY, SubBinding.META, SubBinding.CONTACT, SubBinding.CART}
)
RECOLOR_DIRTY: DirtySet = frozenset({SubBinding.COLORS})
HANDLE_DIRTY: DirtySet = frozenset({SubBinding.CONTACT, SubBinding.SOCIAL})


def rename_business(doc: ConfigurationDocument, name: str) -> DirtySet:
    doc.identity.name = name.strip() or None
    return RENAME_DIRTY


def recolor(
    doc: ConfigurationDocument,
    primary: str,
    secondary: str,
    accent: str,
) -> DirtySet:
    """Replace the three main palette colors; ``success`` is left alone."""
    colors = doc.branding.colors
    colors.primary = primary
    colors.secondary = secondary
    colors.accent = accent
    return RECOLOR_DIRTY


def change_messaging_handle(doc: ConfigurationDocument, handle: str) -> DirtySet:
    doc.contact.messaging_handle = handle.strip() or None
    return HANDLE_DIRTY
