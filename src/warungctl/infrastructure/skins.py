"""Site skins — a page template plus the regions that page declares.

Both skins are fed by the same site document and the same binding
table.  A skin that has no cart or delivery section simply does not
declare those regions, and the bindings for them become no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from warungctl.infrastructure.presentation import PresentationTree

if TYPE_CHECKING:
    from jinja2 import Environment


class UnknownSkinError(LookupError):
    """Raised when a skin name is not registered."""


_HEAD_REGIONS = (
    "head.title",
    "head.description",
    "head.keywords",
    "head.og-title",
    "head.og-description",
    "head.og-image",
    "head.favicon",
    "head.apple-touch-icon",
)

_SHARED_REGIONS = (
    *_HEAD_REGIONS,
    "header.logo",
    "header.business-name",
    "nav.cta",
    "hero.title",
    "hero.subtitle",
    "hero.image",
    "about.story",
    "about.owner-name",
    "about.owner-title",
    "about.owner-photo",
    "about.features",
    "menu.tabs",
    "contact.block",
    "location.map",
    "float.messaging",
    "footer.logo",
    "footer.business-name",
    "footer.description",
    "footer.contact",
    "footer.social",
)


@dataclass(frozen=True)
class Skin:
    """A page layout and the region selectors it renders."""

    name: str
    description: str
    template: str
    regions: tuple[str, ...]

    def new_tree(self) -> PresentationTree:
        return PresentationTree(self.regions)

    def render(self, tree: PresentationTree, environment: Environment) -> str:
        """Render the full page from a bound tree."""
        return environment.get_template(self.template).render(tree=tree, skin=self)


SKINS: dict[str, Skin] = {
    "warung": Skin(
        name="warung",
        description="Warm street-food layout with cart, delivery and promotions",
        template="warung/page.html.j2",
        regions=(
            *_SHARED_REGIONS,
            "hero.hours",
            "promo.grid",
            "delivery.info",
            "cart.heading",
            "cart.items",
            "cart.total",
        ),
    ),
    "modern": Skin(
        name="modern",
        description="Minimal fine-dining layout; reservations by message, no cart",
        template="modern/page.html.j2",
        regions=_SHARED_REGIONS,
    ),
}


def get_skin(name: str) -> Skin:
    try:
        return SKINS[name]
    except KeyError:
        known = ", ".join(sorted(SKINS))
        msg = f"Unknown skin {name!r} (available: {known})"
        raise UnknownSkinError(msg) from None
