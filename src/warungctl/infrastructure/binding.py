"""RenderBinding — projects the site document onto presentation regions.

The projection is driven by :data:`BINDING_TABLE`, a static list of
``(sub-binding, field path, selectors, slot, transform)`` entries.  One
field may feed several regions (the business name lands in the header
and the footer).  The binding keeps no state of its own: every call
re-derives region content from the document it is given.

INVARIANT: every sub-binding is idempotent.  Running it twice with the
same document leaves the tree byte-identical.

INVARIANT: an absent optional field (None, empty list, or a fragment that
renders to nothing) clears its regions instead of leaving an empty
placeholder.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from jinja2 import Environment

from warungctl.config.models import CheckoutConfig, RenderConfig
from warungctl.domain.cart import Cart
from warungctl.domain.checkout import build_deep_link, business_name, greeting_message
from warungctl.domain.colors import darken_color
from warungctl.domain.document import ConfigurationDocument
from warungctl.domain.money import format_amount, format_currency
from warungctl.domain.mutators import SubBinding
from warungctl.infrastructure.presentation import ROOT, PresentationTree
from warungctl.infrastructure.templates import build_template_environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BindingContext:
    """Everything a transform may read besides the field value."""

    doc: ConfigurationDocument
    fragments: Environment
    render: RenderConfig
    checkout: CheckoutConfig

    def currency(self, amount: int) -> str:
        return format_currency(amount, self.checkout.currency)

    def messaging_link(self, message: str) -> str:
        return build_deep_link(
            self.doc.contact.messaging_handle,
            message,
            domain=self.checkout.messaging_domain,
        )

    def greeting_url(self) -> str:
        return self.messaging_link(greeting_message(self.doc, self.checkout.style()))

    def chat_url(self) -> str:
        """Bare chat link without a prefilled message."""
        handle = self.doc.contact.messaging_handle or ""
        return f"https://{self.checkout.messaging_domain}/{handle}"


Transform = Callable[[Any, BindingContext], str | None]


@dataclass(frozen=True)
class FieldBinding:
    """One row of the mapping table.

    ``path=None`` hands the whole document to the transform, for regions
    that combine several fields.
    """

    sub_binding: SubBinding
    path: str | None
    selectors: tuple[str, ...]
    slot: str = "text"
    transform: Transform | None = None


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------

_PHONE_NOISE = re.compile(r"[^\d+]")


def _fragment(template_name: str) -> Transform:
    """Render a fragment template with ``value`` and ``doc`` in scope."""

    def render(value: Any, ctx: BindingContext) -> str | None:
        template = ctx.fragments.get_template(template_name)
        output = template.render(
            value=value,
            doc=ctx.doc,
            currency=ctx.currency,
            greeting_url=ctx.greeting_url(),
            chat_url=ctx.chat_url(),
            tel_href=tel_href,
        ).strip()
        return output or None

    return render


def _darken(value: str, ctx: BindingContext) -> str | None:
    try:
        return darken_color(value, ctx.render.darken_percent)
    except ValueError:
        logger.warning("Cannot derive dark variant of malformed color %r", value)
        return None


def _success_color(doc: ConfigurationDocument, ctx: BindingContext) -> str:
    return doc.branding.colors.success or ctx.render.default_success_color


def _page_title(doc: ConfigurationDocument, ctx: BindingContext) -> str | None:
    return doc.website.title or doc.identity.name


def _greeting_link(doc: ConfigurationDocument, ctx: BindingContext) -> str:
    return ctx.greeting_url()


def tel_href(phone: str) -> str:
    """``tel:`` URI with spaces, dashes and brackets stripped."""
    return "tel:" + _PHONE_NOISE.sub("", phone)


# ---------------------------------------------------------------------------
# Mapping table
# ---------------------------------------------------------------------------

_ID = SubBinding.IDENTITY
_META = SubBinding.META
_COL = SubBinding.COLORS
_IMG = SubBinding.IMAGERY
_CON = SubBinding.CONTACT

BINDING_TABLE: tuple[FieldBinding, ...] = (
    # identity
    FieldBinding(_ID, "identity.name", ("header.business-name", "footer.business-name")),
    FieldBinding(
        _ID, "identity.tagline", ("hero.title",), "html", _fragment("hero_title.html.j2")
    ),
    FieldBinding(_ID, "identity.description", ("hero.subtitle",)),
    FieldBinding(_ID, "identity.owner_name", ("about.owner-name",)),
    FieldBinding(_ID, "identity.owner_title", ("about.owner-title",)),
    FieldBinding(_ID, "identity.story", ("about.story",)),
    FieldBinding(
        _ID,
        "identity.year_established",
        ("footer.description",),
        "html",
        _fragment("footer_description.html.j2"),
    ),
    # meta
    FieldBinding(_META, None, ("head.title",), transform=_page_title),
    FieldBinding(_META, None, ("head.og-title",), "attr:content", _page_title),
    FieldBinding(
        _META,
        "website.description",
        ("head.description", "head.og-description"),
        "attr:content",
    ),
    FieldBinding(_META, "website.keywords", ("head.keywords",), "attr:content"),
    FieldBinding(_META, "website.og_image", ("head.og-image",), "attr:content"),
    FieldBinding(_META, "website.language", (ROOT,), "attr:lang"),
    # colors
    FieldBinding(_COL, "branding.colors.primary", (ROOT,), "var:--primary-color"),
    FieldBinding(_COL, "branding.colors.secondary", (ROOT,), "var:--secondary-color"),
    FieldBinding(_COL, "branding.colors.accent", (ROOT,), "var:--accent-color"),
    FieldBinding(_COL, None, (ROOT,), "var:--success-color", _success_color),
    FieldBinding(_COL, "branding.colors.primary", (ROOT,), "var:--primary-dark", _darken),
    FieldBinding(_COL, "branding.colors.secondary", (ROOT,), "var:--secondary-dark", _darken),
    # imagery
    FieldBinding(_IMG, "branding.images.logo", ("header.logo", "footer.logo"), "attr:src"),
    FieldBinding(_IMG, "branding.images.hero_background", ("hero.image",), "attr:src"),
    FieldBinding(_IMG, "branding.images.owner_photo", ("about.owner-photo",), "attr:src"),
    FieldBinding(
        _IMG,
        "branding.images.favicon",
        ("head.favicon", "head.apple-touch-icon"),
        "attr:href",
    ),
    # contact
    FieldBinding(_CON, None, ("contact.block",), "html", _fragment("contact_block.html.j2")),
    FieldBinding(_CON, None, ("footer.contact",), "html", _fragment("footer_contact.html.j2")),
    FieldBinding(_CON, None, ("nav.cta", "float.messaging"), "attr:href", _greeting_link),
    FieldBinding(_CON, "contact.hours", ("hero.hours",), "html", _fragment("hero_hours.html.j2")),
    # ordering policy
    FieldBinding(
        SubBinding.ORDERING_POLICY,
        None,
        ("delivery.info",),
        "html",
        _fragment("delivery_info.html.j2"),
    ),
    # catalog
    FieldBinding(
        SubBinding.CATEGORIES,
        "categories",
        ("menu.tabs",),
        "html",
        _fragment("menu_tabs.html.j2"),
    ),
    # social
    FieldBinding(
        SubBinding.SOCIAL,
        None,
        ("footer.social",),
        "html",
        _fragment("social_links.html.j2"),
    ),
    # map
    FieldBinding(SubBinding.MAP, "website.maps_embed_url", ("location.map",), "attr:src"),
    # marketing
    FieldBinding(
        SubBinding.PROMOTIONS,
        "promotions",
        ("promo.grid",),
        "html",
        _fragment("promo_grid.html.j2"),
    ),
    FieldBinding(
        SubBinding.HIGHLIGHTS,
        "highlights",
        ("about.features",),
        "html",
        _fragment("highlights.html.j2"),
    ),
)


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, list) and not value)


# ---------------------------------------------------------------------------
# RenderBinding
# ---------------------------------------------------------------------------


class RenderBinding:
    """Applies the mapping table to a :class:`PresentationTree`."""

    def __init__(
        self,
        tree: PresentationTree,
        *,
        render: RenderConfig | None = None,
        checkout: CheckoutConfig | None = None,
        fragments: Environment | None = None,
    ) -> None:
        self.tree = tree
        self.render = render or RenderConfig()
        self.checkout = checkout or CheckoutConfig()
        self.fragments = fragments or build_template_environment("fragments")

    # --- whole-document entry points ---

    def bind(self, doc: ConfigurationDocument, cart: Cart | None = None) -> None:
        """Run every sub-binding.  Without a cart the cart display shows empty."""
        self.refresh(doc, SubBinding, cart=cart)

    def refresh(
        self,
        doc: ConfigurationDocument,
        dirty: Iterable[SubBinding],
        *,
        cart: Cart | None = None,
    ) -> None:
        """Run only the sub-bindings in *dirty*, in table order."""
        wanted = set(dirty)
        for sub in SubBinding:
            if sub not in wanted:
                continue
            if sub is SubBinding.CART:
                self.bind_cart(cart if cart is not None else Cart(), doc)
            else:
                self._apply(sub, doc)

    # --- individual sub-bindings ---

    def bind_identity(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.IDENTITY, doc)

    def bind_meta(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.META, doc)

    def bind_colors(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.COLORS, doc)

    def bind_imagery(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.IMAGERY, doc)

    def bind_contact(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.CONTACT, doc)

    def bind_ordering_policy(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.ORDERING_POLICY, doc)

    def bind_categories(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.CATEGORIES, doc)

    def bind_social(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.SOCIAL, doc)

    def bind_map(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.MAP, doc)

    def bind_promotions(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.PROMOTIONS, doc)

    def bind_highlights(self, doc: ConfigurationDocument) -> None:
        self._apply(SubBinding.HIGHLIGHTS, doc)

    def bind_cart(self, cart: Cart, doc: ConfigurationDocument) -> None:
        """Project the cart onto the cart display regions."""
        ctx = self._context(doc)
        self.tree.write("cart.heading", "text", business_name(doc, self.checkout.style()))
        items_html = (
            ctx.fragments.get_template("cart_items.html.j2")
            .render(items=cart.items(), currency=ctx.currency)
            .strip()
        )
        self.tree.write("cart.items", "html", items_html)
        currency = self.checkout.currency
        self.tree.write("cart.total", "text", format_amount(cart.total(), currency))
        prefix = currency.symbol + currency.symbol_separator
        self.tree.write("cart.total", "attr:data-prefix", prefix)

    # --- engine ---

    def _context(self, doc: ConfigurationDocument) -> BindingContext:
        return BindingContext(
            doc=doc,
            fragments=self.fragments,
            render=self.render,
            checkout=self.checkout,
        )

    def _apply(self, sub: SubBinding, doc: ConfigurationDocument) -> None:
        ctx = self._context(doc)
        for entry in BINDING_TABLE:
            if entry.sub_binding is not sub:
                continue
            value = doc if entry.path is None else doc.lookup(entry.path)
            content: str | None
            if _is_absent(value):
                content = None
            elif entry.transform is not None:
                content = entry.transform(value, ctx)
            else:
                content = str(value)
            for selector in entry.selectors:
                self.tree.write(selector, entry.slot, content)
        logger.debug("Bound %s", sub.value)
