"""Presentation tree — named regions the binding layer writes into.

A region is addressed by a selector string (``"hero.subtitle"``) and has
four kinds of slots:

- ``text``: plain text, escaped when the page renders;
- ``html``: pre-rendered markup from a fragment template;
- ``attr:<name>``: an element attribute (``attr:src``, ``attr:href``);
- ``var:<name>``: a CSS custom property (only meaningful on ``:root``).

Writing ``None`` to a slot clears it, so an absent optional field leaves
no trace in the page.  Writing to a selector the tree does not declare is
a silent no-op: skins only declare the regions their page has.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

logger = logging.getLogger(__name__)

ROOT = ":root"

SLOT_TEXT = "text"
SLOT_HTML = "html"
ATTR_PREFIX = "attr:"
VAR_PREFIX = "var:"


@dataclass
class Region:
    """Content currently bound to one selector."""

    selector: str
    text: str | None = None
    html: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    variables: dict[str, str] = field(default_factory=dict)

    def write(self, slot: str, value: str | None) -> None:
        if slot == SLOT_TEXT:
            self.text = value
        elif slot == SLOT_HTML:
            self.html = value
        elif slot.startswith(ATTR_PREFIX):
            _set_or_clear(self.attrs, slot[len(ATTR_PREFIX) :], value)
        elif slot.startswith(VAR_PREFIX):
            _set_or_clear(self.variables, slot[len(VAR_PREFIX) :], value)
        else:
            msg = f"Unknown slot {slot!r} for region {self.selector!r}"
            raise ValueError(msg)

    def is_empty(self) -> bool:
        return self.text is None and self.html is None and not self.attrs and not self.variables

    def snapshot(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "html": self.html,
            "attrs": dict(sorted(self.attrs.items())),
            "variables": dict(sorted(self.variables.items())),
        }


def _set_or_clear(target: dict[str, str], key: str, value: str | None) -> None:
    if value is None:
        target.pop(key, None)
    else:
        target[key] = value


class PresentationTree:
    """Fixed set of regions, declared up front by the active skin."""

    def __init__(self, selectors: Iterable[str]) -> None:
        self._regions: dict[str, Region] = {ROOT: Region(ROOT)}
        for selector in selectors:
            self._regions.setdefault(selector, Region(selector))

    def __contains__(self, selector: object) -> bool:
        return selector in self._regions

    def selectors(self) -> list[str]:
        return list(self._regions)

    def region(self, selector: str) -> Region | None:
        return self._regions.get(selector)

    def write(self, selector: str, slot: str, value: str | None) -> bool:
        """Write *value* into *slot* of *selector*.

        Returns False (and changes nothing) when the region is not declared.
        """
        region = self._regions.get(selector)
        if region is None:
            logger.debug("Skipping undeclared region %s", selector)
            return False
        region.write(slot, value)
        return True

    # --- template accessors ---

    def text(self, selector: str) -> str:
        region = self._regions.get(selector)
        if region is None or region.text is None:
            return ""
        return region.text

    def html(self, selector: str) -> Markup:
        region = self._regions.get(selector)
        if region is None or region.html is None:
            return Markup("")
        return Markup(region.html)

    def attr(self, selector: str, name: str, default: str = "") -> str:
        region = self._regions.get(selector)
        if region is None:
            return default
        return region.attrs.get(name, default)

    def present(self, selector: str) -> bool:
        """Whether anything is bound to *selector*."""
        region = self._regions.get(selector)
        return region is not None and not region.is_empty()

    def css_variables(self) -> list[tuple[str, str]]:
        return sorted(self._regions[ROOT].variables.items())

    # --- inspection ---

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Plain-data copy of every region, for comparison and diffing."""
        return {selector: region.snapshot() for selector, region in sorted(self._regions.items())}

    def changed_since(self, before: dict[str, dict[str, Any]]) -> list[str]:
        """Selectors whose content differs from an earlier :meth:`snapshot`."""
        after = self.snapshot()
        return [selector for selector, state in after.items() if before.get(selector) != state]
