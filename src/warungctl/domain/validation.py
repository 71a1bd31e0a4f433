"""Site document validation — findings, never exceptions.

INVARIANT: validation is fail-open.  ``validate()`` reports what is wrong
and the caller decides what to do; rendering and ordering proceed with
whatever the document holds.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel

from warungctl.domain.colors import HEX_COLOR_PATTERN
from warungctl.domain.document import ConfigurationDocument

DEFAULT_HANDLE_PREFIX = "628"

REQUIRED_FIELDS: dict[str, str] = {
    "identity.name": "Business name is required",
    "contact.messaging_handle": "Messaging handle is required",
    "contact.phone": "Phone number is required",
}

# Keys each list entry needs before the page shows it.
ENTRY_FIELDS: dict[str, tuple[str, ...]] = {
    "categories": ("id", "label"),
    "ordering.delivery_zones": ("distance",),
    "promotions": ("title",),
    "highlights": ("title",),
}

_DIGITS = re.compile(r"^\d+$")


class FindingKind(StrEnum):
    MISSING_FIELD = "missing_field"
    BAD_HANDLE_FORMAT = "bad_handle_format"
    BAD_COLOR_FORMAT = "bad_color_format"


class Finding(BaseModel):
    """One validation problem, addressed by dotted field path."""

    model_config = {"frozen": True}

    kind: FindingKind
    field: str
    message: str


def validate(
    doc: ConfigurationDocument,
    *,
    handle_prefix: str = DEFAULT_HANDLE_PREFIX,
) -> list[Finding]:
    """Run every check and return all findings (empty list = accepted)."""
    findings: list[Finding] = []
    findings.extend(_check_required(doc))
    findings.extend(_check_handle(doc, handle_prefix))
    findings.extend(_check_colors(doc))
    findings.extend(_check_entries(doc))
    return findings


def _check_required(doc: ConfigurationDocument) -> list[Finding]:
    return [
        Finding(kind=FindingKind.MISSING_FIELD, field=path, message=message)
        for path, message in REQUIRED_FIELDS.items()
        if doc.lookup(path) is None
    ]


def _check_handle(doc: ConfigurationDocument, prefix: str) -> list[Finding]:
    handle = doc.contact.messaging_handle
    if handle is None:
        return []
    if _DIGITS.match(handle) and handle.startswith(prefix):
        return []
    return [
        Finding(
            kind=FindingKind.BAD_HANDLE_FORMAT,
            field="contact.messaging_handle",
            message=f"Messaging handle should be digits only and start with {prefix}",
        )
    ]


def _check_colors(doc: ConfigurationDocument) -> list[Finding]:
    palette = doc.branding.colors
    findings = [
        Finding(
            kind=FindingKind.BAD_COLOR_FORMAT,
            field=f"branding.colors.{name}",
            message=f"Color {name} should be in hex format (e.g. #FF6B35), got {value!r}",
        )
        for name, value in palette.entries()
        if not HEX_COLOR_PATTERN.match(value)
    ]
    findings.extend(
        Finding(
            kind=FindingKind.BAD_COLOR_FORMAT,
            field=f"branding.colors.{name}",
            message=f"Color {name} is empty; quote hex values in YAML (\"#FF6B35\")",
        )
        for name in palette.blank_entries()
    )
    return findings


def _check_entries(doc: ConfigurationDocument) -> list[Finding]:
    findings: list[Finding] = []
    for path, keys in ENTRY_FIELDS.items():
        for index, entry in enumerate(doc.lookup(path)):
            findings.extend(
                Finding(
                    kind=FindingKind.MISSING_FIELD,
                    field=f"{path}.{index}.{key}",
                    message=f"Entry is missing {key} and is left off the page",
                )
                for key in keys
                if getattr(entry, key) is None
            )
    return findings
