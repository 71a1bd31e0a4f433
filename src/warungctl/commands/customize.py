"""Command group: named patches to the site document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from warungctl.commands._base import WarungGroup
from warungctl.domain.colors import HEX_COLOR_PATTERN

if TYPE_CHECKING:
    from warungctl.commands._context import AppContext

_CUSTOMIZE_EXAMPLES = """\
  warungctl customize rename "Warung Bu Sari"
  warungctl customize recolor "#E74C3C" "#2C3E50" "#F1C40F" --write
  warungctl customize handle 6281234567890 --write"""

_RENAME_EXAMPLES = """\
  warungctl customize rename "Warung Bu Sari"
  warungctl customize rename "Warung Bu Sari" --write"""

_RECOLOR_EXAMPLES = """\
  warungctl customize recolor "#E74C3C" "#2C3E50" "#F1C40F"
  warungctl -v customize recolor "#16A085" "#34495E" "#E67E22" --write"""

_HANDLE_EXAMPLES = """\
  warungctl customize handle 6281234567890
  warungctl customize handle 6281234567890 --write"""


def _hex_color(_ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not HEX_COLOR_PATTERN.match(value):
        msg = f"{value!r} is not a #RRGGBB color"
        raise click.BadParameter(msg, param=param)
    return value


_write_option = click.option("--write", is_flag=True, help="Persist the change to site.yaml.")


@click.group(cls=WarungGroup, examples=_CUSTOMIZE_EXAMPLES)
def customize() -> None:
    """Patch the site document and re-render the affected regions."""


@customize.command(examples=_RENAME_EXAMPLES)
@click.argument("name")
@_write_option
@click.pass_obj
def rename(app: AppContext, name: str, write: bool) -> None:
    """Change the business name."""
    from warungctl.services.site import SiteService

    app.emit(SiteService(app.workspace).rename(name, write=write))


@customize.command(examples=_RECOLOR_EXAMPLES)
@click.argument("primary", callback=_hex_color)
@click.argument("secondary", callback=_hex_color)
@click.argument("accent", callback=_hex_color)
@_write_option
@click.pass_obj
def recolor(app: AppContext, primary: str, secondary: str, accent: str, write: bool) -> None:
    """Replace the primary, secondary and accent colors."""
    from warungctl.services.site import SiteService

    app.emit(SiteService(app.workspace).recolor(primary, secondary, accent, write=write))


@customize.command(examples=_HANDLE_EXAMPLES)
@click.argument("handle")
@_write_option
@click.pass_obj
def handle(app: AppContext, handle: str, write: bool) -> None:
    """Change the messaging handle used by every order link."""
    from warungctl.services.site import SiteService

    app.emit(SiteService(app.workspace).change_handle(handle, write=write))
