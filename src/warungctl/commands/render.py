"""Command: render the static site page."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from warungctl.commands._base import WarungCommand
from warungctl.infrastructure.skins import SKINS

if TYPE_CHECKING:
    from warungctl.commands._context import AppContext

_RENDER_EXAMPLES = """\
  warungctl render
  warungctl render --skin modern
  warungctl render --out public"""


@click.command("render", cls=WarungCommand, examples=_RENDER_EXAMPLES)
@click.option(
    "--skin",
    type=click.Choice(sorted(SKINS), case_sensitive=False),
    default=None,
    help="Page skin (default from [site] skin).",
)
@click.option(
    "--out",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default from [site] output_dir).",
)
@click.pass_obj
def render(app: AppContext, skin: str | None, output_dir: Path | None) -> None:
    """Bind the site document to a skin and write index.html."""
    from warungctl.services.site import SiteService

    app.emit(SiteService(app.workspace).render(skin=skin, output_dir=output_dir))
