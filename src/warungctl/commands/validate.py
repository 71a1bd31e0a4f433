"""Command: report site document findings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from warungctl.commands._base import WarungCommand

if TYPE_CHECKING:
    from warungctl.commands._context import AppContext

_VALIDATE_EXAMPLES = """\
  warungctl validate
  warungctl validate --strict
  warungctl --json validate"""


@click.command("validate", cls=WarungCommand, examples=_VALIDATE_EXAMPLES)
@click.option("--strict", is_flag=True, help="Exit non-zero when there are findings.")
@click.pass_obj
def validate(app: AppContext, strict: bool) -> None:
    """Check the site document for missing or malformed fields.

    Findings never block render or order; --strict only affects this
    command's exit code.
    """
    from warungctl.services.site import SiteService

    app.emit(SiteService(app.workspace).validate(strict=strict))
