"""Command: workspace initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from warungctl.commands._base import WarungCommand
from warungctl.infrastructure.skins import SKINS

if TYPE_CHECKING:
    from warungctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  warungctl init "Warung Makan Sederhana"
  warungctl init "Bistro Senja" --skin modern --path sites/bistro
  warungctl init --force"""


@click.command("init", cls=WarungCommand, examples=_INIT_EXAMPLES)
@click.argument("name", required=False, default=None)
@click.option(
    "--path",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Workspace directory.",
)
@click.option(
    "--skin",
    type=click.Choice(sorted(SKINS), case_sensitive=False),
    default="warung",
    help="Page skin.",
)
@click.option("--force", is_flag=True, help="Overwrite existing workspace files.")
@click.pass_obj
def init_cmd(app: AppContext, name: str | None, path: Path, skin: str, force: bool) -> None:
    """Create site.yaml and warungctl.toml for a new business."""
    workspace_path = path.resolve()
    if name is None:
        name = workspace_path.name.replace("-", " ").title() or "Warung"

    from warungctl.services.init import InitService

    app.emit(InitService.init_workspace(workspace_path, name=name, skin=skin.lower(), force=force))
