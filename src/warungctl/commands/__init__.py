"""Subcommand modules for warungctl.

``register_commands()`` uses deferred imports so ``warungctl --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the customize group and the standalone commands."""
    # --- Groups ---
    from warungctl.commands.customize import customize

    cli.add_command(customize)

    # --- Standalone commands ---
    from warungctl.commands.init_cmd import init_cmd
    from warungctl.commands.order import order
    from warungctl.commands.render import render
    from warungctl.commands.validate import validate

    cli.add_command(init_cmd)
    cli.add_command(validate)
    cli.add_command(render)
    cli.add_command(order)
