"""Root CLI group: global output flags, workspace selection, subcommands."""

from __future__ import annotations

from pathlib import Path

import click

from warungctl import __version__
from warungctl.commands import register_commands
from warungctl.commands._context import AppContext
from warungctl.config.settings import WarungSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="warungctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output, errors only in logs.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-w",
    "--workspace",
    "workspace_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Site directory.  Default: nearest one holding warungctl.toml or site.yaml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    workspace_root: Path | None,
) -> None:
    """warungctl: build a small food business site and compose its orders."""
    ctx.obj = AppContext(
        WarungSettings.from_cli(
            config_path=config_path,
            workspace_root=workspace_root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
