"""Entry point for the ``symtax`` command."""

from __future__ import annotations

from typing import Any

import click

from symtax import __version__
from symtax.commands import register_commands
from symtax.commands._context import AppContext
from symtax.config.settings import SymtaxSettings

_OUTPUT_FLAGS = ("json_output", "quiet", "verbose", "log_json")


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="symtax")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essentials.")
@click.option("-v", "--verbose", is_flag=True, help="Show rule details and debug logs.")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines on stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    default=None,
    help="Use this symtax.toml instead of searching for one.",
)
@click.option("--no-plugins", is_flag=True, help="Skip plugin discovery.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, no_plugins: bool, **flags: Any) -> None:
    """symtax — validate Symbol transaction sequences against taxonomies."""
    overrides: dict[str, Any] = {name: flags[name] for name in _OUTPUT_FLAGS}
    if no_plugins:
        overrides["plugins"] = {"enabled": False}
    ctx.obj = AppContext(SymtaxSettings.from_cli(config_path=config_path, **overrides))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
