"""Subcommand modules for symtax.

Provides register_commands() which uses deferred imports to keep
``symtax --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    from symtax.commands.taxonomy import taxonomy

    cli.add_command(taxonomy)

    from symtax.commands.types import types
    from symtax.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(types)
