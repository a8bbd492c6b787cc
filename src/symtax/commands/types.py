"""Command: list known Symbol transaction types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symtax.commands._base import SymtaxCommand

if TYPE_CHECKING:
    from symtax.commands._context import AppContext


@click.command(cls=SymtaxCommand, examples="symtax types\nsymtax --json types")
@click.pass_obj
def types(app: AppContext) -> None:
    """List the transaction type names usable in taxonomies and contracts."""
    from symtax.services.taxonomy import TaxonomyService

    app.emit(TaxonomyService(app.registry).list_types())
