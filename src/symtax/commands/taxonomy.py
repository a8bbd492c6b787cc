"""Command group: inspect registered taxonomies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symtax.commands._base import SymtaxGroup

if TYPE_CHECKING:
    from symtax.commands._context import AppContext


@click.group(
    cls=SymtaxGroup,
    examples="""
        symtax taxonomy list
        symtax taxonomy show UBCDigital.NamedAssetCreation
        symtax taxonomy accepts UBCDigital.NamedAssetCreation TRANSFER
    """,
)
def taxonomy() -> None:
    """Inspect the taxonomies defined in symtax.toml and by plugins."""


@taxonomy.command("list", examples="symtax taxonomy list\nsymtax -v taxonomy list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered taxonomies."""
    from symtax.services.taxonomy import TaxonomyService

    app.emit(TaxonomyService(app.registry).list_taxonomies())


@taxonomy.command("show", examples="symtax taxonomy show UBCDigital.NamedAssetCreation")
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show the template and repetition rules of taxonomy NAME."""
    from symtax.services.taxonomy import TaxonomyService

    app.emit(TaxonomyService(app.registry).describe(name))


@taxonomy.command(
    "accepts",
    examples="symtax taxonomy accepts UBCDigital.NamedAssetCreation TRANSFER\n"
    "symtax taxonomy accepts UBCDigital.NamedAssetCreation 16724",
)
@click.argument("name")
@click.argument("type_value", metavar="TYPE")
@click.pass_obj
def accepts(app: AppContext, name: str, type_value: str) -> None:
    """Check whether taxonomy NAME accepts transactions of TYPE (name or code)."""
    from symtax.services.taxonomy import TaxonomyService

    app.emit(TaxonomyService(app.registry).accepts(name, type_value))
