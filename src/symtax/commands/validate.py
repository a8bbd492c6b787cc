"""Command: validate a contract file against a taxonomy."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from symtax.commands._base import SymtaxCommand

if TYPE_CHECKING:
    from symtax.commands._context import AppContext


@click.command(
    cls=SymtaxCommand,
    examples="""
        symtax validate UBCDigital.NamedAssetCreation contract.json
        symtax --json validate UBCDigital.NamedAssetCreation contract.json
        symtax -q validate UBCDigital.NamedAssetCreation contract.json
    """,
)
@click.argument("taxonomy_name", metavar="TAXONOMY")
@click.argument(
    "contract_file",
    metavar="CONTRACT",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.pass_obj
def validate(app: AppContext, taxonomy_name: str, contract_file: Path) -> None:
    """Validate a JSON CONTRACT file against TAXONOMY.

    Exits with status 1 when the contract does not conform.
    """
    from symtax.services.validate import ValidationService

    app.emit(ValidationService(app.registry).validate(taxonomy_name, contract_file))
