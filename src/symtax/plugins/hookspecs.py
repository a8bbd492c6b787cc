"""Pluggy hook specifications for symtax.

One setup-time hook lets plugins contribute taxonomies to the registry;
one event hook is called after every contract validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from symtax.domain.taxonomy import Taxonomy

PROJECT_NAME = "symtax"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SymtaxHookSpec:
    """Hook specifications for the symtax plugin system."""

    @hookspec
    def register_taxonomies(self) -> list[Taxonomy] | None:
        """Return taxonomies to add to the registry."""

    @hookspec
    def post_validate(
        self,
        taxonomy: str,
        contract: str | None,
        outcome: str,
        valid: bool,
    ) -> None:
        """Called after a contract has been validated against *taxonomy*."""
