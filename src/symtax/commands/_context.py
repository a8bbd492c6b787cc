"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the taxonomy registry lazily and routes
results to stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symtax.domain.sequence import TaxonomyConfigError
from symtax.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from symtax.config.settings import SymtaxSettings
    from symtax.infrastructure.registry import TaxonomyRegistry
    from symtax.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry (and with it plugin discovery) is only built on first
    use, so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: SymtaxSettings) -> None:
        self.settings = settings
        self._registry: TaxonomyRegistry | None = None

        from symtax.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> TaxonomyRegistry:
        """The taxonomy registry (created lazily on first access)."""
        if self._registry is None:
            from symtax.infrastructure.registry import TaxonomyRegistry

            try:
                self._registry = TaxonomyRegistry.from_settings(self.settings)
            except TaxonomyConfigError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
