"""Click base classes carrying an on-demand ``--examples`` flag."""

from __future__ import annotations

import textwrap
from typing import Any

import click


class ExamplesMixin:
    """Adds an eager ``--examples`` option when ``examples`` text is given.

    The flag prints the examples for the invoked command path and exits
    before any argument is validated.
    """

    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples is None:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)


class SymtaxCommand(ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class SymtaxGroup(ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands are :class:`SymtaxCommand`."""

    command_class = SymtaxCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
