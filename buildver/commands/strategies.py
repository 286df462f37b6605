"""Strategies command: list the registered versioning strategies."""

from __future__ import annotations

import click

from buildver.core import UnimplementedStrategy, Versioning
from buildver.context import pass_context, BuildVerContext
from buildver.utils import print_table


@click.command()
@pass_context
def strategies(ctx: BuildVerContext) -> None:
    """List versioning strategies and whether each one is implemented."""
    versioning = Versioning.for_project(ctx.config.project_path)
    rows = [
        {
            "Strategy": name,
            "Implemented": "no" if isinstance(entry, UnimplementedStrategy) else "yes",
            "Default": "*" if name == ctx.config.strategy else "",
        }
        for name, entry in versioning.strategies.items()
    ]
    print_table(rows, title="Versioning strategies")
