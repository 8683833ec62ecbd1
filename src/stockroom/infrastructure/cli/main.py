import logging
from pathlib import Path

import click

from stockroom.infrastructure.bootstrap import DATA_DIR_ENV
from stockroom.infrastructure.cli.grades_commands import grades_report
from stockroom.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_remove,
    inventory_restock,
    inventory_show,
    inventory_update,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding the persisted logs.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Stockroom — keyed entity stores with JSON persistence"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def inventory() -> None:
    """Manage the inventory log."""


@cli.group()
def grades() -> None:
    """Process student results."""


# Register subcommands
inventory.add_command(inventory_add)
inventory.add_command(inventory_remove)
inventory.add_command(inventory_restock)
inventory.add_command(inventory_show)
inventory.add_command(inventory_update)
grades.add_command(grades_report)
