"""CLI commands for the inventory log.

Every mutating command loads the log into a fresh repository, applies one
operation, and saves the log back.  Nothing is saved when the operation
fails.
"""

from __future__ import annotations

from pathlib import Path

import click

from stockroom.application.add_inventory_record import AddInventoryRecordHandler
from stockroom.application.increase_stock import IncreaseStockHandler
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import inventory_log


def _fail(exc: DomainException) -> click.ClickException:
    return click.ClickException(f"[{exc.kind.value}] {exc}")


@click.command("add")
@click.option("--id", "record_id", required=True, type=int, help="Record ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
@click.pass_obj
def inventory_add(data_dir: Path | None, record_id: int, name: str, quantity: int) -> None:
    """Add a record to the inventory log."""
    log = inventory_log(data_dir)

    try:
        repo = log.load_repository()
        record = AddInventoryRecordHandler(inventory_repo=repo).handle(
            record_id=record_id, name=name, quantity=quantity
        )
    except DomainException as exc:
        raise _fail(exc)

    log.save_repository(repo)
    click.echo(f"Record #{record.id} '{record.name}' added (qty {record.quantity})")


@click.command("update")
@click.option("--id", "record_id", required=True, type=int, help="Record ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.pass_obj
def inventory_update(data_dir: Path | None, record_id: int, quantity: int) -> None:
    """Set the quantity of an existing record."""
    log = inventory_log(data_dir)

    try:
        repo = log.load_repository()
        record = repo.update_quantity(record_id, quantity)
    except DomainException as exc:
        raise _fail(exc)

    log.save_repository(repo)
    click.echo(f"Record #{record.id} '{record.name}' quantity set to {record.quantity}")


@click.command("restock")
@click.option("--id", "record_id", required=True, type=int, help="Record ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
@click.pass_obj
def inventory_restock(data_dir: Path | None, record_id: int, amount: int) -> None:
    """Increase the quantity of an existing record."""
    log = inventory_log(data_dir)

    try:
        repo = log.load_repository()
        record = IncreaseStockHandler(repo).handle(record_id, amount)
    except DomainException as exc:
        raise _fail(exc)

    log.save_repository(repo)
    click.echo(f"Stock increased for {record.name}. New Quantity: {record.quantity}")


@click.command("remove")
@click.option("--id", "record_id", required=True, type=int, help="Record ID.")
@click.pass_obj
def inventory_remove(data_dir: Path | None, record_id: int) -> None:
    """Remove a record from the inventory log."""
    log = inventory_log(data_dir)

    try:
        repo = log.load_repository()
        repo.remove(record_id)
    except DomainException as exc:
        raise _fail(exc)

    log.save_repository(repo)
    click.echo(f"Item with ID {record_id} removed successfully.")


@click.command("show")
@click.pass_obj
def inventory_show(data_dir: Path | None) -> None:
    """Show every record in the inventory log."""
    try:
        repo = inventory_log(data_dir).load_repository()
    except DomainException as exc:
        raise _fail(exc)

    lines = ShowInventoryHandler(inventory_repo=repo).handle()
    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Qty':>8} {'Added':>18}")
    click.echo("-" * 55)
    for line in lines:
        click.echo(f"{line.id:<6} {line.name:<20} {line.quantity:>8} {line.date_added:>18}")
