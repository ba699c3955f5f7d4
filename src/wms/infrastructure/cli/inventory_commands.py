"""CLI commands for the durable inventory log."""

from __future__ import annotations

import click

from wms.application.record_item import RecordItemHandler
from wms.application.seed_inventory import SeedInventoryHandler
from wms.application.show_stock import ShowStockHandler
from wms.domain.exceptions import DomainException
from wms.domain.repository.inventory_log import StorageResult, StorageStatus
from wms.infrastructure.bootstrap import inventory_log
from wms.infrastructure.cli.display import display_stock


def _check(result: StorageResult) -> None:
    try:
        result.raise_for_error()
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("seed")
def inventory_seed() -> None:
    """Seed sample records and save them."""
    log = inventory_log()
    count = SeedInventoryHandler(log).handle()
    _check(log.save_to_file())
    click.echo(f"{count} sample records saved to {log.file_path}")


@click.command("record")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Quantity received.")
def inventory_record(name: str, quantity: int) -> None:
    """Record a new stock entry."""
    log = inventory_log()
    _check(log.load_from_file())

    try:
        record = RecordItemHandler(log).handle(name=name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _check(log.save_to_file())
    click.echo(f"Recorded #{record.id} '{record.name}' (quantity {record.quantity})")


@click.command("list")
def inventory_list() -> None:
    """List recorded stock entries."""
    log = inventory_log()
    result = log.load_from_file()
    _check(result)

    if result.status == StorageStatus.NOT_FOUND:
        click.echo("No inventory file yet. Run 'wms inventory seed' to create one.")
        return

    display_stock("Inventory Items", ShowStockHandler(log).handle())
