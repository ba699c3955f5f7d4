import logging

import click

from wms.infrastructure.cli.inventory_commands import (
    inventory_list,
    inventory_record,
    inventory_seed,
)
from wms.infrastructure.cli.warehouse_commands import warehouse_demo, warehouse_restock


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """WMS — Warehouse Management System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def inventory() -> None:
    """Manage the durable inventory log."""


@cli.group()
def warehouse() -> None:
    """Work with the in-memory warehouse."""


# Register subcommands
inventory.add_command(inventory_list)
inventory.add_command(inventory_record)
inventory.add_command(inventory_seed)
warehouse.add_command(warehouse_demo)
warehouse.add_command(warehouse_restock)
