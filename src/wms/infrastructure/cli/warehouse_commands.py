"""CLI commands for the in-memory warehouse."""

from __future__ import annotations

import click

from wms.application.increase_stock import IncreaseStockHandler
from wms.application.remove_item import RemoveItemHandler
from wms.application.show_stock import ShowStockHandler
from wms.domain.exceptions import (
    DomainException,
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
)
from wms.domain.model.items import ElectronicItem
from wms.infrastructure.bootstrap import warehouse_manager
from wms.infrastructure.cli.display import display_stock


@click.command("demo")
def warehouse_demo() -> None:
    """Seed a warehouse and walk through the error cases."""
    manager = warehouse_manager()
    try:
        manager.seed_data()
    except DomainException as exc:
        raise click.ClickException(f"Error seeding data: {exc}")

    display_stock("Grocery Items", ShowStockHandler(manager.groceries).handle())
    display_stock("Electronic Items", ShowStockHandler(manager.electronics).handle())
    click.echo()

    try:
        manager.electronics.add(ElectronicItem(1, "iPad", 10, "Apple", 35))
    except DuplicateKeyError as exc:
        click.echo(f"Error: {exc}")

    try:
        RemoveItemHandler(manager.electronics).handle(99)
    except NotFoundError as exc:
        click.echo(f"Error: {exc}")

    try:
        manager.electronics.update_quantity(1, -5)
    except InvalidValueError as exc:
        click.echo(f"Error: {exc}")

    new_quantity = IncreaseStockHandler(manager.groceries).handle(3, 20)
    click.echo(f"Stock increased for Tomatoes. New quantity: {new_quantity}")


@click.command("restock")
@click.option(
    "--category",
    type=click.Choice(["electronics", "groceries"]),
    required=True,
    help="Which repository to restock.",
)
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--amount", required=True, type=int, help="Units to add (negative to deduct).")
def warehouse_restock(category: str, item_id: int, amount: int) -> None:
    """Adjust stock of a seeded sample item."""
    manager = warehouse_manager()
    manager.seed_data()
    repo = manager.electronics if category == "electronics" else manager.groceries

    try:
        new_quantity = IncreaseStockHandler(repo).handle(item_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    item = repo.get_by_id(item_id)
    click.echo(f"Stock adjusted for {item.name}. New quantity: {new_quantity}")
