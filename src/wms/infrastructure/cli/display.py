"""Shared table formatting for stock listings."""

from __future__ import annotations

import click

from wms.application.dto import StockLineDTO


def display_stock(title: str, lines: list[StockLineDTO]) -> None:
    click.echo(f"\n{title}:")
    if not lines:
        click.echo("  (none)")
        return

    click.echo(f"  {'ID':<4} {'Name':<20} {'Qty':>6}  Details")
    click.echo(f"  {'-'*60}")
    for line in lines:
        details = ", ".join(f"{k}={v}" for k, v in line.details.items())
        click.echo(f"  {line.id:<4} {line.name:<20} {line.quantity:>6}  {details}")
