"""CLI commands for stock adjustments and the history log."""

from __future__ import annotations

import click

from stockpos.application.adjust_stock import AdjustStockHandler
from stockpos.application.show_history import ShowHistoryHandler
from stockpos.domain.exceptions import DomainException
from stockpos.infrastructure.bootstrap import json_services


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--direction",
    required=True,
    type=click.Choice(["increase", "decrease"], case_sensitive=False),
    help="Add stock or take it out.",
)
@click.option("--amount", required=True, type=int, help="Number of units.")
def stock_adjust(product_id: str, direction: str, amount: int) -> None:
    """Increase or decrease a product's stock."""
    handler = AdjustStockHandler(json_services().ledger)

    try:
        entry = handler.handle(product_id, direction, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Stock for '{entry.product_name}' {entry.action_type}d: "
        f"{entry.previous_quantity} -> {entry.new_quantity}"
    )


@click.command("history")
@click.option("--product", "product_id", default=None, help="Only this product ID.")
@click.option(
    "--action",
    "action_type",
    default=None,
    type=click.Choice(["increase", "decrease", "sale"], case_sensitive=False),
    help="Only this kind of change.",
)
@click.option("--search", default=None, help="Match product name or user.")
def stock_history(
    product_id: str | None, action_type: str | None, search: str | None
) -> None:
    """Show the stock movement log, newest first."""
    handler = ShowHistoryHandler(json_services().ledger)
    entries = handler.handle(product_id=product_id, action_type=action_type, search=search)

    if not entries:
        click.echo("No history entries found.")
        return

    click.echo(
        f"{'When':<21} {'Product':<22} {'Action':<9} {'From':>6} {'To':>6} {'Change':>7}  By"
    )
    click.echo("-" * 90)
    for e in entries:
        click.echo(
            f"{e.timestamp:<21} {e.product_name:<22} {e.action_type:<9} "
            f"{e.previous_quantity:>6} {e.new_quantity:>6} {e.change:>+7}  {e.updated_by}"
        )
