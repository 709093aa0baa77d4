"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockpos.application.add_product import AddProductHandler
from stockpos.application.delete_product import DeleteProductHandler
from stockpos.application.show_inventory import ShowInventoryHandler
from stockpos.application.update_product import UpdateProductHandler
from stockpos.domain.exceptions import DomainException
from stockpos.infrastructure.bootstrap import json_services


@click.command("add")
@click.option("--inventory", "inventory_name", required=True, help="Inventory location.")
@click.option("--name", "item_name", required=True, help="Item name.")
@click.option("--weight", required=True, help="Weight per item in kg (e.g. 0.5).")
@click.option("--quantity", required=True, type=int, help="Opening stock.")
@click.option("--price", required=True, help="Unit price (e.g. 25.00).")
def product_add(
    inventory_name: str, item_name: str, weight: str, quantity: int, price: str
) -> None:
    """Add a new product to the inventory."""
    handler = AddProductHandler(json_services().ledger)

    try:
        dto = handler.handle(
            inventory_name=inventory_name,
            item_name=item_name,
            weight_per_item=weight,
            quantity=quantity,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {dto.id} '{dto.item_name}' added at {dto.inventory_name}: "
        f"{dto.quantity} x {dto.price} ({dto.total_weight})"
    )


@click.command("list")
@click.option("--search", default=None, help="Match item name or location.")
@click.option("--in-stock", is_flag=True, default=False, help="Hide products with no stock.")
def product_list(search: str | None, in_stock: bool) -> None:
    """List products, most recently added first."""
    handler = ShowInventoryHandler(json_services().ledger)
    products = handler.handle(search=search, in_stock_only=in_stock)

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<32} {'Item':<22} {'Location':<14} {'Qty':>6} "
        f"{'Weight':>11} {'Price':>10}"
    )
    click.echo("-" * 100)
    for p in products:
        click.echo(
            f"{p.id:<32} {p.item_name:<22} {p.inventory_name:<14} {p.quantity:>6} "
            f"{p.total_weight:>11} {p.price:>10}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--inventory", "inventory_name", default=None, help="New inventory location.")
@click.option("--name", "item_name", default=None, help="New item name.")
@click.option("--weight", default=None, help="New weight per item in kg.")
@click.option("--quantity", default=None, type=int, help="Corrected quantity (not logged).")
@click.option("--price", default=None, help="New unit price.")
def product_update(
    product_id: str,
    inventory_name: str | None,
    item_name: str | None,
    weight: str | None,
    quantity: int | None,
    price: str | None,
) -> None:
    """Edit a product's details."""
    handler = UpdateProductHandler(json_services().ledger)

    try:
        dto = handler.handle(
            product_id,
            inventory_name=inventory_name,
            item_name=item_name,
            weight_per_item=weight,
            quantity=quantity,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated: {dto.item_name}, {dto.quantity} x {dto.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this item?")
def product_delete(product_id: str) -> None:
    """Delete a product (its history is kept)."""
    handler = DeleteProductHandler(json_services().ledger)

    try:
        name = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} '{name}' deleted.")
