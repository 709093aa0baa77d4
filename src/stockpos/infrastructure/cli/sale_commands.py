"""CLI commands for selling and viewing invoices."""

from __future__ import annotations

import click

from stockpos.application.checkout import CheckoutHandler
from stockpos.application.dto import InvoiceDTO, SaleItemSpec
from stockpos.application.show_invoices import ListInvoicesHandler, ShowInvoiceHandler
from stockpos.domain.exceptions import DomainException
from stockpos.infrastructure.bootstrap import json_services


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse 'a1b2:3,c3d4:1' into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(SaleItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_invoice(dto: InvoiceDTO) -> None:
    """Shared formatting for displaying an invoice."""
    click.echo(f"Invoice {dto.bill_number}  ({dto.date})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo()
    click.echo(f"  {'Item':<22} {'Qty':>5} {'Weight':>10} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*61}")
    for item in dto.items:
        click.echo(
            f"  {item.item_name:<22} {item.quantity:>5} {item.weight:>10} "
            f"{item.price:>10} {item.total_price:>10}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Items':<22} {dto.total_quantity:>5} {dto.total_weight:>10}")
    click.echo(f"  {'Grand Total':<39} {dto.grand_total:>21}")


@click.command("checkout")
@click.option("--customer", default="", help="Customer name (blank for walk-in).")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def sale_checkout(customer: str, items: str) -> None:
    """Sell items: deducts stock and issues an invoice."""
    specs = _parse_items(items)
    services = json_services()
    handler = CheckoutHandler(services.ledger, services.invoices)

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)


@click.command("list")
@click.option("--search", default=None, help="Match bill number or customer.")
def invoice_list(search: str | None) -> None:
    """List invoices, newest first."""
    handler = ListInvoicesHandler(json_services().invoices)
    invoices = handler.handle(search=search)

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(f"{'Bill':<12} {'Date':<21} {'Customer':<24} {'Qty':>5} {'Total':>12}")
    click.echo("-" * 78)
    for inv in invoices:
        click.echo(
            f"{inv.bill_number:<12} {inv.date:<21} {inv.customer_name:<24} "
            f"{inv.total_quantity:>5} {inv.grand_total:>12}"
        )


@click.command("show")
@click.option("--id", "reference", required=True, help="Invoice ID or bill number.")
def invoice_show(reference: str) -> None:
    """Show one invoice in full."""
    handler = ShowInvoiceHandler(json_services().invoices)

    try:
        dto = handler.handle(reference)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)
