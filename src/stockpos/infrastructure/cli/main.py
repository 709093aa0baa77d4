import click
from dotenv import find_dotenv, load_dotenv

from stockpos.application.show_dashboard import ShowDashboardHandler
from stockpos.infrastructure.bootstrap import in_memory_services, json_services, seed_demo_data
from stockpos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from stockpos.infrastructure.cli.sale_commands import invoice_list, invoice_show, sale_checkout
from stockpos.infrastructure.cli.stock_commands import stock_adjust, stock_history
from stockpos.infrastructure.cli.user_commands import (
    user_add,
    user_delete,
    user_list,
    user_update,
)
from stockpos.infrastructure.config import Settings
from stockpos.infrastructure.logging_config import configure_logging, verbosity_to_level


@click.group()
@click.option("-v", "--verbose", count=True, help="Log INFO (-v) or DEBUG (-vv) messages.")
def cli(verbose: int) -> None:
    """StockPOS: inventory and point of sale."""
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings.from_env()
    configure_logging(verbosity_to_level(verbose, default=settings.log_level))


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock and read the history log."""


@cli.group()
def sale() -> None:
    """Sell items."""


@cli.group()
def invoice() -> None:
    """View invoices."""


@cli.group()
def user() -> None:
    """Manage the user directory."""


@cli.command("dashboard")
def dashboard() -> None:
    """Show headline numbers for stock and sales."""
    services = json_services()
    summary = ShowDashboardHandler(
        services.ledger,
        services.invoices,
        low_stock_threshold=services.settings.low_stock_threshold,
    ).handle()

    click.echo(f"{'Total products':<20} {summary.total_products:>14}")
    click.echo(f"{'Total stock weight':<20} {str(summary.total_stock_weight):>14}")
    click.echo(f"{'Total revenue':<20} {str(summary.total_revenue):>14}")
    click.echo(f"{'Low stock alerts':<20} {summary.low_stock_count:>14}")
    click.echo(f"{'Sales today':<20} {summary.sales_today:>14}")


@cli.command("seed")
def seed() -> None:
    """Load the starter catalogue and staff list into the data directory."""
    services = json_services()
    if services.ledger.list_products():
        raise click.ClickException("Data directory already has products; not seeding.")
    seed_demo_data(services)
    click.echo(f"Seeded demo data into {services.settings.data_dir}")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, type=int, show_default=True)
@click.option("--seed/--no-seed", "with_seed", default=False, help="Start with demo data.")
def serve(host: str, port: int, with_seed: bool) -> None:
    """Run the HTTP API with in-memory state."""
    from stockpos.infrastructure.web.app import create_app

    services = in_memory_services()
    if with_seed:
        seed_demo_data(services)
    create_app(services).run(host=host, port=port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
stock.add_command(stock_adjust)
stock.add_command(stock_history)
sale.add_command(sale_checkout)
invoice.add_command(invoice_list)
invoice.add_command(invoice_show)
user.add_command(user_add)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_update)
