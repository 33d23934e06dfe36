import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.catalog_commands import catalog_show
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.order_commands import (
    order_done,
    order_pdf,
    order_share,
    order_show,
)
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront: catalog browsing, cart and checkout."""
    setup_logging(verbose)


@cli.group()
def catalog() -> None:
    """Browse catalogs."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def order() -> None:
    """View and share the placed order."""


# Register subcommands
catalog.add_command(catalog_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
cli.add_command(checkout)
order.add_command(order_done)
order.add_command(order_pdf)
order.add_command(order_share)
order.add_command(order_show)
