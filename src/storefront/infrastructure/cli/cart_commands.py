"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import CollaboratorError, DomainException
from storefront.infrastructure.bootstrap import cart_store, catalog_repository


@click.command("add")
@click.option("--catalog", "catalog_id", required=True, help="Catalog ID.")
@click.option("--item", "item_id", required=True, help="Item ID within the catalog.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(catalog_id: str, item_id: str, quantity: int) -> None:
    """Add an item from a catalog to the cart."""
    try:
        handler = AddToCartHandler(catalog_repo=catalog_repository(), cart_store=cart_store())
        line = handler.handle(catalog_id, item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"{exc}. Please try again.")

    click.echo(f"'{line.name}' now x{line.quantity} in your cart")


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and totals."""
    cart = ShowCartHandler(cart_store()).handle()

    if not cart.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<8} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*61}")
    for line in cart.lines:
        click.echo(
            f"  {line.item_id:<8} {line.name:<24} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Subtotal':<40} {cart.subtotal:>21}")
    click.echo(f"  {'Shipping':<40} {cart.shipping_cost:>21}")
    click.echo(f"  {'Total':<40} {cart.total:>21}")
    click.echo(f"  ({cart.item_count} item(s))")


@click.command("update")
@click.option("--item", "item_id", required=True, help="Item ID in the cart.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(item_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    store = cart_store()
    if store.get_line(item_id) is None:
        raise click.ClickException(f"Item '{item_id}' is not in your cart")

    store.update_quantity(item_id, quantity)
    line = store.get_line(item_id)
    if line is None:
        click.echo(f"Removed '{item_id}' from your cart")
    else:
        click.echo(f"'{line.name}' now x{line.quantity} in your cart")


@click.command("remove")
@click.option("--item", "item_id", required=True, help="Item ID in the cart.")
def cart_remove(item_id: str) -> None:
    """Remove a line from the cart."""
    store = cart_store()
    if store.get_line(item_id) is None:
        raise click.ClickException(f"Item '{item_id}' is not in your cart")
    store.remove_item(item_id)
    click.echo(f"Removed '{item_id}' from your cart")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    cart_store().clear()
    click.echo("Cart emptied.")
