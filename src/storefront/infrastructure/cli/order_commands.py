"""CLI commands for the order confirmation step."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.order_confirmation import OrderConfirmationHandler
from storefront.infrastructure.bootstrap import (
    order_handoff_repository,
    receipt_renderer,
    share_base_url,
)

NO_ORDER_MESSAGE = "No recent order found."


def _handler() -> OrderConfirmationHandler:
    return OrderConfirmationHandler(
        handoff_repo=order_handoff_repository(),
        renderer=receipt_renderer(),
        share_base_url=share_base_url(),
    )


@click.command("show")
def order_show() -> None:
    """Show the most recently placed order."""
    dto = _handler().current()
    if dto is None:
        click.echo(NO_ORDER_MESSAGE)
        return

    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Address:  {dto.address}")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("pdf")
@click.option(
    "--out",
    "output_dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write the receipt into.",
)
def order_pdf(output_dir: Path) -> None:
    """Download the receipt of the most recent order as a PDF."""
    handler = _handler()
    if handler.current() is None:
        click.echo(NO_ORDER_MESSAGE)
        return
    path = handler.export_pdf(output_dir)
    if path is None:
        raise click.ClickException(f"Could not write receipt to {output_dir}")
    click.echo(f"Receipt saved to {path}")


@click.command("share")
def order_share() -> None:
    """Print a WhatsApp link with the order summary."""
    link = _handler().share_link()
    if link is None:
        click.echo(NO_ORDER_MESSAGE)
        return
    click.echo(link)


@click.command("done")
def order_done() -> None:
    """Forget the most recent order."""
    _handler().dismiss()
    click.echo("Order confirmation closed.")
