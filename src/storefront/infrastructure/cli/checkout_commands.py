"""CLI command for checking out the cart."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutForm
from storefront.domain.exceptions import CheckoutValidationError, DomainException
from storefront.domain.model.order import PaymentMethod
from storefront.infrastructure.bootstrap import (
    cart_store,
    order_handoff_repository,
    shipping_preference_repository,
)


@click.command("checkout")
@click.option("--name", default=None, help="Full name (saved value if omitted).")
@click.option("--address", default=None, help="Shipping address.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--email", default=None, help="Email address.")
@click.option(
    "--payment",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option(
    "--save-info/--no-save-info",
    default=False,
    help="Remember shipping details for the next checkout.",
)
def checkout(
    name: str | None,
    address: str | None,
    phone: str | None,
    email: str | None,
    payment: str,
    save_info: bool,
) -> None:
    """Place an order with the current cart."""
    handler = CheckoutHandler(
        cart_store=cart_store(),
        handoff_repo=order_handoff_repository(),
        preference_repo=shipping_preference_repository(),
    )

    saved = handler.saved_shipping_info()
    form = CheckoutForm(
        name=name if name is not None else (saved.name if saved else ""),
        address=address if address is not None else (saved.address if saved else ""),
        phone=phone if phone is not None else (saved.phone if saved else ""),
        email=email if email is not None else (saved.email if saved else ""),
        payment_method=payment,
        save_info=save_info,
    )

    try:
        order = handler.handle(form)
    except CheckoutValidationError as exc:
        for field, message in sorted(exc.field_errors.items()):
            click.echo(f"  {field}: {message}", err=True)
        raise click.ClickException("Please correct the fields above.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order placed for {order.shipping_info.name}  ({order.item_count} item(s))")
    click.echo(f"Total: {order.total}  Payment: {order.payment_method.label}")
    click.echo("Run 'storefront order pdf' or 'storefront order share' for a receipt.")
