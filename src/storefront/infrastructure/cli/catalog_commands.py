"""CLI commands for browsing catalogs."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.domain.exceptions import CollaboratorError, DomainException
from storefront.infrastructure.bootstrap import catalog_repository


@click.command("show")
@click.option("--id", "catalog_id", required=True, help="Catalog ID to browse.")
def catalog_show(catalog_id: str) -> None:
    """List the visible items of a catalog."""
    try:
        handler = BrowseCatalogHandler(catalog_repo=catalog_repository())
        view = handler.handle(catalog_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"{exc}. Please try again.")

    click.echo(f"{view.name}")
    if view.description:
        click.echo(view.description)
    click.echo()

    if not view.items:
        click.echo("No items available.")
        return

    click.echo(f"  {'ID':<8} {'Name':<28} {'Price':>10}")
    click.echo(f"  {'-'*48}")
    for item in view.items:
        marker = "*" if item.is_featured else " "
        click.echo(f"{marker} {item.id:<8} {item.name:<28} {item.unit_price:>10}")
