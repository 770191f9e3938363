"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from orderdesk.application.product_catalog import ProductCatalogManager
from orderdesk.infrastructure.bootstrap import product_repository
from orderdesk.infrastructure.cli.rendering import display_products, require_ok
from orderdesk.infrastructure.config import Settings


def _manager(settings: Settings) -> ProductCatalogManager:
    manager = ProductCatalogManager(product_repository(settings))
    require_ok(manager.load())
    return manager


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    display_products(_manager(settings).products)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 9.50).")
@click.pass_obj
def product_add(settings: Settings, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    manager = _manager(settings)
    manager.form.name = name
    manager.form.unit_price = price

    outcome = require_ok(manager.save())
    click.echo(outcome.message)
    display_products(manager.products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name (defaults to the current one).")
@click.option("--price", default=None, help="New unit price (defaults to the current one).")
@click.pass_obj
def product_update(
    settings: Settings, product_id: str, name: str | None, price: str | None
) -> None:
    """Update a product's name and/or unit price."""
    manager = _manager(settings)
    require_ok(manager.edit(product_id))
    if name is not None:
        manager.form.name = name
    if price is not None:
        manager.form.unit_price = price

    outcome = require_ok(manager.save())
    click.echo(outcome.message)
    display_products(manager.products)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str, yes: bool) -> None:
    """Delete a product from the catalog."""
    manager = _manager(settings)
    if not yes:
        click.confirm("Are you sure you want to delete this product?", abort=True)
    require_ok(manager.delete(product_id))
    click.echo(f"Product #{product_id} deleted.")
    display_products(manager.products)
