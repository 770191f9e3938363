"""CLI commands for orders: the order list, the create view and the edit view."""

from __future__ import annotations

import click

from orderdesk.application.order_editor import OrderEditor
from orderdesk.application.order_list import OrderListView
from orderdesk.application.outcome import Outcome, View
from orderdesk.infrastructure.bootstrap import order_repository, product_repository
from orderdesk.infrastructure.cli.rendering import (
    display_editor,
    display_order_rows,
    parse_pairs,
    require_ok,
)
from orderdesk.infrastructure.config import Settings


def _loaded_list(settings: Settings) -> OrderListView:
    view = OrderListView(order_repository(settings))
    require_ok(view.load())
    return view


def _navigate(settings: Settings, outcome: Outcome) -> None:
    if outcome.next_view is View.ORDER_LIST:
        click.echo()
        display_order_rows(_loaded_list(settings).rows)


@click.command("list")
@click.pass_obj
def order_list(settings: Settings) -> None:
    """List orders with their product counts and totals."""
    display_order_rows(_loaded_list(settings).rows)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show an existing order and its lines."""
    editor = OrderEditor(order_repository(settings), product_repository(settings), order_id)
    require_ok(editor.load())
    display_editor(editor.snapshot())


@click.command("create")
@click.option("--number", "order_number", required=True, help="Order number.")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Product as 'ProductId:Qty'. Repeat or comma-separate for more.",
)
@click.pass_obj
def order_create(settings: Settings, order_number: str, items: tuple[str, ...]) -> None:
    """Create a new order from catalog products."""
    specs = parse_pairs(items, "ProductId")

    editor = OrderEditor(order_repository(settings), product_repository(settings))
    require_ok(editor.load())
    require_ok(editor.set_order_number(order_number))
    for product_id, qty in specs:
        require_ok(editor.add_line(product_id, qty))

    display_editor(editor.snapshot())
    outcome = require_ok(editor.save())

    click.echo()
    click.echo(f"Order #{outcome.value} '{editor.order_number}' created.")
    _navigate(settings, outcome)


@click.command("edit")
@click.option("--id", "order_id", required=True, help="Order ID to edit.")
@click.option(
    "--set", "changes", multiple=True,
    help="New quantity as 'LineId:Qty'. Repeat or comma-separate for more.",
)
@click.pass_obj
def order_edit(settings: Settings, order_id: str, changes: tuple[str, ...]) -> None:
    """Change line quantities of an order and save every line."""
    specs = parse_pairs(changes, "LineId")

    view = _loaded_list(settings)
    require_ok(view.edit_target(order_id))

    editor = OrderEditor(order_repository(settings), product_repository(settings), order_id)
    require_ok(editor.load())
    for line_id, qty in specs:
        require_ok(editor.set_quantity(line_id, qty))

    display_editor(editor.snapshot())
    outcome = require_ok(editor.save())

    click.echo()
    click.echo(f"Order #{order_id} saved.")
    _navigate(settings, outcome)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status", required=True,
    help="1/pending, 2/in-progress or 3/completed.",
)
@click.pass_obj
def order_status(settings: Settings, order_id: str, status: str) -> None:
    """Change an order's status (completed orders are locked)."""
    view = _loaded_list(settings)
    outcome = require_ok(view.change_status(order_id, status))
    click.echo(f"Order #{order_id} is now {outcome.value.label}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def order_delete(settings: Settings, order_id: str, yes: bool) -> None:
    """Delete an order (completed orders are locked)."""
    view = _loaded_list(settings)
    if not yes:
        click.confirm("Are you sure you want to delete this order?", abort=True)
    require_ok(view.delete(order_id))
    click.echo(f"Order #{order_id} deleted.")
