from dataclasses import replace

import click

from orderdesk.infrastructure.bootstrap import close_clients
from orderdesk.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_edit,
    order_list,
    order_show,
    order_status,
)
from orderdesk.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from orderdesk.infrastructure.config import configure_logging, load_settings


@click.group(invoke_without_command=True)
@click.option("--api-url", default=None, help="Base URL of the order service.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every request.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, verbose: bool) -> None:
    """orderdesk: client for the order service.

    Without a command, shows the order list.
    """
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    if api_url:
        settings = replace(settings, api_url=api_url)

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings
    ctx.call_on_close(close_clients)

    if ctx.invoked_subcommand is None:
        ctx.invoke(order_list)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_edit)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
