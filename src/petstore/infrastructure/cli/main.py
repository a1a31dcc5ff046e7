import logging

import click
import pydantic

from petstore.infrastructure.cli.category_commands import (
    category_add,
    category_add_product,
    category_list,
    category_show,
)
from petstore.infrastructure.cli.customer_commands import (
    customer_list,
    customer_login,
    customer_register,
    customer_update,
)
from petstore.infrastructure.cli.order_commands import order_create, order_list, order_show
from petstore.infrastructure.config import load_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Petstore — catalog, customers and orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_settings()
    except pydantic.ValidationError as exc:
        raise click.UsageError(f"Invalid PETSTORE_* environment: {exc}")


@cli.group()
def category() -> None:
    """Manage the catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_add_product)
category.add_command(category_list)
category.add_command(category_show)
customer.add_command(customer_list)
customer.add_command(customer_login)
customer.add_command(customer_register)
customer.add_command(customer_update)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
