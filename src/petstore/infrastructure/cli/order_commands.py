"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from petstore.application.create_order import CreateOrderHandler
from petstore.application.dto import CreditCardSpec, OrderDTO, OrderItemSpec
from petstore.application.list_orders import ListOrdersHandler
from petstore.application.show_order import ShowOrderHandler
from petstore.domain.exceptions import DomainException
from petstore.infrastructure.bootstrap import (
    category_repository,
    customer_repository,
    order_repository,
)
from petstore.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Fish/Koi:2:15.5,Dogs/Poodle:1:120' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.rsplit(":", 2)
        if len(parts) != 3 or "/" not in parts[0]:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'Category/Product:Qty:Price'."
            )
        path, qty_str, price_str = parts
        category_name, product_name = path.split("/", 1)
        try:
            qty = int(qty_str)
            price = float(price_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity or price in '{entry}'."
            )
        specs.append(
            OrderItemSpec(
                category_name=category_name.strip(),
                product_name=product_name.strip(),
                quantity=qty,
                unit_price=price,
            )
        )
    return specs


@click.command("create")
@click.option("--customer", "login", required=True, help="Customer login.")
@click.option("--items", required=True, help="Items as 'Category/Product:Qty:Price,...'.")
@click.option("--card-number", required=True)
@click.option("--card-type", required=True,
              type=click.Choice(["VISA", "MASTER_CARD", "AMERICAN_EXPRESS"], case_sensitive=False))
@click.option("--card-exp", required=True, help="Expiry date as MM/YY.")
@click.pass_obj
def order_create(
    settings: Settings, login: str, items: str, card_number: str, card_type: str, card_exp: str
) -> None:
    """Place an order, delivered to the customer's home address."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(settings),
        customer_repo=customer_repository(settings),
        category_repo=category_repository(settings),
    )

    try:
        dto = handler.handle(
            login=login,
            item_specs=specs,
            credit_card=CreditCardSpec(number=card_number, card_type=card_type, exp_date=card_exp),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_lines(dto)


@click.command("show")
@click.argument("order_id", type=int)
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show order details."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_login}")
    click.echo(f"Date:     {dto.order_date}")
    click.echo(f"Card:     {dto.credit_card_type} {dto.credit_card_number}")
    _display_lines(dto)


@click.command("list")
@click.option("--customer", "login", default=None, help="Only this customer's orders.")
@click.pass_obj
def order_list(settings: Settings, login: str | None) -> None:
    """List orders."""
    try:
        orders = ListOrdersHandler(order_repo=order_repository(settings)).handle(login=login)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<10} {'Date':<17} {'Total':>10}")
    click.echo("-" * 46)
    for o in orders:
        click.echo(f"{o.id:<6} {o.customer_login:<10} {o.order_date:<17} {o.total:>10}")


def _display_lines(dto: OrderDTO) -> None:
    """Shared formatting for an order's lines."""
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.sub_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")
