"""CLI commands for the Customer aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from petstore.application.dto import AddressSpec, CustomerSpec
from petstore.application.list_customers import ListCustomersHandler
from petstore.application.login_customer import LoginCustomerHandler
from petstore.application.register_customer import RegisterCustomerHandler
from petstore.application.update_customer import UpdateCustomerHandler
from petstore.domain.exceptions import DomainException
from petstore.infrastructure.bootstrap import customer_repository, password_matcher
from petstore.infrastructure.config import Settings

_BIRTH_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("register")
@click.option("--login", required=True, help="Login (letters only, max 10).")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.option("--firstname", required=True)
@click.option("--lastname", required=True)
@click.option("--email", default=None)
@click.option("--telephone", default=None)
@click.option("--birth-date", type=_BIRTH_DATE, default=None, help="Date of birth as YYYY-MM-DD.")
@click.option("--street", "street1", required=True)
@click.option("--city", required=True)
@click.option("--zipcode", required=True)
@click.option("--country", required=True)
@click.option("--state", default=None)
@click.pass_obj
def customer_register(
    settings: Settings,
    login: str,
    password: str,
    firstname: str,
    lastname: str,
    email: str | None,
    telephone: str | None,
    birth_date: datetime | None,
    street1: str,
    city: str,
    zipcode: str,
    country: str,
    state: str | None,
) -> None:
    """Register a new customer."""
    spec = CustomerSpec(
        login=login,
        password=password,
        firstname=firstname,
        lastname=lastname,
        email=email,
        telephone=telephone,
        date_of_birth=birth_date.date() if birth_date else None,
        address=AddressSpec(
            street1=street1, city=city, zipcode=zipcode, country=country, state=state
        ),
    )
    handler = RegisterCustomerHandler(customer_repo=customer_repository(settings))

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{dto.id} '{dto.login}' registered (age {dto.age})")


@click.command("update")
@click.option("--login", required=True, help="Login of the customer to update.")
@click.option("--password", default=None)
@click.option("--firstname", default=None)
@click.option("--lastname", default=None)
@click.option("--email", default=None)
@click.option("--telephone", default=None)
@click.option("--birth-date", type=_BIRTH_DATE, default=None, help="Date of birth as YYYY-MM-DD.")
@click.pass_obj
def customer_update(
    settings: Settings,
    login: str,
    password: str | None,
    firstname: str | None,
    lastname: str | None,
    email: str | None,
    telephone: str | None,
    birth_date: datetime | None,
) -> None:
    """Change a customer's details.  The login itself cannot change."""
    changes = {
        name: value
        for name, value in (
            ("password", password),
            ("firstname", firstname),
            ("lastname", lastname),
            ("email", email),
            ("telephone", telephone),
            ("date_of_birth", birth_date.date() if birth_date else None),
        )
        if value is not None
    }
    if not changes:
        raise click.UsageError("Nothing to update.")

    handler = UpdateCustomerHandler(customer_repo=customer_repository(settings))

    try:
        dto = handler.handle(login, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{dto.login}' updated (age {dto.age})")


@click.command("login")
@click.option("--login", required=True)
@click.option("--password", required=True, prompt=True, hide_input=True)
@click.pass_obj
def customer_login(settings: Settings, login: str, password: str) -> None:
    """Check a customer's credentials."""
    handler = LoginCustomerHandler(
        customer_repo=customer_repository(settings),
        password_matcher=password_matcher(settings),
    )

    try:
        dto = handler.handle(login=login, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome {dto.firstname} {dto.lastname}")


@click.command("list")
@click.pass_obj
def customer_list(settings: Settings) -> None:
    """List all customers."""
    customers = ListCustomersHandler(customer_repo=customer_repository(settings)).handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Login':<10} {'Name':<30} {'Age':>4}")
    click.echo("-" * 53)
    for c in customers:
        age = "" if c.age is None else str(c.age)
        click.echo(f"{c.id:<6} {c.login:<10} {c.firstname + ' ' + c.lastname:<30} {age:>4}")
