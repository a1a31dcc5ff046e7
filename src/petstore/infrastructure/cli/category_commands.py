"""CLI commands for the Category aggregate and its products."""

from __future__ import annotations

import click

from petstore.application.add_product import AddProductHandler
from petstore.application.create_category import CreateCategoryHandler
from petstore.application.list_categories import ListCategoriesHandler
from petstore.application.show_category import FindCategoryHandler
from petstore.domain.exceptions import DomainException
from petstore.infrastructure.bootstrap import category_repository
from petstore.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Category name (max 30 characters).")
@click.option("--description", required=True, help="Category description.")
@click.pass_obj
def category_add(settings: Settings, name: str, description: str) -> None:
    """Add a new category to the catalog."""
    handler = CreateCategoryHandler(category_repo=category_repository(settings))

    try:
        dto = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("add-product")
@click.option("--category", "category_name", required=True, help="Category name.")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.pass_obj
def category_add_product(
    settings: Settings, category_name: str, name: str, description: str
) -> None:
    """Add a product to a category."""
    handler = AddProductHandler(category_repo=category_repository(settings))

    try:
        dto = handler.handle(category_name=category_name, name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added to '{category_name}'")


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List all categories."""
    categories = ListCategoriesHandler(category_repo=category_repository(settings)).handle()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Products':>8}")
    click.echo("-" * 46)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<30} {len(c.products):>8}")


@click.command("show")
@click.argument("name")
@click.pass_obj
def category_show(settings: Settings, name: str) -> None:
    """Show a category and its products."""
    handler = FindCategoryHandler(category_repo=category_repository(settings))

    try:
        dto = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}'")
    click.echo(dto.description)
    click.echo()
    if not dto.products:
        click.echo("  No products.")
        return
    for p in dto.products:
        click.echo(f"  {p.id:<6} {p.name:<30} {p.description}")
