"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from petstore.domain.model.customer import (
    ConstantTimePasswordMatcher,
    PasswordMatcher,
    PlainTextPasswordMatcher,
)
from petstore.infrastructure.config import Settings
from petstore.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from petstore.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from petstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def category_repository(settings: Settings) -> JsonCategoryRepository:
    return JsonCategoryRepository(settings.categories_file, settings.orders_file)


def customer_repository(settings: Settings) -> JsonCustomerRepository:
    return JsonCustomerRepository(settings.customers_file, settings.orders_file)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(
        settings.orders_file,
        customer_repo=customer_repository(settings),
        category_repo=category_repository(settings),
    )


def password_matcher(settings: Settings) -> PasswordMatcher:
    if settings.password_matcher == "constant-time":
        return ConstantTimePasswordMatcher()
    return PlainTextPasswordMatcher()
