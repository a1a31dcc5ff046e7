"""Declarative field constraints for the domain model.

Entities do not enforce their structural constraints (lengths, required
fields, patterns) when they are mutated.  The bounds are declared here, once,
and checked by the persistence collaborator before an entity is saved:

    violations = validate(customer)   # list of human-readable messages
    check(customer)                   # raises ValidationError if any

Embedded value objects (``nested``) are validated recursively and their
messages are prefixed with the owning field, e.g. ``home_address.city``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from petstore.domain.exceptions import ValidationError
from petstore.domain.model.category import Category, Product
from petstore.domain.model.customer import Customer
from petstore.domain.model.order import Order, OrderLine
from petstore.domain.model.value_objects import Address, CreditCard

LOGIN_PATTERN = re.compile(r"^[a-zA-Z]*$")
EMAIL_PATTERN = re.compile(
    r"^[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FieldConstraint:
    """Constraints on a single attribute.

    ``required`` rejects ``None``; ``not_empty`` also rejects ``""`` and
    empty collections.  Length, value and pattern checks are skipped when
    the value is ``None``.
    """

    name: str
    required: bool = False
    not_empty: bool = False
    min_length: int | None = None
    max_length: int | None = None
    min_value: int | None = None
    pattern: re.Pattern[str] | None = None
    nested: bool = False
    each: bool = False


CONSTRAINTS: dict[type, tuple[FieldConstraint, ...]] = {
    Category: (
        FieldConstraint("name", required=True, min_length=1, max_length=30),
        FieldConstraint("description", not_empty=True),
    ),
    Product: (
        FieldConstraint("name", required=True, min_length=1, max_length=30),
        FieldConstraint("description", required=True, min_length=1, max_length=3000),
        FieldConstraint("category", required=True),
    ),
    Customer: (
        FieldConstraint(
            "login", required=True, min_length=1, max_length=10, pattern=LOGIN_PATTERN
        ),
        FieldConstraint("password", required=True, min_length=1, max_length=10),
        FieldConstraint("firstname", required=True, min_length=2, max_length=50),
        FieldConstraint("lastname", required=True, min_length=2, max_length=50),
        FieldConstraint("email", pattern=EMAIL_PATTERN),
        FieldConstraint("home_address", nested=True),
    ),
    Address: (
        FieldConstraint("street1", required=True, min_length=5, max_length=50),
        FieldConstraint("city", required=True, min_length=2, max_length=50),
        FieldConstraint("zipcode", required=True, min_length=1, max_length=10),
        FieldConstraint("country", required=True, min_length=2, max_length=50),
    ),
    CreditCard: (
        FieldConstraint("credit_card_number", required=True, min_length=1, max_length=30),
        FieldConstraint("credit_card_type", required=True),
        FieldConstraint("credit_card_exp_date", required=True, min_length=1, max_length=5),
    ),
    OrderLine: (
        FieldConstraint("product", required=True),
        FieldConstraint("quantity", required=True, min_value=1),
        FieldConstraint("unit_price", required=True, min_value=0),
    ),
    Order: (
        FieldConstraint("customer", required=True),
        FieldConstraint("delivery_address", nested=True),
        FieldConstraint("credit_card", nested=True),
        FieldConstraint("order_lines", nested=True, each=True),
    ),
}


def validate(entity: Any, path: str = "") -> list[str]:
    """Return every constraint violation of *entity* (empty when valid)."""
    violations: list[str] = []
    for constraint in CONSTRAINTS.get(type(entity), ()):
        value = getattr(entity, constraint.name)
        label = f"{path}{constraint.name}"
        violations.extend(_check_field(constraint, value, label))
    return violations


def check(entity: Any) -> None:
    """Raise ValidationError listing all violations of *entity*."""
    violations = validate(entity)
    if violations:
        raise ValidationError(
            f"Invalid {type(entity).__name__}: " + "; ".join(violations)
        )


def _check_field(constraint: FieldConstraint, value: Any, label: str) -> list[str]:
    if value is None:
        if constraint.required or constraint.not_empty:
            return [f"{label} is required"]
        return []

    if constraint.not_empty and len(value) == 0:
        return [f"{label} must not be empty"]

    if constraint.nested:
        if constraint.each:
            found: list[str] = []
            for i, item in enumerate(value):
                found.extend(validate(item, f"{label}[{i}]."))
            return found
        return validate(value, f"{label}.")

    violations: list[str] = []
    if constraint.min_length is not None and len(value) < constraint.min_length:
        violations.append(
            f"{label} must be at least {constraint.min_length} characters"
        )
    if constraint.max_length is not None and len(value) > constraint.max_length:
        violations.append(
            f"{label} must be at most {constraint.max_length} characters"
        )
    if constraint.min_value is not None and value < constraint.min_value:
        violations.append(f"{label} must be at least {constraint.min_value}")
    if constraint.pattern is not None and not constraint.pattern.match(value):
        violations.append(f"{label} has an invalid format")
    return violations
