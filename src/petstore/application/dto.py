"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class AddressSpec:
    street1: str
    city: str
    zipcode: str
    country: str
    street2: str | None = None
    state: str | None = None


@dataclass(frozen=True)
class CreditCardSpec:
    number: str
    card_type: str  # CreditCardType member name, e.g. "VISA"
    exp_date: str  # "MM/YY"


@dataclass(frozen=True)
class CustomerSpec:
    """Input: what a new customer fills in on registration."""

    login: str
    password: str
    firstname: str
    lastname: str
    address: AddressSpec
    email: str | None = None
    telephone: str | None = None
    date_of_birth: date | None = None


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one cart entry (product located by category and name)."""

    category_name: str
    product_name: str
    quantity: int
    unit_price: float


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str
    description: str
    products: list[ProductDTO]


@dataclass(frozen=True)
class CustomerDTO:
    id: int
    login: str
    firstname: str
    lastname: str
    email: str | None
    telephone: str | None
    age: int | None
    city: str | None
    country: str | None


@dataclass(frozen=True)
class OrderLineDTO:
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    sub_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_login: str
    order_date: str
    lines: list[OrderLineDTO]
    total: str
    credit_card_type: str | None
    credit_card_number: str  # masked, last four digits only
