"""Unit tests for the declarative field constraints."""

import pytest

from petstore.domain import constraints
from petstore.domain.exceptions import ValidationError
from petstore.domain.model.category import Category, Product
from petstore.domain.model.customer import Customer
from petstore.domain.model.order import Order, OrderLine
from petstore.domain.model.value_objects import Address, CreditCard, CreditCardType


def _address(**overrides) -> Address:
    fields = dict(street1="1 Main Street", city="Paris", zipcode="75001", country="France")
    fields.update(overrides)
    return Address(**fields)


def _customer(**overrides) -> Customer:
    fields = dict(
        id=None,
        login="bill",
        password="secret",
        firstname="Bill",
        lastname="Gates",
        email="bill@example.com",
        home_address=_address(),
    )
    fields.update(overrides)
    return Customer(**fields)


def _order(**overrides) -> Order:
    fields = dict(
        id=None,
        customer=_customer(),
        delivery_address=_address(),
        credit_card=CreditCard("4111111111111111", CreditCardType.VISA, "12/27"),
    )
    fields.update(overrides)
    return Order(**fields)


class TestCategoryConstraints:

    def test_valid(self):
        assert constraints.validate(Category(id=None, name="Fish", description="Aquatic")) == []

    def test_name_bounds(self):
        assert constraints.validate(Category(id=None, name="", description="d")) == [
            "name must be at least 1 characters"
        ]
        assert constraints.validate(Category(id=None, name="x" * 31, description="d")) == [
            "name must be at most 30 characters"
        ]

    def test_description_not_empty(self):
        assert constraints.validate(Category(id=None, name="Fish", description="")) == [
            "description must not be empty"
        ]
        assert constraints.validate(Category(id=None, name="Fish", description=None)) == [
            "description is required"
        ]


class TestProductConstraints:

    def test_requires_category(self):
        product = Product(id=None, name="Koi", description="From Japan")
        assert constraints.validate(product) == ["category is required"]

    def test_description_max_length(self):
        category = Category(id=None, name="Fish", description="Aquatic")
        product = Product.create("Koi", "x" * 3001, category)
        assert constraints.validate(product) == [
            "description must be at most 3000 characters"
        ]


class TestCustomerConstraints:

    def test_valid(self):
        assert constraints.validate(_customer()) == []

    def test_login_at_most_10_letters(self):
        assert constraints.validate(_customer(login="abcdefghij")) == []
        assert constraints.validate(_customer(login="abcdefghijk")) == [
            "login must be at most 10 characters"
        ]

    def test_login_pattern(self):
        assert constraints.validate(_customer(login="bill42")) == [
            "login has an invalid format"
        ]

    def test_login_required(self):
        assert constraints.validate(_customer(login=None)) == ["login is required"]

    def test_password_bounds(self):
        assert constraints.validate(_customer(password="")) == [
            "password must be at least 1 characters"
        ]
        assert constraints.validate(_customer(password="x" * 11)) == [
            "password must be at most 10 characters"
        ]

    def test_name_bounds(self):
        assert constraints.validate(_customer(firstname="B", lastname="x" * 51)) == [
            "firstname must be at least 2 characters",
            "lastname must be at most 50 characters",
        ]

    def test_email_optional_but_patterned(self):
        assert constraints.validate(_customer(email=None)) == []
        assert constraints.validate(_customer(email="not-an-email")) == [
            "email has an invalid format"
        ]

    def test_home_address_validated_recursively(self):
        assert constraints.validate(_customer(home_address=_address(city=None, zipcode=""))) == [
            "home_address.city is required",
            "home_address.zipcode must be at least 1 characters",
        ]

    def test_check_raises_with_all_violations(self):
        with pytest.raises(ValidationError, match="Invalid Customer: login .*; password"):
            constraints.check(_customer(login="bill42", password=""))


class TestOrderConstraints:

    def test_valid(self):
        assert constraints.validate(_order()) == []

    def test_empty_credit_card_rejected(self):
        assert constraints.validate(_order(credit_card=CreditCard())) == [
            "credit_card.credit_card_number is required",
            "credit_card.credit_card_type is required",
            "credit_card.credit_card_exp_date is required",
        ]

    def test_delivery_address_optional(self):
        assert constraints.validate(_order(delivery_address=None)) == []

    def test_order_lines_validated(self):
        category = Category(id=1, name="Fish", description="Aquatic")
        koi = Product.create("Koi", "From Japan", category)
        order = _order(order_lines=[
            OrderLine(product=koi, quantity=1, unit_price=10.0),
            OrderLine(product=koi, quantity=0, unit_price=10.0),
        ])
        assert constraints.validate(order) == ["order_lines[1].quantity must be at least 1"]

    def test_unit_price_not_negative(self):
        category = Category(id=1, name="Fish", description="Aquatic")
        koi = Product.create("Koi", "From Japan", category)
        free = _order(order_lines=[OrderLine(product=koi, quantity=1, unit_price=0.0)])
        assert constraints.validate(free) == []
        order = _order(order_lines=[OrderLine(product=koi, quantity=1, unit_price=-0.01)])
        assert constraints.validate(order) == ["order_lines[0].unit_price must be at least 0"]

    def test_customer_required(self):
        assert constraints.validate(_order(customer=None)) == ["customer is required"]


class TestUnconstrainedTypes:

    def test_unknown_type_has_no_violations(self):
        assert constraints.validate(object()) == []
        constraints.check("anything")
