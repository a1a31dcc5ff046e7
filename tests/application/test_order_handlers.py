"""Integration tests for the order use cases."""

import pytest

from petstore.application.create_order import CreateOrderHandler
from petstore.application.dto import AddressSpec, CreditCardSpec, CustomerSpec, OrderItemSpec
from petstore.application.list_orders import ListOrdersHandler
from petstore.application.register_customer import RegisterCustomerHandler
from petstore.application.show_order import ShowOrderHandler
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from petstore.domain.model.category import Category, Product
from tests.fakes import FakeCategoryRepository, FakeCustomerRepository, FakeOrderRepository

ADDRESS = AddressSpec(street1="1 Microsoft Way", city="Redmond", zipcode="98052", country="USA")
VISA = CreditCardSpec(number="4111111111111111", card_type="VISA", exp_date="12/27")


def _setup() -> tuple[CreateOrderHandler, FakeOrderRepository]:
    customer_repo = FakeCustomerRepository()
    for login in ("bill", "steve"):
        RegisterCustomerHandler(customer_repo).handle(
            CustomerSpec(
                login=login, password="secret", firstname="Bill", lastname="Gates", address=ADDRESS
            )
        )

    fish = Category.create("Fish", "Aquatic animals")
    fish.add_product(Product.create("Koi", "From Japan", fish))
    fish.add_product(Product.create("Goldfish", "From China", fish))
    category_repo = FakeCategoryRepository([fish])

    order_repo = FakeOrderRepository()
    return CreateOrderHandler(order_repo, customer_repo, category_repo), order_repo


class TestCreateOrder:

    def test_creates_order_with_total(self):
        handler, order_repo = _setup()
        dto = handler.handle(
            "bill",
            [OrderItemSpec("Fish", "Koi", 1, 10.5), OrderItemSpec("Fish", "Goldfish", 1, 4.25)],
            VISA,
        )
        assert dto.id == 1
        assert dto.total == "$14.75"
        assert [line.product_name for line in dto.lines] == ["Koi", "Goldfish"]
        assert dto.credit_card_number == "************1111"
        assert dto.credit_card_type == "VISA"

    def test_order_date_stamped_on_save(self):
        handler, order_repo = _setup()
        dto = handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA)
        assert order_repo.get_by_id(dto.id).order_date is not None
        assert dto.order_date != ""

    def test_delivers_to_home_address_by_default(self):
        handler, order_repo = _setup()
        dto = handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA)
        order = order_repo.get_by_id(dto.id)
        assert order.delivery_address == order.customer.home_address
        assert order.delivery_address is not order.customer.home_address

    def test_explicit_delivery_address(self):
        handler, order_repo = _setup()
        other = AddressSpec(street1="10 Downing Street", city="London", zipcode="SW1A", country="UK")
        dto = handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA, other)
        assert order_repo.get_by_id(dto.id).delivery_address.city == "London"

    def test_unknown_customer(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Customer 'larry'"):
            handler.handle("larry", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA)

    def test_unknown_product(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product 'Shark'"):
            handler.handle("bill", [OrderItemSpec("Fish", "Shark", 1, 10.0)], VISA)

    def test_unknown_category(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Category 'Birds'"):
            handler.handle("bill", [OrderItemSpec("Birds", "Parrot", 1, 10.0)], VISA)

    def test_empty_cart_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("bill", [], VISA)

    def test_unknown_card_type_rejected(self):
        handler, _ = _setup()
        card = CreditCardSpec(number="1234", card_type="DINERS", exp_date="12/27")
        with pytest.raises(ValidationError, match="Unknown credit card type"):
            handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, 10.0)], card)

    def test_zero_quantity_rejected_on_save(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="quantity must be at least 1"):
            handler.handle("bill", [OrderItemSpec("Fish", "Koi", 0, 10.0)], VISA)
        assert order_repo.find_all() == []

    def test_negative_price_rejected_on_save(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="unit_price must be at least 0"):
            handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, -10.0)], VISA)
        assert order_repo.find_all() == []


class TestOrderQueries:

    def test_show_order(self):
        handler, order_repo = _setup()
        created = handler.handle("bill", [OrderItemSpec("Fish", "Koi", 2, 5.0)], VISA)
        dto = ShowOrderHandler(order_repo).handle(created.id)
        assert dto.customer_login == "bill"
        assert dto.lines[0].sub_total == "$10.00"

    def test_show_unknown_order(self):
        _, order_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #42 not found"):
            ShowOrderHandler(order_repo).handle(42)

    def test_list_filters_by_customer(self):
        handler, order_repo = _setup()
        handler.handle("bill", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA)
        handler.handle("steve", [OrderItemSpec("Fish", "Koi", 1, 10.0)], VISA)
        handler.handle("bill", [OrderItemSpec("Fish", "Goldfish", 1, 3.0)], VISA)

        assert len(ListOrdersHandler(order_repo).handle()) == 3
        assert [o.id for o in ListOrdersHandler(order_repo).handle("bill")] == [1, 3]
