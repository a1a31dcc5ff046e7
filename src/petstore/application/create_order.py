"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Customer
and Product lookup + Order creation).
"""

from __future__ import annotations

import logging

from petstore.application.dto import AddressSpec, CreditCardSpec, OrderDTO, OrderItemSpec
from petstore.application.list_customers import address_from_spec
from petstore.application.show_order import order_to_dto
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from petstore.domain.model.category import Product
from petstore.domain.model.order import Order, OrderLine
from petstore.domain.model.value_objects import CreditCard, CreditCardType
from petstore.domain.repository.category_repository import CategoryRepository
from petstore.domain.repository.customer_repository import CustomerRepository
from petstore.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._category_repo = category_repo

    def handle(
        self,
        login: str,
        item_specs: list[OrderItemSpec],
        credit_card: CreditCardSpec,
        delivery_address: AddressSpec | None = None,
    ) -> OrderDTO:
        """Place an order for the customer *login*.

        Steps:
        1. Resolve the customer (fail if not found).
        2. Resolve each product through its category (fail if not found).
        3. Build the Order; delivery goes to the home address by default.
        4. Persist (the repository stamps the order date) and return a DTO.
        """
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        customer = self._customer_repo.find_by_login(login)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{login}' not found")

        address = (
            address_from_spec(delivery_address)
            if delivery_address is not None
            else customer.home_address.copy()
        )
        order = Order.create(
            customer=customer,
            credit_card=self._credit_card(credit_card),
            delivery_address=address,
        )

        for spec in item_specs:
            order.add_order_line(
                OrderLine(
                    product=self._find_product(spec.category_name, spec.product_name),
                    quantity=spec.quantity,
                    unit_price=spec.unit_price,
                )
            )

        self._order_repo.save(order)
        logger.info(
            "Created order #%s for %r, total %.2f", order.id, customer.login, order.total
        )
        return order_to_dto(order)

    # --- Helpers --------------------------------------------------------------

    def _find_product(self, category_name: str, product_name: str) -> Product:
        category = self._category_repo.find_by_name(category_name)
        if category is None:
            raise EntityNotFoundError(f"Category '{category_name}' not found")
        for product in category.products or []:
            if product.name == product_name:
                return product
        raise EntityNotFoundError(
            f"Product '{product_name}' not found in category '{category_name}'"
        )

    @staticmethod
    def _credit_card(spec: CreditCardSpec) -> CreditCard:
        try:
            card_type = CreditCardType[spec.card_type.upper()]
        except KeyError as exc:
            allowed = ", ".join(t.name for t in CreditCardType)
            raise ValidationError(
                f"Unknown credit card type {spec.card_type!r} (expected one of {allowed})"
            ) from exc
        return CreditCard(
            credit_card_number=spec.number,
            credit_card_type=card_type,
            credit_card_exp_date=spec.exp_date,
        )
