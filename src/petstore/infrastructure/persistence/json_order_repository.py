"""JSON-file-backed implementation of OrderRepository.

Orders reference their customer and their lines' products by id; both are
resolved eagerly through the other repositories when an order is loaded.
The order lines live inside the order record and go away with it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from petstore.domain import constraints
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from petstore.domain.model.order import Order, OrderLine
from petstore.domain.model.value_objects import Address, CreditCard, CreditCardType
from petstore.domain.repository.category_repository import CategoryRepository
from petstore.domain.repository.customer_repository import CustomerRepository
from petstore.domain.repository.order_repository import OrderRepository
from petstore.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = ("street1", "street2", "city", "state", "zipcode", "country")


class JsonOrderRepository(OrderRepository):

    def __init__(
        self,
        file_path: Path,
        customer_repo: CustomerRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._file = JsonFile(file_path)
        self._customer_repo = customer_repo
        self._category_repo = category_repo

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, order: Order) -> None:
        constraints.check(order)
        if order.customer.id is None:
            raise ValidationError(
                f"Customer {order.customer.login!r} must be saved before its orders"
            )
        for line in order.order_lines or []:
            if line.product.id is None:
                raise ValidationError(
                    f"Product {line.product.name!r} must be saved before it is ordered"
                )

        orders = self._file.load()
        if order.id is None:
            order.on_create()
            order.id = self._file.next_id(orders)
        else:
            self._keep_stored_order_date(order, orders)

        self._file.upsert(orders, self._to_raw(order))
        self._file.persist(orders)
        logger.debug("Saved order #%s for %r", order.id, order.customer.login)

    def remove(self, order: Order) -> None:
        orders = [o for o in self._file.load() if o["id"] != order.id]
        self._file.persist(orders)
        logger.debug("Removed order #%s and its lines", order.id)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _keep_stored_order_date(order: Order, orders: list[dict]) -> None:
        """The order date column is not updatable: the stored value wins."""
        for raw in orders:
            if raw["id"] == order.id:
                stored = datetime.fromisoformat(raw["order_date"])
                if order.order_date != stored:
                    logger.warning(
                        "Ignoring change of order #%s date from %s to %s",
                        order.id,
                        stored,
                        order.order_date,
                    )
                    order.order_date = stored
                return
        # an id assigned elsewhere but never persisted here: first save
        if order.order_date is None:
            order.on_create()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        card = order.credit_card
        delivery = order.delivery_address
        return {
            "id": order.id,
            "order_date": order.order_date.isoformat(),  # type: ignore[union-attr]
            "customer_id": order.customer.id,
            "delivery_address": (
                {name: getattr(delivery, name) for name in _ADDRESS_FIELDS}
                if delivery is not None
                else None
            ),
            "credit_card": {
                "number": card.credit_card_number,
                "type": card.credit_card_type.value if card.credit_card_type else None,
                "exp_date": card.credit_card_exp_date,
            },
            "order_lines": [
                {
                    "product_id": line.product.id,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                }
                for line in order.order_lines or []
            ],
        }

    def _to_domain(self, raw: dict) -> Order:
        customer = self._customer_repo.get_by_id(raw["customer_id"])
        if customer is None:
            raise EntityNotFoundError(
                f"Order #{raw['id']} references missing customer #{raw['customer_id']}"
            )

        lines = []
        for item in raw["order_lines"]:
            product = self._category_repo.get_product_by_id(item["product_id"])
            if product is None:
                raise EntityNotFoundError(
                    f"Order #{raw['id']} references missing product #{item['product_id']}"
                )
            lines.append(
                OrderLine(
                    product=product,
                    quantity=item["quantity"],
                    unit_price=item["unit_price"],
                )
            )

        card = raw["credit_card"]
        delivery = raw.get("delivery_address")
        return Order(
            id=raw["id"],
            customer=customer,
            order_lines=lines or None,
            delivery_address=Address(**delivery) if delivery is not None else None,
            credit_card=CreditCard(
                credit_card_number=card["number"],
                credit_card_type=CreditCardType(card["type"]) if card["type"] else None,
                credit_card_exp_date=card["exp_date"],
            ),
            order_date=datetime.fromisoformat(raw["order_date"]),
        )
