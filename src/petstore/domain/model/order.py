"""Order aggregate — a customer's purchase.

The Order owns its lines, its delivery address and its credit card.  It
only references its Customer: many orders point at the same customer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from petstore.domain.model.category import Product
from petstore.domain.model.customer import Customer
from petstore.domain.model.value_objects import Address, CreditCard, CreditCardType

logger = logging.getLogger(__name__)


@dataclass
class OrderLine:
    """Quantity of one product at a given unit price."""

    product: Product
    quantity: int
    unit_price: float

    @property
    def sub_total(self) -> float:
        return self.quantity * self.unit_price


@dataclass(eq=False)
class Order:
    """Aggregate root for purchase orders.

    ``order_date`` is left unset by ``create()``; the repository stamps it
    through ``on_create()`` right before the first save and never writes a
    different value afterwards.

    Two orders are equal when they share the customer and the order date,
    whatever their lines, addresses or ids.
    """

    id: int | None
    customer: Customer
    order_lines: list[OrderLine] | None = field(default=None, repr=False)
    delivery_address: Address | None = None
    credit_card: CreditCard = field(default_factory=CreditCard, repr=False)
    order_date: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer: Customer,
        credit_card: CreditCard | None = None,
        delivery_address: Address | None = None,
    ) -> Order:
        return Order(
            id=None,
            customer=customer,
            delivery_address=delivery_address,
            credit_card=credit_card if credit_card is not None else CreditCard(),
        )

    # --- Lifecycle ------------------------------------------------------------

    def on_create(self, now: datetime | None = None) -> None:
        """Pre-persist hook: stamp the order date."""
        self.order_date = now or datetime.now()
        logger.debug("Order for %r dated %s", self.customer.login, self.order_date)

    # --- Mutations ------------------------------------------------------------

    def add_order_line(self, line: OrderLine) -> None:
        if self.order_lines is None:
            self.order_lines = []
        self.order_lines.append(line)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> float:
        # float accumulator, not Decimal: totals may carry binary rounding
        if not self.order_lines:
            return 0.0
        total = 0.0
        for line in self.order_lines:
            total += line.sub_total
        return total

    # --- Credit card pass-through ---------------------------------------------

    @property
    def credit_card_number(self) -> str | None:
        return self.credit_card.credit_card_number

    @credit_card_number.setter
    def credit_card_number(self, value: str | None) -> None:
        self.credit_card.credit_card_number = value

    @property
    def credit_card_type(self) -> CreditCardType | None:
        return self.credit_card.credit_card_type

    @credit_card_type.setter
    def credit_card_type(self, value: CreditCardType | None) -> None:
        self.credit_card.credit_card_type = value

    @property
    def credit_card_exp_date(self) -> str | None:
        return self.credit_card.credit_card_exp_date

    @credit_card_exp_date.setter
    def credit_card_exp_date(self, value: str | None) -> None:
        self.credit_card.credit_card_exp_date = value

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Order):
            return NotImplemented
        return self.customer == other.customer and self.order_date == other.order_date

    def __hash__(self) -> int:
        result = hash(self.order_date) if self.order_date is not None else 0
        return 31 * result + hash(self.customer)
