"""Value Objects embedded in the Customer and Order entities.

They have no identity of their own and live exactly as long as the entity
that owns them.  Unlike the entities, they compare by value.  Field
constraints are declared in ``petstore.domain.constraints`` and checked
when the owning entity is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CreditCardType(Enum):
    VISA = "VISA"
    MASTER_CARD = "MASTER_CARD"
    AMERICAN_EXPRESS = "AMERICAN_EXPRESS"


@dataclass
class Address:
    """Postal address, embedded in Customer (home) and Order (delivery)."""

    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state: str | None = None
    zipcode: str | None = None
    country: str | None = None

    def copy(self) -> Address:
        """Return a detached copy so two owners never share one instance."""
        return Address(
            street1=self.street1,
            street2=self.street2,
            city=self.city,
            state=self.state,
            zipcode=self.zipcode,
            country=self.country,
        )


@dataclass
class CreditCard:
    """Payment instrument attached to an order.

    ``credit_card_exp_date`` is kept as the ``MM/YY`` string the customer
    typed, not parsed into a date.
    """

    credit_card_number: str | None = None
    credit_card_type: CreditCardType | None = None
    credit_card_exp_date: str | None = None
