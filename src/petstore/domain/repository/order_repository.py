"""Abstract repository for the Order aggregate.

Implementations call ``Order.on_create()`` before the first save and keep
the stored ``order_date`` on every later save.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from petstore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Validate and persist a new or updated order with its lines."""

    @abstractmethod
    def remove(self, order: Order) -> None:
        """Delete an order together with its lines."""
