"""Application service: List Orders use case (query)."""

from __future__ import annotations

from petstore.application.dto import OrderDTO
from petstore.application.show_order import order_to_dto
from petstore.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, login: str | None = None) -> list[OrderDTO]:
        """Return all orders, or only those of the customer *login*."""
        orders = self._order_repo.find_all()
        if login is not None:
            orders = [o for o in orders if o.customer.login == login]
        return [order_to_dto(o) for o in sorted(orders, key=lambda o: o.id)]
