"""Application service: Show Order use case (query)."""

from __future__ import annotations

from petstore.application.dto import OrderDTO, OrderLineDTO
from petstore.domain.exceptions import EntityNotFoundError
from petstore.domain.model.order import Order
from petstore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)


def order_to_dto(order: Order) -> OrderDTO:
    card_type = order.credit_card_type
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_login=order.customer.login,
        order_date=order.order_date.strftime("%Y-%m-%d %H:%M") if order.order_date else "",
        lines=[
            OrderLineDTO(
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=_money(line.unit_price),
                sub_total=_money(line.sub_total),
            )
            for line in order.order_lines or []
        ],
        total=_money(order.total),
        credit_card_type=card_type.value if card_type else None,
        credit_card_number=_mask(order.credit_card_number),
    )


def _money(amount: float) -> str:
    return f"${amount:.2f}"


def _mask(number: str | None) -> str:
    if not number:
        return ""
    return "*" * max(len(number) - 4, 0) + number[-4:]
