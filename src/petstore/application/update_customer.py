"""Application service: Update Customer use case."""

from __future__ import annotations

import logging
from typing import Any

from petstore.application.dto import AddressSpec, CustomerDTO
from petstore.application.list_customers import address_from_spec, customer_to_dto
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from petstore.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)

# login is the customer's identity and cannot change
UPDATABLE_FIELDS = frozenset(
    {"password", "firstname", "lastname", "telephone", "email", "date_of_birth", "address"}
)


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, login: str, /, **changes: Any) -> CustomerDTO:
        """Apply *changes* to the customer with this login and save it.

        The age is recomputed by the repository on save, so a new
        ``date_of_birth`` shows up in the returned DTO.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update customer field(s): {', '.join(sorted(unknown))}"
            )

        customer = self._customer_repo.find_by_login(login)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{login}' not found")

        for name, value in changes.items():
            if name == "address":
                if not isinstance(value, AddressSpec):
                    raise ValidationError("address must be an AddressSpec")
                customer.home_address = address_from_spec(value)
            else:
                setattr(customer, name, value)

        self._customer_repo.save(customer)
        logger.info("Updated customer %r (%s)", login, ", ".join(sorted(changes)))
        return customer_to_dto(customer)
