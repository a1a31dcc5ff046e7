"""Application service: Register Customer use case."""

from __future__ import annotations

import logging

from petstore.application.dto import CustomerDTO, CustomerSpec
from petstore.application.list_customers import address_from_spec, customer_to_dto
from petstore.domain.exceptions import ValidationError
from petstore.domain.model.customer import Customer
from petstore.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, spec: CustomerSpec) -> CustomerDTO:
        """Create a customer account.  Logins are unique.

        Field constraints (lengths, login and e-mail formats) are checked
        by the repository when the customer is saved.
        """
        if self._customer_repo.find_by_login(spec.login) is not None:
            raise ValidationError(f"Login '{spec.login}' is already taken")

        customer = Customer.create(
            firstname=spec.firstname,
            lastname=spec.lastname,
            login=spec.login,
            password=spec.password,
            email=spec.email,
            address=address_from_spec(spec.address),
        )
        customer.telephone = spec.telephone
        if spec.date_of_birth is not None:
            customer.date_of_birth = spec.date_of_birth

        self._customer_repo.save(customer)
        logger.info("Registered customer #%s %r", customer.id, customer.login)
        return customer_to_dto(customer)
