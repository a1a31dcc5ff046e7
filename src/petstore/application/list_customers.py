"""Application service: List Customers use case (query)."""

from __future__ import annotations

from petstore.application.dto import AddressSpec, CustomerDTO
from petstore.domain.model.customer import Customer
from petstore.domain.model.value_objects import Address
from petstore.domain.repository.customer_repository import CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        customers = sorted(self._customer_repo.find_all(), key=lambda c: c.login)
        return [customer_to_dto(c) for c in customers]


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,  # type: ignore[arg-type]
        login=customer.login,
        firstname=customer.firstname,
        lastname=customer.lastname,
        email=customer.email,
        telephone=customer.telephone,
        age=customer.age,
        city=customer.home_address.city,
        country=customer.home_address.country,
    )


def address_from_spec(spec: AddressSpec) -> Address:
    return Address(
        street1=spec.street1,
        street2=spec.street2,
        city=spec.city,
        state=spec.state,
        zipcode=spec.zipcode,
        country=spec.country,
    )
