"""JSON-file-backed implementation of CustomerRepository.

``age`` is never written to the file: every loaded or saved customer gets
it recomputed from ``date_of_birth``.

Logins are unique, and a customer who still has orders cannot be removed.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from petstore.domain import constraints
from petstore.domain.exceptions import DuplicateEntityError, EntityInUseError
from petstore.domain.model.customer import Customer
from petstore.domain.model.value_objects import Address
from petstore.domain.repository.customer_repository import CustomerRepository
from petstore.infrastructure.persistence.json_file import JsonFile, OrderReferences

logger = logging.getLogger(__name__)

_ADDRESS_FIELDS = ("street1", "street2", "city", "state", "zipcode", "country")


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path, orders_file: Path) -> None:
        self._file = JsonFile(file_path)
        self._orders = OrderReferences(orders_file)

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._find_first(lambda raw: raw["id"] == customer_id)

    def find_by_login(self, login: str) -> Customer | None:
        return self._find_first(lambda raw: raw["login"] == login)

    def find_by_login_password(self, login: str, password: str) -> Customer | None:
        return self._find_first(
            lambda raw: raw["login"] == login and raw["password"] == password
        )

    def find_all(self) -> list[Customer]:
        return [self._load(raw) for raw in self._file.load()]

    def save(self, customer: Customer) -> None:
        constraints.check(customer)

        customers = self._file.load()
        for raw in customers:
            if raw["login"] == customer.login and raw["id"] != customer.id:
                raise DuplicateEntityError(f"Login '{customer.login}' is already taken")
        if customer.id is None:
            customer.id = self._file.next_id(customers)
        self._file.upsert(customers, self._to_raw(customer))
        self._file.persist(customers)

        customer.recompute_age()
        logger.debug("Saved customer #%s %r", customer.id, customer.login)

    def remove(self, customer: Customer) -> None:
        if customer.id is not None and customer.id in self._orders.customer_ids():
            raise EntityInUseError(
                f"Customer '{customer.login}' still has orders and cannot be removed"
            )
        customers = [c for c in self._file.load() if c["id"] != customer.id]
        self._file.persist(customers)
        logger.debug("Removed customer #%s %r", customer.id, customer.login)

    # --- Helpers --------------------------------------------------------------

    def _find_first(self, predicate) -> Customer | None:
        for raw in self._file.load():
            if predicate(raw):
                return self._load(raw)
        return None

    def _load(self, raw: dict) -> Customer:
        customer = self._to_domain(raw)
        customer.recompute_age()
        return customer

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "login": customer.login,
            "password": customer.password,
            "firstname": customer.firstname,
            "lastname": customer.lastname,
            "telephone": customer.telephone,
            "email": customer.email,
            "home_address": {
                name: getattr(customer.home_address, name) for name in _ADDRESS_FIELDS
            },
            "date_of_birth": (
                customer.date_of_birth.isoformat() if customer.date_of_birth else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        dob = raw.get("date_of_birth")
        return Customer(
            id=raw["id"],
            login=raw["login"],
            password=raw["password"],
            firstname=raw["firstname"],
            lastname=raw["lastname"],
            telephone=raw.get("telephone"),
            email=raw.get("email"),
            home_address=Address(**raw.get("home_address") or {}),
            date_of_birth=date.fromisoformat(dob) if dob else None,
        )
