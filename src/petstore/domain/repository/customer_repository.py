"""Abstract repository for the Customer aggregate.

Implementations must call ``Customer.recompute_age()`` on every customer
they load and after every save.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from petstore.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def find_by_login(self, login: str) -> Customer | None:
        """Return the customer with this exact login, or None."""

    @abstractmethod
    def find_by_login_password(self, login: str, password: str) -> Customer | None:
        """Return the customer matching both login and password, or None."""

    @abstractmethod
    def find_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Validate and persist a new or updated customer.

        Raises DuplicateEntityError when another customer has the same login.
        """

    @abstractmethod
    def remove(self, customer: Customer) -> None:
        """Delete a customer.  Raises EntityInUseError while it has orders."""
