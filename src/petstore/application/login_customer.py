"""Application service: Log In use case.

Looks the customer up by login, then lets the entity check the password.
"""

from __future__ import annotations

import logging

from petstore.application.dto import CustomerDTO
from petstore.application.list_customers import customer_to_dto
from petstore.domain.exceptions import EntityNotFoundError
from petstore.domain.model.customer import PasswordMatcher
from petstore.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class LoginCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        password_matcher: PasswordMatcher | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._password_matcher = password_matcher

    def handle(self, login: str, password: str | None) -> CustomerDTO:
        """Return the customer when the credentials are valid.

        Raises EntityNotFoundError for an unknown login and ValidationError
        for an empty or wrong password.
        """
        customer = self._customer_repo.find_by_login(login)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{login}' not found")

        customer.match_password(password, matcher=self._password_matcher)
        logger.info("Customer %r logged in", customer.login)
        return customer_to_dto(customer)
