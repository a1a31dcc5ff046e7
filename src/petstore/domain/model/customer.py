"""Customer aggregate — the account holder.

A customer is identified by its login.  Its age is derived from the date
of birth and must be recomputed by the storage collaborator every time the
customer is loaded or saved; it is never stored.
"""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from petstore.domain.exceptions import ValidationError
from petstore.domain.model.value_objects import Address

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Password comparison strategies
# ---------------------------------------------------------------------------


class PasswordMatcher(ABC):
    """Decides whether a candidate password matches the stored one."""

    @abstractmethod
    def matches(self, candidate: str, stored: str | None) -> bool:
        """Return True when *candidate* is accepted for *stored*."""


class PlainTextPasswordMatcher(PasswordMatcher):
    """Exact string equality on plaintext passwords."""

    def matches(self, candidate: str, stored: str | None) -> bool:
        return candidate == stored


class ConstantTimePasswordMatcher(PasswordMatcher):
    """Same outcome as plaintext matching, without the timing side channel."""

    def matches(self, candidate: str, stored: str | None) -> bool:
        if stored is None:
            return False
        return hmac.compare_digest(candidate.encode("utf-8"), stored.encode("utf-8"))


DEFAULT_PASSWORD_MATCHER: PasswordMatcher = PlainTextPasswordMatcher()


def compute_age(date_of_birth: date | None, today: date) -> int | None:
    """Whole years between *date_of_birth* and *today*.

    Compares days of the year rather than (month, day) pairs, so around
    1 March the result can be off by one across leap and non-leap years.
    """
    if date_of_birth is None:
        return None
    adjust = 0
    if today.timetuple().tm_yday < date_of_birth.timetuple().tm_yday:
        adjust = -1
    return today.year - date_of_birth.year + adjust


@dataclass(eq=False)
class Customer:
    """Aggregate root for store customers.

    Use ``Customer.create()`` for new customers.  The ``__init__`` is kept
    simple so repositories can reconstitute persisted customers as-is;
    ``age`` is never passed in and stays ``None`` until ``recompute_age()``.
    """

    id: int | None
    login: str
    password: str = field(repr=False)
    firstname: str
    lastname: str
    telephone: str | None = None
    email: str | None = None
    home_address: Address = field(default_factory=Address)
    date_of_birth: date | None = None
    age: int | None = field(default=None, init=False, compare=False)

    # --- Factory (used for NEW customers only) --------------------------------

    @staticmethod
    def create(
        firstname: str,
        lastname: str,
        login: str,
        password: str,
        email: str | None,
        address: Address,
    ) -> Customer:
        """Create a new customer.

        ``date_of_birth`` starts as today, so the age computes to 0 until
        a real birth date is set.
        """
        return Customer(
            id=None,
            login=login,
            password=password,
            firstname=firstname,
            lastname=lastname,
            email=email,
            home_address=address,
            date_of_birth=date.today(),
        )

    # --- Lifecycle ------------------------------------------------------------

    def recompute_age(self, today: date | None = None) -> int | None:
        """Refresh ``age`` from ``date_of_birth`` and return it.

        Called by repositories after a load and after every save.
        """
        self.age = compute_age(self.date_of_birth, today or date.today())
        return self.age

    # --- Business rules -------------------------------------------------------

    def match_password(
        self,
        candidate: str | None,
        matcher: PasswordMatcher | None = None,
    ) -> None:
        """Check *candidate* against the stored password.

        Returns silently on success, raises ValidationError otherwise.
        """
        if not candidate:
            raise ValidationError("invalid password")
        matcher = matcher or DEFAULT_PASSWORD_MATCHER
        if not matcher.matches(candidate, self.password):
            logger.debug("Password mismatch for customer %r", self.login)
            raise ValidationError("passwords don't match")

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Customer):
            return NotImplemented
        return self.login == other.login

    def __hash__(self) -> int:
        return hash(self.login)
