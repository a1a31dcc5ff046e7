"""Domain-level exceptions.

Everything the petstore rejects is a DomainException, so the CLI can turn
any of them into a one-line error.  Storage-level refusals (a duplicate
login or category name, removing something orders still point at) are
ValidationErrors too: callers fix their input the same way.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or field constraint was violated."""


class DuplicateEntityError(ValidationError):
    """A unique key (category name, customer login) is already taken."""


class EntityInUseError(ValidationError):
    """The entity is still referenced by an order and cannot be removed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
