"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and translate them into
their own error responses.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or a business invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested product or order does not exist."""


class InsufficientStockError(DomainException):
    """A requested quantity exceeds availability or the per-line cap."""
