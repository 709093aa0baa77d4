"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and report them.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a field invariant was violated."""


class NotFoundError(DomainException):
    """A referenced entity does not exist."""


class ConflictError(DomainException):
    """The request is well-formed but conflicts with current state."""


class InsufficientStockError(ConflictError):
    """A stock decrement would drive a product's quantity below zero."""


class OutOfStockError(ConflictError):
    """A cart line cannot grow beyond the product's available stock."""


class EmptyCartError(ConflictError):
    """Checkout was attempted with no lines in the cart."""
