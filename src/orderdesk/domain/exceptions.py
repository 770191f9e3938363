"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the
application layer can catch them uniformly and turn them into outcomes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ServiceError(DomainException):
    """The remote order service failed, was unreachable or sent garbage."""
