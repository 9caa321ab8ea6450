"""Domain-level exceptions.

Every outcome a service can reject with is a subclass of DomainException,
so the HTTP and console adapters can catch them uniformly and map each
kind to their own representation (status code or console message).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed, missing or out of range."""


class EntityNotFoundError(DomainException):
    """A requested entity, or a referenced one, does not exist."""


class ConflictError(DomainException):
    """A uniqueness rule would be violated."""


class DependencyError(DomainException):
    """The entity is still referenced and cannot be removed."""


class StorageError(DomainException):
    """The underlying storage failed in an unclassified way."""
