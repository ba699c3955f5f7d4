"""Domain-level exceptions.

All contract violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages,
while callers that care can still branch on the specific kind.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class DuplicateKeyError(DomainException):
    """An entity with the same ID is already stored."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidValueError(ValidationError):
    """A value falls outside its allowed range (e.g. negative stock)."""


class InvalidArgumentError(ValidationError):
    """A required argument is missing or of the wrong kind."""


class StorageError(DomainException):
    """Base class for failures of the backing storage."""


class StorageIOError(StorageError):
    """The storage medium could not be read or written."""


class DeserializationError(StorageError):
    """Stored content does not match the expected format."""
