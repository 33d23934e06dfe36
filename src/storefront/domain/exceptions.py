"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Storage and collaborator failures are deliberately *not* DomainExceptions:
the application layer catches and logs them instead of surfacing them.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on an empty cart."""


class CheckoutValidationError(ValidationError):
    """One or more checkout form fields are invalid.

    ``field_errors`` maps each offending field to its message so the
    caller can show every error next to its field at once.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid checkout fields: {fields}")


class StorageError(Exception):
    """A key-value storage read or write failed."""


class CollaboratorError(Exception):
    """An external collaborator (AI service, backend) failed."""
