"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input rejected before it reaches storage.

    Attributes:
        field: Name of the offending entity field (e.g. ``"code"``)
    """

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class StorageError(Exception):
    """The embedded store failed (I/O, corruption or schema mismatch).

    The underlying driver exception is chained as ``__cause__``.
    """


def required_field_missing(entity_label: str, field: str) -> str:
    """Return message for a required field left blank."""
    return f"{entity_label} {field} is required."


def storage_failure(action: str, detail: object) -> str:
    """Return message for a failed storage operation."""
    return f"Storage failure while {action}: {detail}"


def record_not_found(entity_label: str, code: str) -> str:
    """Return message for a code with no record."""
    return f"{entity_label} '{code}' not found"
