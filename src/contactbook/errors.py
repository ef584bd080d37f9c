"""
Exception types raised by the storage gateway and the GraphQL resolvers.

Resolvers let these propagate; Strawberry reports each one as a field-level
error (message plus path) while sibling fields keep resolving.
"""


class ContactBookError(Exception):
    """Base class for all Contact Book errors."""


class StorageError(ContactBookError):
    """The storage backend failed to run a statement."""


class UniqueConstraintViolation(StorageError):
    """A write would duplicate a value that must be unique (contact email)."""


class ContactNotFoundError(ContactBookError):
    """No contact row matched the given id."""

    def __init__(self, contact_id: int | str):
        self.contact_id = contact_id
        super().__init__(f"Contact #{contact_id} not found")


class ContactValidationError(ContactBookError):
    """A contact argument failed validation before reaching storage."""
