from __future__ import annotations

import re

import strawberry

from ...database.statements import (
    DELETE_CONTACT,
    INSERT_CONTACT,
    SELECT_ALL_CONTACTS,
    SELECT_CONTACT_BY_ID,
    UPDATE_CONTACT,
)
from ...errors import ContactNotFoundError, ContactValidationError, StorageError
from ...logging import get_logger
from ..context import get_gateway_from_info
from ..types.contact import Contact

logger = get_logger(__name__)

# SQLite INTEGER PRIMARY KEY range for generated ids
MAX_CONTACT_ID = 2**63 - 1

_CONTACT_ID_PATTERN = re.compile(r"[0-9]+")


def parse_contact_id(value: str) -> int | None:
    """Convert a GraphQL ID into a row id, or None if it cannot name a row.

    Only plain ASCII digit strings within the storable id range are accepted,
    so an id never matches a row other than the one it spells out.
    """
    text = str(value)
    if not _CONTACT_ID_PATTERN.fullmatch(text):
        return None

    contact_id = int(text)
    if not 1 <= contact_id <= MAX_CONTACT_ID:
        return None
    return contact_id


def _contact_values(first_name: str, last_name: str, email: str) -> dict[str, str]:
    """Check the writable fields and key them by column name."""
    values = {"firstName": first_name, "lastName": last_name, "email": email}
    for field_name, value in values.items():
        if not value.strip():
            raise ContactValidationError(f"{field_name} must not be blank")
    return values


# Query resolvers
async def resolve_contacts(info: strawberry.Info) -> list[Contact]:
    """Resolve every contact in storage order."""
    gateway = get_gateway_from_info(info)
    rows = await gateway.fetch_all(SELECT_ALL_CONTACTS)
    return [Contact.from_row(row) for row in rows]


async def resolve_contact_by_id(info: strawberry.Info, id: str) -> Contact | None:
    """
    Resolve a single contact by its ID.

    A missing row is a null result, not an error.
    """
    contact_id = parse_contact_id(id)
    if contact_id is None:
        logger.info("Contact not found", contact_id=id, reason="invalid id")
        return None

    gateway = get_gateway_from_info(info)
    row = await gateway.fetch_one(SELECT_CONTACT_BY_ID, {"contact_id": contact_id})

    if row is None:
        logger.info("Contact not found", contact_id=contact_id)
        return None

    return Contact.from_row(row)


# Mutation resolvers
async def create_contact(
    info: strawberry.Info, first_name: str, last_name: str, email: str
) -> Contact:
    """
    Create a new contact.

    The id comes from the insert itself, so the returned contact is complete
    without a second lookup. A duplicate email raises UniqueConstraintViolation.
    """
    values = _contact_values(first_name, last_name, email)

    gateway = get_gateway_from_info(info)
    result = await gateway.execute(INSERT_CONTACT, values)

    if result.last_row_id is None:
        raise StorageError("Insert did not report the id of the new contact")

    logger.info("Contact created", contact_id=result.last_row_id)

    return Contact(
        id=strawberry.ID(str(result.last_row_id)),
        first_name=first_name,
        last_name=last_name,
        email=email,
    )


async def update_contact(
    info: strawberry.Info, id: str, first_name: str, last_name: str, email: str
) -> str:
    """
    Overwrite every field of an existing contact.

    Raises ContactNotFoundError when no row has the given id.
    """
    contact_id = parse_contact_id(id)
    if contact_id is None:
        raise ContactNotFoundError(id)

    values = _contact_values(first_name, last_name, email)

    gateway = get_gateway_from_info(info)
    result = await gateway.execute(UPDATE_CONTACT, {"contact_id": contact_id, **values})

    if result.rowcount == 0:
        logger.info("Contact not found for update", contact_id=contact_id)
        raise ContactNotFoundError(contact_id)

    logger.info("Contact updated", contact_id=contact_id)
    return f"Contact #{contact_id} updated"


async def delete_contact(info: strawberry.Info, id: str) -> str:
    """
    Permanently delete a contact.

    Raises ContactNotFoundError when no row has the given id.
    """
    contact_id = parse_contact_id(id)
    if contact_id is None:
        raise ContactNotFoundError(id)

    gateway = get_gateway_from_info(info)
    result = await gateway.execute(DELETE_CONTACT, {"contact_id": contact_id})

    if result.rowcount == 0:
        logger.info("Contact not found for delete", contact_id=contact_id)
        raise ContactNotFoundError(contact_id)

    logger.info("Contact deleted", contact_id=contact_id)
    return f"Contact #{contact_id} deleted"
