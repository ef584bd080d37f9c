"""
Parameterized statements issued against the contacts table.

Insert and update take their column values from the execution parameters,
keyed by column name (``firstName``, ``lastName``, ``email``).
"""

from sqlalchemy import bindparam, delete, insert, select, update

from ..dbmodels import contacts_table

SELECT_ALL_CONTACTS = select(contacts_table)

SELECT_CONTACT_BY_ID = select(contacts_table).where(contacts_table.c.id == bindparam("contact_id"))

INSERT_CONTACT = insert(contacts_table)

UPDATE_CONTACT = update(contacts_table).where(contacts_table.c.id == bindparam("contact_id"))

DELETE_CONTACT = delete(contacts_table).where(contacts_table.c.id == bindparam("contact_id"))
