"""
Contact GraphQL type definitions
"""

from collections.abc import Mapping
from typing import Any

import strawberry


@strawberry.type
class Contact:
    """Contact type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Contact":
        """Build a Contact from a ``contacts`` table row."""
        return cls(
            id=strawberry.ID(str(row["id"])),
            first_name=row["firstName"],
            last_name=row["lastName"],
            email=row["email"],
        )
