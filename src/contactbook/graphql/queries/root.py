"""
Root GraphQL query definitions
"""

import strawberry

from ..types.contact import Contact


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def contacts(self, info: strawberry.Info) -> list[Contact] | None:
        """Get every contact."""
        from ..resolvers.contact import resolve_contacts

        return await resolve_contacts(info)

    @strawberry.field
    async def contact(self, info: strawberry.Info, id: strawberry.ID) -> Contact | None:
        """Get a contact by ID."""
        from ..resolvers.contact import resolve_contact_by_id

        return await resolve_contact_by_id(info, id)
