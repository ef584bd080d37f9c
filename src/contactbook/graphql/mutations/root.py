"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.contact import Contact


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createContact")
    async def create_contact(
        self, info: strawberry.Info, first_name: str, last_name: str, email: str
    ) -> Contact | None:
        """Create a new contact."""
        from ..resolvers.contact import create_contact

        return await create_contact(info, first_name, last_name, email)

    @strawberry.mutation(name="updateContact")
    async def update_contact(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        first_name: str,
        last_name: str,
        email: str,
    ) -> str | None:
        """Replace every field of an existing contact."""
        from ..resolvers.contact import update_contact

        return await update_contact(info, id, first_name, last_name, email)

    @strawberry.mutation(name="deleteContact")
    async def delete_contact(self, info: strawberry.Info, id: strawberry.ID) -> str | None:
        """Delete a contact."""
        from ..resolvers.contact import delete_contact

        return await delete_contact(info, id)
