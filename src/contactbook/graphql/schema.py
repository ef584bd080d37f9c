"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLSchema
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..database.gateway import StorageGateway
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


# Root fields the transport and clients depend on
QUERY_FIELDS = frozenset({"contacts", "contact"})
MUTATION_FIELDS = frozenset({"createContact", "updateContact", "deleteContact"})


def validate_schema(graphql_schema: GraphQLSchema | None = None) -> None:
    """Fail fast when the assembled schema is invalid or lacks a root field.

    Raises:
        RuntimeError: If graphql-core reports errors or a root field is missing
    """
    graphql_schema = graphql_schema or schema._schema

    problems = [str(e) for e in gql_validate_schema(graphql_schema)]

    for root_type, expected in (
        (graphql_schema.query_type, QUERY_FIELDS),
        (graphql_schema.mutation_type, MUTATION_FIELDS),
    ):
        present = set(root_type.fields) if root_type is not None else set()
        problems.extend(f"missing root field '{name}'" for name in sorted(expected - present))

    if problems:
        logger.error("GraphQL schema validation failed", errors=problems)
        raise RuntimeError(f"GraphQL schema validation failed: {'; '.join(problems)}")

    logger.info("GraphQL schema validation successful")


async def execute_operation(
    gateway: StorageGateway,
    document: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> dict[str, Any]:
    """Execute one GraphQL request and return the response payload.

    The payload always has ``data``; ``errors`` is present when validation or
    any resolver failed, one entry per failure with its message and path.
    """
    result = await schema.execute(
        document,
        variable_values=variables,
        context_value={"gateway": gateway},
        operation_name=operation_name,
    )

    payload: dict[str, Any] = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    return payload


# Create the GraphQL router for FastAPI integration
def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "gateway": request.app.state.gateway,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=graphiql,
        context_getter=get_context,
    )
