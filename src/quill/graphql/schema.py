"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..auth.middleware import get_auth_context
from ..errors import ApiError
from ..logging import get_logger, set_user_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class QuillSchema(strawberry.Schema):
    """Schema that logs classified API errors quietly and everything else loudly."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, ApiError):
                logger.info(
                    "GraphQL request failed",
                    error=original.message,
                    status=original.status_code,
                    path=error.path,
                )
            else:
                logger.error(
                    "Unhandled GraphQL error",
                    error=str(error),
                    path=error.path,
                    exc_info=original,
                )


# Create the GraphQL schema
schema = QuillSchema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    This ensures that all type references can be resolved and catches
    circular reference errors early, causing the server to fail fast
    rather than returning errors at runtime.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        introspection_query = get_introspection_query()
        result = graphql_sync(graphql_schema, introspection_query)

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


# Create the GraphQL router for FastAPI integration
def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Resolve the bearer token once and hand the identity to resolvers."""
        auth_context = await get_auth_context(request.headers.get("authorization"))
        if auth_context.user_id is not None:
            set_user_context(str(auth_context.user_id))

        return {
            "request": request,
            "auth_context": auth_context,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=True,
        context_getter=get_context,
    )
