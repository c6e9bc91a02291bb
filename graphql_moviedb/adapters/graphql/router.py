"""
Routeur FastAPI du endpoint GraphQL.

Ajoute au GraphQLRouter de strawberry le contexte par operation et le
formatage des erreurs selon le mode (production ou developpement).
"""

from fastapi import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionResult

from graphql_moviedb.adapters.graphql.context import get_context
from graphql_moviedb.adapters.graphql.errors import format_error
from graphql_moviedb.adapters.graphql.schema import schema


class MovieDatabaseRouter(GraphQLRouter):
    """
    Endpoint GraphQL de l'application.

    GraphiQL n'est servi qu'en developpement.
    """

    def __init__(self, development: bool = False, path: str = "/graphql") -> None:
        super().__init__(
            schema,
            path=path,
            context_getter=get_context,
            graphql_ide="graphiql" if development else None,
        )
        self.development = development

    async def process_result(
        self, request: Request, result: ExecutionResult
    ) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}
        if result.errors:
            data["errors"] = [format_error(error, self.development) for error in result.errors]
        if result.extensions:
            data["extensions"] = result.extensions
        return data
