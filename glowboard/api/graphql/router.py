from typing import Any, Dict

from fastapi import Depends, Request
from strawberry.fastapi import GraphQLRouter

from glowboard.api.graphql.schema import schema
from glowboard.core.auth import get_store, get_user_gateway
from glowboard.db.document_store import DocumentStore
from glowboard.services.gateways.users import UserGateway


async def get_context(
    request: Request,
    store: DocumentStore = Depends(get_store),
    users: UserGateway = Depends(get_user_gateway)
) -> Dict[str, Any]:
    """
    Creates a context for GraphQL resolvers with the request, the document
    store and the user gateway bound to the caller's identity.
    """
    return {
        "request": request,
        "store": store,
        "users": users,
    }

# Create a GraphQL router for FastAPI
graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphiql=True  # Enable GraphiQL interface for development
)
