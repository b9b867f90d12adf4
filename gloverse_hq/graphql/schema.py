"""
GraphQL schema definition

gloverse_hq/graphql/schema.py

"""
import strawberry
from strawberry.fastapi import GraphQLRouter
from starlette.requests import HTTPConnection
from gloverse_hq.graphql.queries import Query
from gloverse_hq.graphql.subscriptions import Subscription
from gloverse_hq.core.config import settings
from gloverse_hq.core.security import is_valid_session
from typing import Dict, Any

# Session lookup works for both HTTP requests and subscription websockets
async def get_context(connection: HTTPConnection) -> Dict[str, Any]:
    """Get context with the operator session flag"""
    token = connection.cookies.get(settings.SESSION_COOKIE_NAME)
    return {"authenticated": is_valid_session(token)}

# Create the schema
schema = strawberry.Schema(
    query=Query,
    subscription=Subscription
)

# Create GraphQL router
graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql"  # Enable GraphiQL interface
)
