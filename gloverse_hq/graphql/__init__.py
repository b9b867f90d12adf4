"""
GraphQL module initialization

gloverse_hq/graphql/__init__.py
"""
from gloverse_hq.graphql.schema import schema, graphql_app
from gloverse_hq.graphql.types import *
from gloverse_hq.graphql.queries import Query
from gloverse_hq.graphql.subscriptions import Subscription

__all__ = [
    "schema",
    "graphql_app",
    "Query",
    "Subscription"
]
