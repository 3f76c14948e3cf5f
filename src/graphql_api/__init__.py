"""
GraphQL API Module
Provides the GraphQL interface over the identity and checkout services.
"""

from graphql_api.resolvers import schema
from graphql_api.router import graphql_router

__all__ = ["graphql_router", "schema"]
