"""API clients for external services."""

from .graphql import GraphQLClient

__all__ = ["GraphQLClient"]
