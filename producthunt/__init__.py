"""Product Hunt GraphQL client."""

from .clients import GraphQLClient
from .errors import (
    GraphQLResponseError,
    MalformedResponseError,
    ProductHuntError,
    TransportError,
)
from .models import Product
from .services import PostService

__all__ = [
    "GraphQLClient",
    "GraphQLResponseError",
    "MalformedResponseError",
    "PostService",
    "Product",
    "ProductHuntError",
    "TransportError",
]
