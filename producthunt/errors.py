"""Errors raised by the Product Hunt client."""


class ProductHuntError(Exception):
    """Base class for all client errors."""


class TransportError(ProductHuntError):
    """The GraphQL request could not be completed or its body was not JSON."""


class MalformedResponseError(ProductHuntError):
    """Decoded response lacks the expected data/posts/edges path."""
    def __init__(self, missing: str, payload=None):
        self.missing = missing
        self.payload = payload
        super().__init__(f"invalid response format: missing '{missing}'")


class GraphQLResponseError(MalformedResponseError):
    """Response has no usable data and carries a GraphQL errors array."""
    def __init__(self, missing: str, errors: list, payload=None):
        self.errors = errors
        super().__init__(missing, payload=payload)

    def __str__(self) -> str:
        messages = "; ".join(
            str(e.get("message", e)) if isinstance(e, dict) else str(e)
            for e in self.errors
        )
        return f"{super().__str__()} (GraphQL errors: {messages})"
