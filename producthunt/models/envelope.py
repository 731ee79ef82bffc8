"""Typed views over the GraphQL response envelope."""

from dataclasses import dataclass, field
from typing import Any

from ..errors import GraphQLResponseError, MalformedResponseError


@dataclass
class Edge:
    """Connection edge wrapping one post node."""
    node: dict[str, Any]

    @classmethod
    def decode(cls, raw: Any) -> "Edge | None":
        """Return None for an edge that is not a mapping or has no node mapping."""
        if not isinstance(raw, dict):
            return None
        node = raw.get("node")
        if not isinstance(node, dict):
            return None
        return cls(node=node)


@dataclass
class PostsEnvelope:
    """{"data": {"posts": {"edges": [...]}}}"""
    edges: list[Edge] = field(default_factory=list)

    @classmethod
    def decode(cls, payload: Any) -> "PostsEnvelope":
        """
        Decode a posts connection response.

        Raises MalformedResponseError naming the first missing segment.
        Malformed edges are dropped, the rest keep their order.
        """
        data = _data(payload)

        posts = data.get("posts")
        if not isinstance(posts, dict):
            raise MalformedResponseError("posts", payload=payload)

        raw_edges = posts.get("edges")
        if not isinstance(raw_edges, list):
            raise MalformedResponseError("edges", payload=payload)

        edges = []
        for raw in raw_edges:
            edge = Edge.decode(raw)
            if edge is not None:
                edges.append(edge)
        return cls(edges=edges)

    @property
    def nodes(self) -> list[dict[str, Any]]:
        return [edge.node for edge in self.edges]


@dataclass
class PostEnvelope:
    """{"data": {"post": {...}}}; post is None when nothing matched."""
    post: dict[str, Any] | None = None

    @classmethod
    def decode(cls, payload: Any) -> "PostEnvelope":
        data = _data(payload)
        post = data.get("post")
        if not isinstance(post, dict):
            return cls(post=None)
        return cls(post=post)


def _data(payload: Any) -> dict[str, Any]:
    """Return payload["data"] or raise, preferring GraphQL errors when present."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        return data

    errors = payload.get("errors") if isinstance(payload, dict) else None
    if isinstance(errors, list) and errors:
        raise GraphQLResponseError("data", errors, payload=payload)
    raise MalformedResponseError("data", payload=payload)
