"""Post service - Product Hunt listings as Product records."""

import logging

from ..clients.graphql import GraphQLClient
from ..config import PRODUCTHUNT_API_KEY
from ..models.envelope import PostEnvelope, PostsEnvelope
from ..models.product import Product
from ..queries import (
    NEWEST_POSTS_QUERY,
    post_details_query,
    posts_by_topic_query,
    ranked_posts_by_date_query,
    top_posts_by_date_query,
)

logger = logging.getLogger(__name__)

# Fields extracted per operation
SUMMARY_FIELDS = ("id", "name", "tagline")
DETAIL_FIELDS = ("name", "tagline", "description", "website")
TOPIC_FIELDS = ("id", "name", "slug", "tagline", "description", "website", "url", "thumbnail")
RANKED_FIELDS = ("id", "name", "tagline", "description", "website", "url")


class PostService:
    """Query Product Hunt posts and decode them into Products.

    The transport is any object with execute(query, api_key) -> dict that
    raises TransportError on failure. Defaults to GraphQLClient.
    """

    def __init__(self, api_key: str, transport=None):
        self.api_key = api_key
        self.transport = transport if transport is not None else GraphQLClient()

    @classmethod
    def from_env(cls, transport=None) -> "PostService":
        """Build a service from PRODUCTHUNT_API_KEY."""
        if not PRODUCTHUNT_API_KEY:
            raise ValueError("PRODUCTHUNT_API_KEY must be set in .env")
        return cls(PRODUCTHUNT_API_KEY, transport=transport)

    def list_newest(self) -> list[Product]:
        """Newest 10 posts (id, name, tagline)."""
        return self._list("newest", NEWEST_POSTS_QUERY, SUMMARY_FIELDS)

    def get_details(self, slug: str) -> Product | None:
        """
        Look up one post by slug.

        Returns None when no post matches; raises MalformedResponseError
        only when the response has no data object.
        """
        logger.debug(f"details: slug={slug}")
        payload = self.transport.execute(post_details_query(slug), self.api_key)
        envelope = PostEnvelope.decode(payload)
        if envelope.post is None:
            logger.debug(f"details: no post for slug={slug}")
            return None
        return Product.from_node(envelope.post, DETAIL_FIELDS)

    def list_by_topic(self, topic: str) -> list[Product]:
        """Newest 99 posts in a topic, full field set including thumbnail."""
        return self._list(f"topic={topic}", posts_by_topic_query(topic), TOPIC_FIELDS)

    def list_top_by_date(self, date: str) -> list[Product]:
        """Top 5 ranked posts of a UTC day (YYYY-MM-DD), id/name/tagline only."""
        return self._list(f"top date={date}", top_posts_by_date_query(date), SUMMARY_FIELDS)

    def list_ranked_by_date(self, date: str, limit: int = 5) -> list[Product]:
        """Top `limit` ranked posts of a UTC day, with description, website and url."""
        query = ranked_posts_by_date_query(date, limit)
        return self._list(f"ranked date={date} limit={limit}", query, RANKED_FIELDS)

    def _list(self, label: str, query: str, fields: tuple[str, ...]) -> list[Product]:
        """Run a posts connection query and extract `fields` from each node."""
        logger.debug(f"posts: {label}")
        payload = self.transport.execute(query, self.api_key)
        envelope = PostsEnvelope.decode(payload)
        products = [Product.from_node(node, fields) for node in envelope.nodes]
        logger.debug(f"posts: {label} -> {len(products)} products")
        return products
