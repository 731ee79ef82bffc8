"""GraphQL query templates for the Product Hunt v2 API.

Parameters are interpolated into the query text as-is. Nothing is escaped,
so a value containing a double quote changes the query. Pass GraphQL
variables instead if callers can supply untrusted input.
"""

from .config import NEWEST_LIMIT, TOP_BY_DATE_LIMIT, TOPIC_LIMIT
from .utils import day_window

NEWEST_POSTS_QUERY = f"""
query {{
  posts(order: NEWEST, first: {NEWEST_LIMIT}) {{
    edges {{
      node {{
        id
        name
        tagline
      }}
    }}
  }}
}}
"""


def post_details_query(slug: str) -> str:
    """Single post lookup by slug."""
    return f"""
query {{
  post(slug: "{slug}") {{
    name
    tagline
    description
    website
  }}
}}
"""


def posts_by_topic_query(topic: str) -> str:
    """Newest posts in a topic, with the thumbnail sub-object."""
    return f"""
query {{
  posts(order: NEWEST, first: {TOPIC_LIMIT}, topic: "{topic}") {{
    edges {{
      node {{
        id
        name
        slug
        tagline
        description
        website
        url
        thumbnail {{
          url
        }}
      }}
    }}
  }}
}}
"""


def top_posts_by_date_query(date: str) -> str:
    """Top ranked posts of a UTC day, fixed size."""
    posted_after, posted_before = day_window(date)
    return f"""
query {{
  posts(order: RANKING, postedAfter: "{posted_after}", postedBefore: "{posted_before}", first: {TOP_BY_DATE_LIMIT}) {{
    edges {{
      node {{
        id
        name
        tagline
        description
        website
      }}
    }}
  }}
}}
"""


def ranked_posts_by_date_query(date: str, limit: int) -> str:
    """Top ranked posts of a UTC day, caller-chosen size."""
    posted_after, posted_before = day_window(date)
    return f"""
query {{
  posts(order: RANKING, postedAfter: "{posted_after}", postedBefore: "{posted_before}", first: {limit}) {{
    edges {{
      node {{
        id
        name
        tagline
        description
        website
        url
      }}
    }}
  }}
}}
"""
