"""Product model - one post returned by the Product Hunt API."""

from dataclasses import dataclass

from ..utils import stringify

# Always present when serialized; the rest are dropped when empty
REQUIRED_FIELDS = ("id", "name", "tagline")


@dataclass(frozen=True)
class Product:
    """A listed product. Fields an operation did not request stay empty."""

    id: str = ""
    name: str = ""
    tagline: str = ""
    slug: str = ""
    description: str = ""
    website: str = ""
    url: str = ""  # Canonical Product Hunt URL
    thumbnail: str = ""  # Thumbnail image URL

    @classmethod
    def from_node(cls, node: dict, fields: tuple[str, ...]) -> "Product":
        """
        Build a Product from a decoded post node.

        Args:
            node: The node mapping from the response
            fields: Names of the Product fields to extract

        Returns:
            Product with every requested field stringified, others empty.
        """
        values = {}
        for name in fields:
            if name == "thumbnail":
                values[name] = thumbnail_url(node)
            else:
                values[name] = stringify(node.get(name))
        return cls(**values)

    def to_dict(self) -> dict:
        """Serialize, omitting optional fields that are empty."""
        result = {name: getattr(self, name) for name in REQUIRED_FIELDS}
        for name in ("slug", "description", "website", "url", "thumbnail"):
            value = getattr(self, name)
            if value:
                result[name] = value
        return result


def thumbnail_url(node: dict) -> str:
    """Read thumbnail.url; empty when the sub-object is missing or not a mapping."""
    thumbnail = node.get("thumbnail")
    if not isinstance(thumbnail, dict):
        return ""
    return stringify(thumbnail.get("url"))
