"""Data models."""

from .envelope import Edge, PostEnvelope, PostsEnvelope
from .product import Product

__all__ = ["Edge", "PostEnvelope", "PostsEnvelope", "Product"]
