"""Business logic services."""

from .posts import PostService

__all__ = ["PostService"]
