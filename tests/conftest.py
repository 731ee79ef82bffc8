"""Pytest fixtures for the Product Hunt client tests."""

import pytest

from producthunt.services import PostService


class FakeTransport:
    """Records executed queries and replays a canned payload."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def execute(self, query: str, api_key: str) -> dict:
        self.calls.append((query, api_key))
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def service(transport):
    return PostService("test-key", transport=transport)


@pytest.fixture
def posts_payload():
    """Wrap nodes in a posts connection envelope."""
    def build(*nodes):
        return {"data": {"posts": {"edges": [{"node": node} for node in nodes]}}}
    return build
