"""Product Hunt GraphQL API client."""

import logging

import requests

from ..config import PRODUCTHUNT_API_URL, PRODUCTHUNT_TIMEOUT
from ..errors import TransportError

logger = logging.getLogger(__name__)


class GraphQLClient:
    """Low-level GraphQL transport: one POST per query, JSON back."""

    def __init__(self, api_url: str = PRODUCTHUNT_API_URL, timeout: float | None = None):
        self.api_url = api_url
        self.timeout = timeout if timeout is not None else _parse_timeout(PRODUCTHUNT_TIMEOUT)

    def _get_headers(self, api_key: str) -> dict:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def execute(self, query: str, api_key: str) -> dict:
        """
        Execute a GraphQL query.

        The body is decoded whatever the HTTP status, so an errors-only
        envelope sent with a 4xx is returned for the caller to inspect.

        Args:
            query: Full query text
            api_key: Bearer token for the Authorization header

        Returns:
            The decoded JSON response body.

        Raises:
            TransportError: request failed or the body is not JSON
        """
        logger.debug(f"POST {self.api_url}")
        try:
            response = requests.post(
                self.api_url,
                json={"query": query},
                headers=self._get_headers(api_key),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"GraphQL request failed: {e}")
            raise TransportError(f"GraphQL request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(f"GraphQL request returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"GraphQL response is not JSON (HTTP {response.status_code}): {e}")
            raise TransportError(
                f"GraphQL response is not JSON (HTTP {response.status_code}): {e}"
            ) from e


def _parse_timeout(value: str) -> float:
    """Parse PRODUCTHUNT_TIMEOUT; raises ValueError naming the variable."""
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"PRODUCTHUNT_TIMEOUT must be a number of seconds, got {value!r}") from None
