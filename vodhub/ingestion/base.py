"""Shared HTTP plumbing for source fetchers."""

from typing import List, Optional

import httpx

from ..cache import ResponseCache
from ..errors import TransportError
from ..models import Source, Video
from .relay import RelayConfig, build_request_url


class BaseFetcher:
    """Relay-aware, cache-aware text retrieval."""

    def __init__(
        self,
        cache: Optional[ResponseCache] = None,
        timeout: float = 15.0,
        user_agent: str = "vodhub/0.1 (catalog aggregator)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            cache: Response cache, or None to always hit the network
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            transport: Custom httpx transport (mock transports in tests)
        """
        self.cache = cache
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def _cached(self, key: str) -> Optional[List[Video]]:
        if self.cache is None:
            return None
        return self.cache.get(key)

    def _store(self, key: str, videos: List[Video]) -> None:
        if self.cache is not None:
            self.cache.put(key, videos)

    async def _get_text(self, target_url: str, relay: RelayConfig, source: Source) -> str:
        """GET target_url through the relay and return the body text."""
        request_url = build_request_url(relay, target_url)
        headers = {"User-Agent": self.user_agent}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=headers,
                transport=self.transport,
            ) as client:
                response = await client.get(request_url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Relay response error: HTTP {e.response.status_code} {e.response.reason_phrase}",
                source.name,
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError("Request timed out", source.name) from e
        except httpx.RequestError as e:
            raise TransportError(f"Relay request failed: {str(e) or type(e).__name__}", source.name) from e
