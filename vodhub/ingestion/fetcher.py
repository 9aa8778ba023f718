"""Source fetcher dispatching on source kind."""

import asyncio
from typing import List, Optional

import httpx

from ..cache import ResponseCache
from ..models import Source, SourceKind, Video
from .cms_fetcher import CmsFetcher
from .playlist_fetcher import PlaylistFetcher
from .relay import RelayConfig


class SourceFetcher:
    """Route fetches to the pipeline matching each source's kind."""

    def __init__(
        self,
        cache: Optional[ResponseCache] = None,
        timeout: float = 15.0,
        user_agent: str = "vodhub/0.1 (catalog aggregator)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize both pipelines with a shared cache and transport."""
        self.cache = cache
        self.cms = CmsFetcher(cache=cache, timeout=timeout, user_agent=user_agent, transport=transport)
        self.playlist = PlaylistFetcher(cache=cache, timeout=timeout, user_agent=user_agent, transport=transport)

    async def fetch(
        self,
        source: Source,
        relay: RelayConfig,
        query: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Fetch normalized videos from one source."""
        if source.kind == SourceKind.PLAYLIST:
            return await self.playlist.fetch(source, relay, query, category_id)
        return await self.cms.fetch(source, relay, query, category_id)

    def fetch_sync(
        self,
        source: Source,
        relay: RelayConfig,
        query: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Synchronous wrapper for fetch."""
        return asyncio.run(self.fetch(source, relay, query, category_id))
