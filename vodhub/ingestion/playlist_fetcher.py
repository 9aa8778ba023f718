"""M3U8 playlist source fetcher."""

from typing import List, Optional

from ..cache import make_cache_key
from ..models import Source, Video
from .base import BaseFetcher
from .playlist_parser import ensure_playlist_text, parse_playlist
from .relay import RelayConfig


class PlaylistFetcher(BaseFetcher):
    """Fetch and parse live channel playlists."""

    async def fetch(
        self,
        source: Source,
        relay: RelayConfig,
        query: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Fetch channels, optionally filtered by title.

        Live playlists have no categories, so a category request is empty.
        """
        if category_id:
            return []

        query = (query or "").strip() or None
        cache_key = make_cache_key(source.url, query)
        cached = self._cached(cache_key)
        if cached is not None:
            return cached

        text = await self._get_text(source.url, relay, source)
        videos = parse_playlist(ensure_playlist_text(text, source.name), source, query)
        self._store(cache_key, videos)
        return videos
