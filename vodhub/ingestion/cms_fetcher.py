"""CMS-JSON source fetcher."""

import json
from typing import List, Optional

import httpx
from rich.console import Console

from ..cache import make_cache_key
from ..errors import FormatError
from ..models import Source, Video
from .base import BaseFetcher
from .cms_parser import transform_cms_response
from .relay import RelayConfig

console = Console(stderr=True)

# Plain-text refusals some CMS sites send instead of JSON for free-text search
SEARCH_UNSUPPORTED_MARKERS = ("暂不支持搜索", "禁止搜索")


def build_cms_url(base_url: str, query: Optional[str] = None, category_id: Optional[str] = None) -> str:
    """Append the detail action and either a search term or a category id."""
    url = httpx.URL(base_url).copy_add_param("ac", "detail")
    if query:
        url = url.copy_add_param("wd", query)
    elif category_id:
        url = url.copy_add_param("t", category_id)
    return str(url)


class CmsFetcher(BaseFetcher):
    """Fetch and normalize CMS-JSON catalogs."""

    async def fetch(
        self,
        source: Source,
        relay: RelayConfig,
        query: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Fetch one page of videos for a search term or a category."""
        query = (query or "").strip() or None
        cache_key = make_cache_key(source.url, query, category_id)
        cached = self._cached(cache_key)
        if cached is not None:
            return cached

        try:
            api_url = build_cms_url(source.url, query, category_id)
        except httpx.InvalidURL as e:
            raise FormatError(f"Invalid source url: {e}", source.name) from e

        text = await self._get_text(api_url, relay, source)

        try:
            data = json.loads(text)
        except ValueError as e:
            if query and any(marker in text for marker in SEARCH_UNSUPPORTED_MARKERS):
                console.print(f"[dim]{source.name} does not support search, returning no results[/dim]")
                return []
            if text.strip().startswith("<"):
                raise FormatError(
                    "API returned an unexpected format (XML/HTML). "
                    "Check that the source url is a valid CMS v10 JSON API",
                    source.name,
                ) from e
            raise FormatError(
                f"Failed to parse JSON response, the API may be misconfigured or empty ({e})",
                source.name,
            ) from e

        videos = transform_cms_response(data, source)
        self._store(cache_key, videos)
        return videos
