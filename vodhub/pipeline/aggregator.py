"""Concurrent fan-out across catalog sources."""

import asyncio
import time
from typing import Awaitable, Dict, List, Optional, Sequence, Tuple, TypeVar

from ..errors import NoUsableSourcesError, VodHubError
from ..ingestion import RelayConfig, SourceFetcher
from ..models import Source, SourceKind, Video
from .models import FetchOutcome, SearchResult

K = TypeVar("K")
T = TypeVar("T")

CATEGORIES: Dict[str, Optional[str]] = {
    "home": None,
    "movies": "1",
    "series": "2",
    "variety": "3",
    "anime": "4",
}


async def settle_all(
    jobs: Sequence[Tuple[K, Awaitable[T]]],
) -> Tuple[List[Tuple[K, T]], List[Tuple[K, Exception]]]:
    """Run all jobs concurrently and wait for every one of them.

    Returns (successes, failures), each in completion order. A failing job
    never cancels or hides the others.
    """

    async def run(key: K, job: Awaitable[T]):
        try:
            return key, await job, None
        except Exception as e:
            return key, None, e

    successes: List[Tuple[K, T]] = []
    failures: List[Tuple[K, Exception]] = []
    for next_done in asyncio.as_completed([run(key, job) for key, job in jobs]):
        key, value, error = await next_done
        if error is None:
            successes.append((key, value))
        else:
            failures.append((key, error))
    return successes, failures


async def timed_fetch(
    fetcher: SourceFetcher,
    source: Source,
    relay: RelayConfig,
    query: Optional[str] = None,
    category_id: Optional[str] = None,
) -> Tuple[List[Video], int]:
    """Fetch from one source and report elapsed milliseconds."""
    started = time.perf_counter()
    videos = await fetcher.fetch(source, relay, query, category_id)
    return videos, int((time.perf_counter() - started) * 1000)


def describe_failure(source: Source, error: Exception) -> str:
    """Human-readable message for a failed source."""
    if isinstance(error, VodHubError):
        return str(error)
    return f"{source.name}: Unexpected error: {error}"


def group_by_source_name(videos: Sequence[Video]) -> Dict[str, List[Video]]:
    """Group videos by source name, keeping first-seen group order."""
    groups: Dict[str, List[Video]] = {}
    for video in videos:
        groups.setdefault(video.source_name, []).append(video)
    return groups


def purge_source_videos(videos: Sequence[Video], source_id: str) -> List[Video]:
    """Drop videos that came from a removed source."""
    return [video for video in videos if video.source_id != source_id]


def pick_browse_source(sources: Sequence[Source]) -> Optional[Source]:
    """First searchable CMS source, else any CMS source."""
    cms_sources = [s for s in sources if s.kind == SourceKind.CMS_API]
    for source in cms_sources:
        if source.is_searchable:
            return source
    return cms_sources[0] if cms_sources else None


class Aggregator:
    """Query many sources as one catalog."""

    def __init__(self, fetcher: SourceFetcher) -> None:
        """Initialize aggregator."""
        self.fetcher = fetcher

    async def search(self, sources: Sequence[Source], relay: RelayConfig, query: str) -> SearchResult:
        """Search every available or unknown source concurrently.

        Per-source failures are collected into SearchResult.errors; only an
        empty set of eligible sources raises. A blank query returns an empty
        result before eligibility is checked.
        """
        query = query.strip()
        if not query:
            return SearchResult()

        eligible = [s for s in sources if s.is_searchable]
        if not eligible:
            raise NoUsableSourcesError(
                "No usable sources. Add sources or re-test existing ones ('vodhub sources test')."
            )

        jobs = [(source, timed_fetch(self.fetcher, source, relay, query)) for source in eligible]
        successes, failures = await settle_all(jobs)

        result = SearchResult()
        for source, (videos, latency_ms) in successes:
            result.videos.extend(videos)
            result.outcomes.append(
                FetchOutcome(
                    source_id=source.id,
                    source_name=source.name,
                    success=True,
                    videos=videos,
                    latency_ms=latency_ms,
                )
            )
        for source, error in failures:
            message = describe_failure(source, error)
            result.errors.append(message)
            result.outcomes.append(
                FetchOutcome(source_id=source.id, source_name=source.name, success=False, error=message)
            )
        return result

    async def browse_category(
        self,
        sources: Sequence[Source],
        relay: RelayConfig,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Load one category page from the best available CMS source."""
        source = pick_browse_source(sources)
        if source is None:
            raise NoUsableSourcesError(
                "No CMS source available for category browsing. Live playlists have no categories."
            )
        return await self.fetcher.fetch(source, relay, category_id=category_id)

    def search_sync(self, sources: Sequence[Source], relay: RelayConfig, query: str) -> SearchResult:
        """Synchronous wrapper for search."""
        return asyncio.run(self.search(sources, relay, query))

    def browse_category_sync(
        self,
        sources: Sequence[Source],
        relay: RelayConfig,
        category_id: Optional[str] = None,
    ) -> List[Video]:
        """Synchronous wrapper for browse_category."""
        return asyncio.run(self.browse_category(sources, relay, category_id))
