"""Source health and latency probing."""

import asyncio
from typing import Dict, Sequence

from ..ingestion import RelayConfig, SourceFetcher
from ..models import Source, SourceStatus
from .aggregator import describe_failure, settle_all, timed_fetch
from .models import ProbeResult


class HealthProber:
    """Classify sources as available or unavailable and time them."""

    def __init__(self, fetcher: SourceFetcher) -> None:
        """Initialize prober."""
        self.fetcher = fetcher

    async def probe_one(self, source: Source, relay: RelayConfig) -> ProbeResult:
        """Run one full fetch-and-parse cycle with no query."""
        try:
            _, latency_ms = await timed_fetch(self.fetcher, source, relay)
        except Exception as e:
            return ProbeResult(status=SourceStatus.UNAVAILABLE, error=describe_failure(source, e))
        return ProbeResult(status=SourceStatus.AVAILABLE, latency_ms=latency_ms)

    async def probe_all(self, sources: Sequence[Source], relay: RelayConfig) -> Dict[str, ProbeResult]:
        """Probe every source concurrently and independently."""
        successes, _ = await settle_all([(source.id, self.probe_one(source, relay)) for source in sources])
        return dict(successes)

    def probe_all_sync(self, sources: Sequence[Source], relay: RelayConfig) -> Dict[str, ProbeResult]:
        """Synchronous wrapper for probe_all."""
        return asyncio.run(self.probe_all(sources, relay))
