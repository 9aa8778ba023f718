"""In-memory source registry."""

import uuid
from typing import Dict, Iterable, List, Optional
from urllib.parse import urlparse

from ..errors import DuplicateSourceError, InvalidSourceError, SourceNotFoundError
from ..models import Source, SourceKind, SourceStatus, infer_source_kind
from ..pipeline.models import ProbeResult


def default_source_name(url: str) -> str:
    """Derive a display name from the url host."""
    host = urlparse(url).hostname or url
    if host.startswith("www."):
        host = host[4:]
    return host


class SourceRegistry:
    """Ordered collection of sources, unique by url.

    The registry owns Source records. Status and latency are overwritten by
    whoever reports last; there is no transactional guarantee.
    """

    def __init__(self, sources: Optional[Iterable[Source]] = None) -> None:
        self._sources: List[Source] = []
        for source in sources or []:
            if self.find_by_url(source.url) is None:
                self._sources.append(source)

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self):
        return iter(list(self._sources))

    def list(self) -> List[Source]:
        return list(self._sources)

    def get(self, source_id: str) -> Source:
        for source in self._sources:
            if source.id == source_id:
                return source
        raise SourceNotFoundError(f"Source '{source_id}' not found")

    def find_by_url(self, url: str) -> Optional[Source]:
        for source in self._sources:
            if source.url == url:
                return source
        return None

    def add(self, url: str, name: Optional[str] = None, kind: Optional[SourceKind] = None) -> Source:
        """Register a new source; the url must not already be registered."""
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidSourceError(f"Invalid url: {url!r}")

        if self.find_by_url(url) is not None:
            raise DuplicateSourceError(f"Source with url {url} already exists")

        source = Source(
            id=uuid.uuid4().hex,
            name=(name or "").strip() or default_source_name(url),
            url=url,
            kind=kind or infer_source_kind(url),
            status=SourceStatus.UNKNOWN,
        )
        self._sources.append(source)
        return source

    def remove(self, source_id: str) -> Source:
        """Remove and return a source."""
        source = self.get(source_id)
        self._sources = [s for s in self._sources if s.id != source_id]
        return source

    def update_status(
        self,
        source_id: str,
        status: SourceStatus,
        latency_ms: Optional[int] = None,
    ) -> Source:
        """Overwrite status; latency is kept only for available sources."""
        source = self.get(source_id)
        source.status = status
        source.latency_ms = latency_ms if status == SourceStatus.AVAILABLE else None
        return source

    def mark_testing(self, source_ids: Optional[Iterable[str]] = None) -> None:
        """Flag sources as being probed (all when source_ids is None)."""
        ids = None if source_ids is None else set(source_ids)
        for source in self._sources:
            if ids is None or source.id in ids:
                source.status = SourceStatus.TESTING

    def apply_probe_results(self, results: Dict[str, ProbeResult]) -> None:
        """Record probe outcomes; ids no longer registered are ignored."""
        for source in self._sources:
            result = results.get(source.id)
            if result is not None:
                self.update_status(source.id, result.status, result.latency_ms)
