"""Fan-out search, category browsing and health probing."""

from .aggregator import (
    CATEGORIES,
    Aggregator,
    group_by_source_name,
    purge_source_videos,
    settle_all,
)
from .models import FetchOutcome, ProbeResult, SearchResult
from .prober import HealthProber

__all__ = [
    "Aggregator",
    "CATEGORIES",
    "FetchOutcome",
    "HealthProber",
    "ProbeResult",
    "SearchResult",
    "group_by_source_name",
    "purge_source_videos",
    "settle_all",
]
