from __future__ import annotations

import pytest

from vodhub.cache import MemoryStore, ResponseCache
from vodhub.models import Source, SourceKind, SourceStatus


@pytest.fixture
def cms_source() -> Source:
    return Source(
        id="cms-1",
        name="Alpha CMS",
        url="http://cms.test/api.php/provide/vod",
        kind=SourceKind.CMS_API,
        status=SourceStatus.UNKNOWN,
    )


@pytest.fixture
def playlist_source() -> Source:
    return Source(
        id="live-1",
        name="Live TV",
        url="http://live.test/channels.m3u8",
        kind=SourceKind.PLAYLIST,
        status=SourceStatus.AVAILABLE,
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def cache(store: MemoryStore) -> ResponseCache:
    return ResponseCache(store)
